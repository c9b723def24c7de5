"""文件复制工具 - 统一文件系统操作

通过 FileCopier 协议抽象存在性检查、建目录、递归复制和递归删除，
解析器和服务层只依赖协议，测试时可注入记录型实现。
"""

from __future__ import annotations

import logging
import shutil
from pathlib import Path
from typing import Protocol

logger = logging.getLogger(__name__)


# =========================================================================
# 文件复制器协议
# =========================================================================

class FileCopier(Protocol):
    """文件复制器协议，所有操作均为同步阻塞"""

    def exists(self, path: Path) -> bool:
        """路径是否存在"""
        ...

    def ensure_dir(self, path: Path) -> None:
        """创建目录（已存在则无操作）"""
        ...

    def copy_recursive(self, src: Path, dst: Path) -> None:
        """复制文件或目录树到 dst，目标已存在时合并覆盖"""
        ...

    def remove_recursive(self, path: Path) -> None:
        """删除文件或目录树（不存在则无操作）"""
        ...


# =========================================================================
# 默认实现: 本地文件系统
# =========================================================================

class LocalCopier:
    """本地文件系统复制器（默认实现）"""

    def exists(self, path: Path) -> bool:
        return Path(path).exists()

    def ensure_dir(self, path: Path) -> None:
        Path(path).mkdir(parents=True, exist_ok=True)

    def copy_recursive(self, src: Path, dst: Path) -> None:
        src, dst = Path(src), Path(dst)
        if src.is_dir():
            shutil.copytree(src, dst, dirs_exist_ok=True)
        else:
            dst.parent.mkdir(parents=True, exist_ok=True)
            shutil.copy2(src, dst)
        logger.debug("已复制: %s -> %s", src, dst)

    def remove_recursive(self, path: Path) -> None:
        p = Path(path)
        if p.is_dir() and not p.is_symlink():
            shutil.rmtree(p)
        elif p.exists() or p.is_symlink():
            p.unlink()
