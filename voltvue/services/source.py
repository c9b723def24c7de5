"""组件源提供者 - 浅克隆远程仓库到临时目录

职责：
- git clone --depth 1 到固定临时目录
- 以上下文管理器形式保证任何退出路径都清理临时目录
- 列出组件集合中的可用组件
"""

from __future__ import annotations

import logging
import re
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from voltvue.core.exceptions import ExecutionError, FetchError, ValidationError
from voltvue.utils.fs import FileCopier, LocalCopier
from voltvue.utils.net import validate_url_scheme
from voltvue.utils.shell import CommandExecutor, run_cmd

logger = logging.getLogger(__name__)

_SAFE_REF_RE = re.compile(r"^[a-zA-Z0-9_./@\-]+$")


class GitSource:
    """Git 仓库来源"""

    def __init__(
        self,
        repo_url: str,
        temp_dir: str | Path,
        *,
        ref: str = "",
        executor: CommandExecutor | None = None,
        copier: FileCopier | None = None,
    ) -> None:
        validate_url_scheme(repo_url, context="组件源仓库")
        if ref and not _SAFE_REF_RE.match(ref):
            raise ValidationError(f"ref 包含非法字符: {ref}")
        self.repo_url = repo_url
        self.temp_dir = Path(temp_dir)
        self.ref = ref
        self.executor = executor
        self.copier = copier or LocalCopier()

    @contextmanager
    def materialize(self) -> Iterator[Path]:
        """克隆仓库并返回本地路径，退出时删除临时目录"""
        self.copier.remove_recursive(self.temp_dir)
        self.copier.ensure_dir(self.temp_dir)
        try:
            self._clone()
            yield self.temp_dir
        finally:
            self.copier.remove_recursive(self.temp_dir)
            logger.debug("已清理临时目录: %s", self.temp_dir)

    def _clone(self) -> None:
        cmd = ["git", "clone", "--depth", "1"]
        if self.ref:
            cmd += ["--branch", self.ref]
        cmd += [self.repo_url, str(self.temp_dir)]
        logger.info("拉取组件源: %s%s", self.repo_url, f"@{self.ref}" if self.ref else "")
        try:
            run_cmd(cmd, executor=self.executor, label="git clone")
        except (ExecutionError, OSError) as e:
            raise FetchError(f"组件源拉取失败: {self.repo_url} - {e}") from e


def list_components(collection_dir: Path, *, reserved: frozenset[str] = frozenset({"utils"})) -> list[str]:
    """列出组件集合目录下的组件名（排除保留目录和隐藏目录）"""
    if not collection_dir.is_dir():
        return []
    return sorted(
        d.name for d in collection_dir.iterdir()
        if d.is_dir() and not d.name.startswith(".") and d.name not in reserved
    )
