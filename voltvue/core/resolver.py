"""组件依赖解析器

给定请求的组件列表，扫描每个组件入口文件中的相对 import，
计算需要复制的组件闭包，并通过 FileCopier 执行复制:

  - 请求的组件: 整个目录复制（FullComponent）
  - 被 import 的其他组件: 只复制实际引用的文件（SubFile）
      import X from '../button'       -> button/index.vue
      import X from '../button/icon'  -> button/icon.vue

遍历为广度优先；每个组件名在一次解析中至多入队一次，
因此循环 import 一定会终止。
"""

from __future__ import annotations

import logging
from collections import deque
from pathlib import Path, PurePosixPath
from typing import Iterable

from voltvue.core.models import FULL, SUB, CopyEntry, ResolveResult
from voltvue.core.scanner import scan_imports
from voltvue.utils.fs import FileCopier

logger = logging.getLogger(__name__)


def is_component_name(name: str) -> bool:
    """组件名必须是组件集合下的单级目录名"""
    return bool(name) and name not in (".", "..") and not any(sep in name for sep in "/\\")


class DependencyResolver:
    """组件依赖解析器 - 每次 resolve() 的状态互相独立，可重复调用"""

    def __init__(
        self,
        source_root: Path,
        target_root: Path,
        copier: FileCopier,
        *,
        entry_name: str = "index",
        extension: str = ".vue",
        reserved: Iterable[str] = ("utils",),
    ) -> None:
        self.source_root = Path(source_root)
        self.target_root = Path(target_root)
        self.copier = copier
        self.entry_name = entry_name
        self.extension = extension
        self.reserved = frozenset(reserved)

    def resolve(self, requested: Iterable[str], follow_deps: bool = True) -> ResolveResult:
        """解析并复制请求的组件及其依赖"""
        names = list(dict.fromkeys(requested))
        result = _ResolveRun(self, names, follow_deps).run()
        logger.debug(
            "解析完成: %d 个组件整体复制, %d 个依赖文件, %d 个失败",
            result.success_count, result.sub_file_count, result.failure_count,
        )
        return result

    def subfile_name(self, subpath: str) -> str:
        """import 子路径 -> 组件内文件名，已带后缀的保持不变"""
        if PurePosixPath(subpath).suffix:
            return subpath
        return f"{subpath}{self.extension}"

    @property
    def entry_file(self) -> str:
        return f"{self.entry_name}{self.extension}"


class _ResolveRun:
    """单次解析的可变状态（队列、已处理集合、计数）"""

    def __init__(self, resolver: DependencyResolver, requested: list[str], follow_deps: bool) -> None:
        self.r = resolver
        self.requested = set(requested)
        self.follow_deps = follow_deps
        self.queue: deque[str] = deque(requested)
        self.seen: set[str] = set(requested)
        self.processed_full: set[str] = set()
        self.processed_sub: dict[str, set[str]] = {}
        self.result = ResolveResult(requested=list(requested))

    def run(self) -> ResolveResult:
        while self.queue:
            component = self.queue.popleft()
            if not is_component_name(component):
                self._fail(component)
                continue
            if component in self.requested:
                self._copy_full(component)
            if self.follow_deps:
                self._discover(component)
        return self.result

    # ---- 复制 ----

    def _copy_full(self, component: str) -> None:
        if component in self.processed_full:
            return
        src = self.r.source_root / component
        if not self.r.copier.exists(src):
            self._fail(component)
            return

        dst = self.r.target_root / component
        self.r.copier.ensure_dir(dst.parent)
        self.r.copier.copy_recursive(src, dst)
        self.processed_full.add(component)
        self.result.full_components.append(component)
        self.result.plan.append(CopyEntry(kind=FULL, component=component, source=src, target=dst))
        self.result.success_count += 1
        logger.debug("已复制完整组件: %s", component)

    def _fail(self, component: str) -> None:
        logger.error("组件不存在: %s", component)
        self.result.failure_count += 1
        self.result.failed.append(component)

    def _copy_sub(self, component: str, rel_path: str) -> None:
        done = self.processed_sub.setdefault(component, set())
        if rel_path in done:
            return
        done.add(rel_path)

        src = self.r.source_root / component / rel_path
        if ".." in PurePosixPath(rel_path).parts or not self.r.copier.exists(src):
            logger.warning("依赖文件不存在: %s/%s", component, rel_path)
            self.result.missing_subfiles.append(f"{component}/{rel_path}")
            return

        dst = self.r.target_root / component / rel_path
        self.r.copier.ensure_dir(dst.parent)
        self.r.copier.copy_recursive(src, dst)
        self.result.sub_files.setdefault(component, []).append(rel_path)
        self.result.plan.append(CopyEntry(
            kind=SUB, component=component, source=src, target=dst, relative_path=rel_path,
        ))
        logger.debug("已复制依赖文件: %s/%s", component, rel_path)

    # ---- 依赖发现 ----

    def _enqueue(self, component: str) -> None:
        if component not in self.seen:
            self.seen.add(component)
            self.queue.append(component)

    def _discover(self, component: str) -> None:
        entry = self.r.source_root / component / self.r.entry_file
        if not self.r.copier.exists(entry):
            return

        text = entry.read_text(encoding="utf-8", errors="replace")
        for ref in scan_imports(text):
            dep = ref.component
            if dep in self.r.reserved:
                continue
            logger.debug(
                "发现依赖 %s -> %s%s", component, dep,
                f"/{ref.subpath}" if ref.subpath else "",
            )
            if dep in self.requested:
                continue

            if ref.subpath:
                self._copy_sub(dep, self.r.subfile_name(ref.subpath))
            else:
                # 默认导出只需要入口文件
                self._copy_sub(dep, self.r.entry_file)
            self._enqueue(dep)
