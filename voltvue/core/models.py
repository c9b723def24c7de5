"""数据模型

数据类:
- CopyEntry: 复制计划条目（整组件 / 单文件）
- ResolveResult: 一次依赖解析的计划与计数
- AddRequest / AddReport: add 命令的输入与汇总
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

FULL = "full"
SUB = "sub"


@dataclass(frozen=True)
class CopyEntry:
    """复制计划条目

    kind=full 时表示 FullComponent(component)，relative_path 为空；
    kind=sub 时表示 SubFile(component, relative_path)。
    """

    kind: str
    component: str
    source: Path
    target: Path
    relative_path: str = ""

    @property
    def label(self) -> str:
        if self.kind == SUB:
            return f"{self.component}/{self.relative_path}"
        return self.component


@dataclass
class ResolveResult:
    """依赖解析结果"""

    requested: list[str] = field(default_factory=list)
    plan: list[CopyEntry] = field(default_factory=list)
    success_count: int = 0
    failure_count: int = 0
    failed: list[str] = field(default_factory=list)
    missing_subfiles: list[str] = field(default_factory=list)
    full_components: list[str] = field(default_factory=list)
    sub_files: dict[str, list[str]] = field(default_factory=dict)

    @property
    def sub_file_count(self) -> int:
        """作为依赖复制的 (组件, 子路径) 数量"""
        return sum(len(paths) for paths in self.sub_files.values())

    def auto_full(self) -> list[str]:
        """不在请求列表中、却被整体复制的组件"""
        return [c for c in self.full_components if c not in self.requested]

    def auto_sub_files(self) -> dict[str, list[str]]:
        """不在请求列表中、作为依赖被部分复制的组件及其文件"""
        return {
            c: list(paths) for c, paths in self.sub_files.items()
            if c not in self.requested and paths
        }


@dataclass
class AddRequest:
    """add 命令请求参数"""

    components: list[str]
    src_dir: bool = True
    outdir: str = ""
    follow_deps: bool = True
    cwd: str = "."


@dataclass
class AddReport:
    """add 命令执行汇总"""

    mode: str  # "all" | "components"
    target_dir: Path
    install_location: str
    follow_deps: bool = True
    utils_copied: bool = False
    result: ResolveResult | None = None

    @property
    def status(self) -> str:
        """success / partial / failed"""
        if self.mode == "all":
            return "success"
        r = self.result or ResolveResult()
        copied = r.success_count > 0 or r.sub_file_count > 0
        if copied and r.failure_count == 0:
            return "success"
        if copied:
            return "partial"
        return "failed"

    @property
    def exit_code(self) -> int:
        return 1 if self.status == "failed" else 0
