"""add 服务 - 一次组件安装的完整流程

    1. 计算目标目录（--outdir > src/ > 项目根目录）
    2. 浅克隆组件源到临时目录
    3. "all": 整个组件集合原样复制，不做逐组件统计
       其他: 先复制 utils/，再交给 DependencyResolver 解析复制
    4. 返回 AddReport，由 CLI 输出汇总并决定退出码
"""

from __future__ import annotations

import logging
from pathlib import Path

from voltvue.core.config import Config, get_config
from voltvue.core.exceptions import ComponentNotFoundError, ValidationError
from voltvue.core.models import AddReport, AddRequest
from voltvue.core.resolver import DependencyResolver
from voltvue.services.source import GitSource, list_components
from voltvue.utils.fs import FileCopier, LocalCopier

logger = logging.getLogger(__name__)

ALL = "all"


class AddService:
    """组件安装服务"""

    def __init__(
        self,
        config: Config | None = None,
        *,
        source: GitSource | None = None,
        copier: FileCopier | None = None,
    ) -> None:
        self.config = config or get_config()
        self.copier = copier or LocalCopier()
        self.source = source or GitSource(
            self.config.repo_url, self.config.temp_dir, ref=self.config.repo_ref,
        )

    def add(self, req: AddRequest) -> AddReport:
        """安装请求的组件，返回执行汇总"""
        if not req.components:
            raise ValidationError("至少需要指定一个组件名或 all")

        target_dir = self.target_dir(req)
        location = self.install_location(req)
        logger.debug("组件: %s", ", ".join(req.components))
        logger.debug("目标目录: %s", target_dir)
        logger.debug("自动安装依赖: %s", "是" if req.follow_deps else "否")

        with self.source.materialize() as repo_dir:
            collection = repo_dir / self.config.collection_path
            if ALL in req.components:
                self._copy_all(collection, target_dir)
                return AddReport(
                    mode="all", target_dir=target_dir,
                    install_location=location, follow_deps=req.follow_deps,
                )

            utils_copied = self._copy_utils(collection, target_dir)
            resolver = DependencyResolver(
                collection, target_dir, self.copier,
                entry_name=self.config.entry_name,
                extension=self.config.extension,
                reserved=(self.config.utils_name,),
            )
            result = resolver.resolve(req.components, follow_deps=req.follow_deps)

        return AddReport(
            mode="components", target_dir=target_dir, install_location=location,
            follow_deps=req.follow_deps, utils_copied=utils_copied, result=result,
        )

    def available(self) -> list[str]:
        """拉取组件源并列出可用组件"""
        with self.source.materialize() as repo_dir:
            return list_components(
                repo_dir / self.config.collection_path,
                reserved=frozenset({self.config.utils_name}),
            )

    def target_dir(self, req: AddRequest) -> Path:
        cwd = Path(req.cwd)
        if req.outdir:
            base = cwd / req.outdir
        elif req.src_dir:
            base = cwd / self.config.src_dir_name
        else:
            base = cwd
        return base / self.config.target_name

    def install_location(self, req: AddRequest) -> str:
        """目标位置的可读描述"""
        name = self.config.target_name
        if req.outdir:
            return f"{req.outdir}/{name}"
        if req.src_dir:
            return f"{self.config.src_dir_name}/{name}"
        return f"根目录 {name}"

    def _copy_all(self, collection: Path, target_dir: Path) -> None:
        if not self.copier.exists(collection):
            raise ComponentNotFoundError(f"组件集合目录不存在: {self.config.collection_path}")
        self.copier.ensure_dir(target_dir)
        self.copier.copy_recursive(collection, target_dir)
        logger.debug("已复制全部组件: %s -> %s", collection, target_dir)

    def _copy_utils(self, collection: Path, target_dir: Path) -> bool:
        utils_src = collection / self.config.utils_name
        if not self.copier.exists(utils_src):
            logger.warning("组件源中未找到 %s 目录", self.config.utils_name)
            return False
        self.copier.ensure_dir(target_dir)
        self.copier.copy_recursive(utils_src, target_dir / self.config.utils_name)
        return True
