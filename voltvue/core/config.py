"""集中配置管理

远程仓库地址、组件集合在仓库内的路径、临时目录以及组件文件约定
统一在这里定义，支持从 YAML 文件加载 + 编程式覆盖。
"""

from __future__ import annotations

import logging
import os
import tempfile
from dataclasses import dataclass, field, fields

from voltvue.core.exceptions import ConfigError
from voltvue.utils.yaml_io import load_yaml

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = ".voltvue.yml"
CONFIG_ENV_VAR = "VOLTVUE_CONFIG"


def _default_temp_dir() -> str:
    return os.path.join(tempfile.gettempdir(), "primevue-volt-temp")


@dataclass
class Config:
    """voltvue 全局配置"""

    # 远程来源
    repo_url: str = "https://github.com/primefaces/primevue.git"
    repo_ref: str = ""  # 空表示默认分支
    collection_path: str = "apps/volt/volt"
    temp_dir: str = field(default_factory=_default_temp_dir)

    # 安装目标
    target_name: str = "volt"
    src_dir_name: str = "src"

    # 组件文件约定
    entry_name: str = "index"
    extension: str = ".vue"
    utils_name: str = "utils"

    # 自定义扩展 (放不到字段里的配置项)
    extra: dict = field(default_factory=dict)

    @classmethod
    def from_file(cls, path: str = DEFAULT_CONFIG_FILE) -> Config:
        """从 YAML 文件加载配置，不存在则返回默认"""
        data = load_yaml(path)
        if not data:
            return cls()
        known = {f.name for f in cls.__dataclass_fields__.values()} - {"extra"}
        matched = {k: v for k, v in data.items() if k in known}
        extra = {k: v for k, v in data.items() if k not in known}
        cfg = cls(**matched)
        cfg.extra = extra
        cfg.validate()
        return cfg

    def validate(self) -> None:
        """校验字段类型和必填项，不通过时抛 ConfigError"""
        wrong = [
            f.name for f in fields(self)
            if f.type == "str" and not isinstance(getattr(self, f.name), str)
        ]
        if wrong:
            raise ConfigError(f"配置项必须是字符串: {', '.join(wrong)}")
        required = (
            "repo_url", "collection_path", "temp_dir",
            "target_name", "entry_name", "utils_name",
        )
        missing = [name for name in required if not getattr(self, name).strip()]
        if missing:
            raise ConfigError(f"配置项不能为空: {', '.join(missing)}")
        if self.extension and not self.extension.startswith("."):
            raise ConfigError(f"extension 必须以 '.' 开头: {self.extension}")


# 全局单例，首次 import 时不加载文件；由 CLI 入口显式初始化
_current: Config | None = None


def get_config() -> Config:
    """获取当前配置（未初始化则返回默认值）"""
    global _current  # noqa: PLW0603
    if _current is None:
        _current = Config()
    return _current


def init_config(path: str | None = None) -> Config:
    """从文件初始化全局配置

    path 为空时依次取环境变量 VOLTVUE_CONFIG、当前目录下的 .voltvue.yml。
    """
    global _current  # noqa: PLW0603
    path = path or os.getenv(CONFIG_ENV_VAR) or DEFAULT_CONFIG_FILE
    _current = Config.from_file(path)
    logger.debug("配置已加载: %s", path)
    return _current
