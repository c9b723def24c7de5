"""共享 fixture — 伪造的 Volt 组件集合

    volt/
      utils/index.ts
      button/index.vue, button/icon.vue
      panel/index.vue      import Button from '../button'
      card/index.vue       import { Icon } from '../button/icon' + '../utils'
      dialog/index.vue     '../button/icon' + '../panel'
      cyca/index.vue  <->  cycb/index.vue   循环 import
"""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

import voltvue.core.config as cfgmod

COMPONENTS: dict[str, dict[str, str]] = {
    "utils": {"index.ts": "export const ptViewMerge = () => {};\n"},
    "button": {
        "index.vue": "<template><button /></template>\n",
        "icon.vue": "<template><i /></template>\n",
    },
    "panel": {
        "index.vue": (
            "<script setup>\n"
            "import Button from '../button';\n"
            "import { ptViewMerge } from '../utils';\n"
            "</script>\n"
        ),
    },
    "card": {
        "index.vue": (
            "<script setup>\n"
            "import { Icon } from \"../button/icon\";\n"
            "import { ptViewMerge } from '../utils';\n"
            "</script>\n"
        ),
        "header.vue": "<template><header /></template>\n",
    },
    "dialog": {
        "index.vue": (
            "<script setup lang=\"ts\">\n"
            "import {\n"
            "    Icon,\n"
            "} from '../button/icon';\n"
            "import Panel from '../panel';\n"
            "</script>\n"
        ),
    },
    "cyca": {"index.vue": "import B from '../cycb';\n"},
    "cycb": {"index.vue": "import A from '../cyca';\n"},
}


def build_tree(root: Path, components: dict[str, dict[str, str]] | None = None) -> Path:
    """在 root 下按 {组件: {文件: 内容}} 生成组件集合，返回 root"""
    for name, files in (components or COMPONENTS).items():
        for rel, content in files.items():
            p = root / name / rel
            p.parent.mkdir(parents=True, exist_ok=True)
            p.write_text(content, encoding="utf-8")
    return root


@pytest.fixture
def volt_tree(tmp_path: Path) -> Path:
    return build_tree(tmp_path / "source" / "volt")


@pytest.fixture(autouse=True)
def _isolate(monkeypatch: pytest.MonkeyPatch):
    """每个用例使用独立的全局配置，并恢复 CLI 改动过的根日志器"""
    monkeypatch.setattr(cfgmod, "_current", None)
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def make_tree(tmp_path: Path):
    """返回按自定义组件表生成组件集合的工厂"""

    def _make(components: dict[str, dict[str, str]], name: str = "custom") -> Path:
        return build_tree(tmp_path / name, components)

    return _make
