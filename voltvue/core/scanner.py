"""组件入口文件的相对 import 扫描

只识别指向同级组件的相对导入:

    import Button from '../button';
    import { Icon } from '../button/icon';
    import type {
        Foo,
    } from "../panel/header";
    import /* 注释 */ Card from '../card';

第一段为组件名，其后（若有）为组件内的子路径。
绑定部分可以是任意内容（含注释），但不能包含引号或分号。
"""

from __future__ import annotations

import re
from dataclasses import dataclass

_IMPORT_RE = re.compile(
    r"""\bimport\b\s*[^;'"]+?\s*\bfrom\s*['"]\.\./([^'"/.][^'"/]*)(?:/([^'"]+))?['"]""",
)


@dataclass(frozen=True)
class ImportRef:
    """一条相对 import 引用"""

    component: str
    subpath: str = ""


def scan_imports(text: str) -> list[ImportRef]:
    """按出现顺序返回文本中所有 ../<组件>[/<子路径>] 导入"""
    return [
        ImportRef(component=m.group(1), subpath=m.group(2) or "")
        for m in _IMPORT_RE.finditer(text)
    ]
