"""voltvue 日志配置

日志统一输出到 stderr，stdout 只留给命令结果（组件列表、安装汇总）。

环境变量:
    VOLTVUE_LOG_LEVEL   默认日志级别（INFO）
    VOLTVUE_LOG_JSON=1  输出结构化 JSON，便于 CI 流水线消费
"""

from __future__ import annotations

import json
import logging
import os
import sys
from datetime import datetime, timezone

LEVEL_ENV_VAR = "VOLTVUE_LOG_LEVEL"
JSON_ENV_VAR = "VOLTVUE_LOG_JSON"

_PLAIN_FORMAT = "[%(levelname)-7s] %(message)s"
# --verbose 时带上来源模块，便于定位是解析器还是拉取阶段的输出
_VERBOSE_FORMAT = "[%(levelname)-7s] %(name)s: %(message)s"


class JSONFormatter(logging.Formatter):
    """结构化 JSON 日志格式器

    每行一个对象: timestamp / level / logger / message / location，
    有异常时附带 exception。中文消息不转义。
    """

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(
                record.created, tz=timezone.utc
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "location": f"{record.module}:{record.lineno}",
        }
        if record.exc_info and record.exc_info[1]:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False)


def setup_logging(level: str = "INFO", json_output: bool = False, *, verbose: bool = False) -> None:
    """配置根日志器

    参数:
        level: 日志级别字符串，verbose=True 时忽略并使用 DEBUG
        json_output: 为 True 时使用 JSON 格式
        verbose: 输出调试日志，文本格式附带 logger 名称

    说明:
        自动清理已有 handlers，重复调用（如测试中多次调用 CLI）不会重复输出。
    """
    root = logging.getLogger()
    for handler in root.handlers[:]:
        root.removeHandler(handler)
        handler.close()

    root.setLevel(logging.DEBUG if verbose else getattr(logging, level.upper(), logging.INFO))

    handler = logging.StreamHandler(sys.stderr)
    if json_output:
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(_VERBOSE_FORMAT if verbose else _PLAIN_FORMAT))
    root.addHandler(handler)


def setup_cli_logging(verbose: bool = False) -> None:
    """CLI 入口使用：级别和格式取自环境变量"""
    setup_logging(
        level=os.getenv(LEVEL_ENV_VAR, "INFO"),
        json_output=os.getenv(JSON_ENV_VAR, "") == "1",
        verbose=verbose,
    )
