"""统一异常体系

所有业务异常继承 VoltError，CLI 层据此输出一行友好提示并以非零码退出。
"""

from __future__ import annotations


class VoltError(Exception):
    """voltvue 基础异常"""

    code: str = "UNKNOWN"

    def __init__(self, message: str) -> None:
        super().__init__(message)


class ConfigError(VoltError):
    """配置文件缺失必填项或内容无效"""

    code = "CONFIG_ERROR"


class ValidationError(VoltError):
    """输入数据校验失败"""

    code = "VALIDATION_ERROR"


class FetchError(VoltError):
    """远程组件源拉取失败（致命）"""

    code = "FETCH_ERROR"


class ComponentNotFoundError(VoltError):
    """组件或组件集合目录不存在"""

    code = "COMPONENT_NOT_FOUND"


class ExecutionError(VoltError):
    """外部命令执行失败"""

    code = "EXECUTION_ERROR"
