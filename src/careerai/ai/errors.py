"""
错误分类：本地 schema 校验错误 + 单次调用的类型化失败。

所有失败只作用于一次调用，由调用方决定是否重试；不存在“静默默认值”。
"""
from __future__ import annotations

from typing import Any


class SchemaValidationError(ValueError):
    """值不符合 FieldSchema 声明。path 为出错字段的点分路径，如 sectionAnalyses.0.score。"""

    def __init__(self, path: str, message: str):
        self.path = path
        self.message = message
        super().__init__(f"{path}: {message}" if path else message)


class MissingField(SchemaValidationError):
    pass


class TypeMismatch(SchemaValidationError):
    pass


class InvalidEnumValue(SchemaValidationError):
    pass


class OutOfRange(SchemaValidationError):
    pass


class ToolNotFound(KeyError):
    """工具注册表中没有该名称。"""


class InvocationError(Exception):
    """一次 flow 调用的类型化失败；code 为对外稳定的错误码。"""

    code = "invocation_error"

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class InvalidInput(InvocationError):
    """输入未通过 input schema，未发起远程调用。"""

    code = "invalid_input"

    def __init__(self, error: SchemaValidationError):
        self.error = error
        super().__init__(str(error))


class EmptyResult(InvocationError):
    code = "empty_result"


class OutputSchemaViolation(InvocationError):
    """模型返回不符合 output schema；payload 保留未校验的原始结果用于排查。"""

    code = "output_schema_violation"

    def __init__(self, message: str, payload: Any = None):
        self.payload = payload
        super().__init__(message)


class ToolExecutionError(InvocationError):
    """模型调用的工具执行失败，且该工具未定义回退。"""

    code = "tool_execution_error"

    def __init__(self, tool: str, message: str):
        self.tool = tool
        super().__init__(f"tool {tool!r} failed: {message}")


class BackendUnavailable(InvocationError):
    """到生成服务的传输层失败（网络、鉴权、限流、服务端错误等）。"""

    code = "backend_unavailable"
