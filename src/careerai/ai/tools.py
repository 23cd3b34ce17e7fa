"""
工具注册表：模型在一次生成过程中可按名称回调的函数。

注册表只负责「这次请求提供哪些工具」与「工具被调用时如何执行」：参数按 input schema 校验，
执行 handler，按回退策略处理空结果/异常，结果按 output schema 校验。
回退必须显式开启（FallbackPolicy），每次替换都会记 WARNING 日志。
"""
from __future__ import annotations

import inspect
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable

from .errors import SchemaValidationError, ToolExecutionError, ToolNotFound
from .schema import FieldSchema, is_empty, json_schema, validate

logger = logging.getLogger(__name__)


class FallbackPolicy(str, Enum):
    NONE = "none"
    ON_EMPTY = "on_empty"
    ON_ERROR = "on_error"
    ON_EMPTY_OR_ERROR = "on_empty_or_error"

    @property
    def covers_empty(self) -> bool:
        return self in (FallbackPolicy.ON_EMPTY, FallbackPolicy.ON_EMPTY_OR_ERROR)

    @property
    def covers_error(self) -> bool:
        return self in (FallbackPolicy.ON_ERROR, FallbackPolicy.ON_EMPTY_OR_ERROR)


@dataclass(frozen=True)
class ToolDefinition:
    """工具声明：handler 以关键字参数接收校验后的输入，可为同步或异步函数。"""
    name: str
    description: str
    input_schema: FieldSchema
    output_schema: FieldSchema
    handler: Callable[..., Any]
    fallback: Callable[[], Any] | None = None
    fallback_policy: FallbackPolicy = FallbackPolicy.NONE

    def __post_init__(self) -> None:
        if self.fallback_policy is not FallbackPolicy.NONE and self.fallback is None:
            raise ValueError(f"tool {self.name!r}: fallback policy {self.fallback_policy.value} needs a fallback")


class ToolRegistry:
    """名称 → ToolDefinition。启动时注册，之后只读。"""

    def __init__(self, tools: list[ToolDefinition] | None = None):
        self._tools: dict[str, ToolDefinition] = {}
        for tool in tools or []:
            self.register(tool)

    def register(self, tool: ToolDefinition) -> ToolDefinition:
        if tool.name in self._tools:
            raise ValueError(f"tool {tool.name!r} already registered")
        self._tools[tool.name] = tool
        return tool

    def resolve(self, name: str) -> ToolDefinition:
        try:
            return self._tools[name]
        except KeyError:
            raise ToolNotFound(name) from None

    def names(self) -> list[str]:
        return list(self._tools)

    def __contains__(self, name: object) -> bool:
        return name in self._tools

    def bind(self, name: str) -> "BoundTool":
        return BoundTool(self.resolve(name), self)

    async def call(self, name: str, arguments: dict[str, Any] | None = None) -> Any:
        """执行一次工具调用；失败且无回退时抛出 ToolExecutionError。"""
        tool = self.resolve(name)
        try:
            args = validate(tool.input_schema, arguments or {})
        except SchemaValidationError as e:
            raise ToolExecutionError(name, f"invalid arguments: {e}") from e

        try:
            result = tool.handler(**args)
            if inspect.isawaitable(result):
                result = await result
        except Exception as e:
            if not tool.fallback_policy.covers_error:
                raise ToolExecutionError(name, str(e) or type(e).__name__) from e
            logger.warning("tool %s failed (%s: %s); returning fallback value", name, type(e).__name__, e)
            result = tool.fallback()
        else:
            if is_empty(result) and tool.fallback_policy.covers_empty:
                logger.warning("tool %s returned an empty result; returning fallback value", name)
                result = tool.fallback()

        try:
            return validate(tool.output_schema, result)
        except SchemaValidationError as e:
            raise ToolExecutionError(name, f"invalid output: {e}") from e


@dataclass(frozen=True)
class BoundTool:
    """交给生成后端的回调：后端决定是否、何时调用。"""
    definition: ToolDefinition
    registry: ToolRegistry

    @property
    def name(self) -> str:
        return self.definition.name

    @property
    def description(self) -> str:
        return self.definition.description

    def parameters_json_schema(self) -> dict[str, Any]:
        return json_schema(self.definition.input_schema)

    async def __call__(self, **arguments: Any) -> Any:
        return await self.registry.call(self.definition.name, arguments)
