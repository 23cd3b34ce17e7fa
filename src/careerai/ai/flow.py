"""
Flow 定义与调用结果。

FlowDefinition：一个功能固定的 (input schema, 模板, output schema, 工具, 后处理) 组合，
进程启动时创建，之后只读，按名称查找。
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Generic, TypeVar

from .errors import InvocationError
from .schema import FieldSchema
from .template import PromptTemplate

T = TypeVar("T")


@dataclass(frozen=True)
class FlowDefinition:
    name: str
    input_schema: FieldSchema
    output_schema: FieldSchema
    template: PromptTemplate
    tools: tuple[str, ...] = ()
    post_process: Callable[[Any], Any] | None = None
    # 在校验后的输入之外追加的模板变量，如发布日期
    derive: Callable[[dict[str, Any]], dict[str, Any]] | None = None
    description: str = ""

    def context(self, data: dict[str, Any]) -> dict[str, Any]:
        ctx = dict(data)
        if self.derive is not None:
            ctx.update(self.derive(data))
        return ctx

    def input_fields(self) -> list[str]:
        return [f.name for f in self.input_schema.fields]


@dataclass
class InvocationResult(Generic[T]):
    """一次调用的结果：value 或类型化的 failure，二者只有其一。"""
    flow: str
    value: T | None = None
    failure: InvocationError | None = field(default=None)

    @property
    def ok(self) -> bool:
        return self.failure is None

    def unwrap(self) -> T:
        if self.failure is not None:
            raise self.failure
        return self.value

    @classmethod
    def success(cls, flow: str, value: T) -> "InvocationResult[T]":
        return cls(flow=flow, value=value)

    @classmethod
    def failed(cls, flow: str, failure: InvocationError) -> "InvocationResult[T]":
        return cls(flow=flow, failure=failure)
