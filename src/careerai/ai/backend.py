"""
生成后端：把「渲染后的 prompt + 期望输出结构 + 可用工具」交给模型，拿回结构化结果。

PydanticAIBackend：每次请求建一个 PydanticAI Agent，output_type 由 output schema 动态生成，
AI 只返回结构化结果；工具通过回调注册给 Agent，是否调用、调用几次由模型决定，
中间的工具往返对调用方不可见。模型经 LiteLLM 统一切换（openai/anthropic/gemini 等），
也可注入任意 PydanticAI 模型（测试里用 FunctionModel）。
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol

from pydantic_core import to_jsonable_python

from careerai.core.config import get_default_model
from careerai.core.llm import litellm_model
from .errors import BackendUnavailable, InvocationError, OutputSchemaViolation
from .schema import FieldSchema, python_type
from .tools import BoundTool


@dataclass(frozen=True)
class GenerationRequest:
    flow: str
    prompt: str
    output_schema: FieldSchema
    tools: tuple[BoundTool, ...] = ()


class GenerationBackend(Protocol):
    async def generate(self, request: GenerationRequest) -> Any:
        """返回 JSON 形态的结果（dict / list / str / None）；失败抛出 InvocationError 子类。"""
        ...


def _find_invocation_error(exc: BaseException) -> InvocationError | None:
    """工具里抛出的 InvocationError 可能被框架包进 ExceptionGroup 或 __cause__ 链。"""
    stack: list[BaseException] = [exc]
    seen: set[int] = set()
    while stack:
        current = stack.pop()
        if id(current) in seen:
            continue
        seen.add(id(current))
        if isinstance(current, InvocationError):
            return current
        stack.extend(getattr(current, "exceptions", ()))
        if current.__cause__ is not None:
            stack.append(current.__cause__)
    return None


def _as_agent_tool(tool: BoundTool):
    from pydantic_ai import Tool

    async def _call(**arguments: Any) -> Any:
        return await tool(**arguments)

    return Tool.from_schema(
        _call,
        name=tool.name,
        description=tool.description,
        json_schema=tool.parameters_json_schema(),
    )


class PydanticAIBackend:
    """生产用后端。启动时构造一次，通过 GenerationInvoker 注入到各 flow。"""

    def __init__(self, model: Any = None, model_name: str | None = None):
        self.model_name = model_name or get_default_model()
        self._model = model

    @property
    def model(self) -> Any:
        # 懒加载，避免导入期就要求 LiteLLM 与 API Key
        if self._model is None:
            self._model = litellm_model(self.model_name)
        return self._model

    def _agent(self, request: GenerationRequest):
        from pydantic_ai import Agent

        return Agent(
            model=self.model,
            output_type=python_type(request.output_schema),
            tools=[_as_agent_tool(t) for t in request.tools],
            name=request.flow,
        )

    async def generate(self, request: GenerationRequest) -> Any:
        from pydantic_ai.exceptions import UnexpectedModelBehavior

        agent = self._agent(request)
        try:
            result = await agent.run(request.prompt)
        except InvocationError:
            raise
        except UnexpectedModelBehavior as e:
            raise OutputSchemaViolation(
                f"model output did not match {request.output_schema.name}: {getattr(e, 'message', e)}",
                payload=getattr(e, "body", None),
            ) from e
        except Exception as e:
            inner = _find_invocation_error(e)
            if inner is not None:
                raise inner from e
            raise BackendUnavailable(f"{type(e).__name__}: {e}") from e
        return to_jsonable_python(result.output)
