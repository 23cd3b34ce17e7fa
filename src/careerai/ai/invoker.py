"""
生成调用器：一次 flow 调用的完整请求/响应周期。

1. 输入按 input schema 校验，失败直接返回 InvalidInput，不发远程请求；
2. 用校验后的输入（加上 flow 派生字段）渲染模板；
3. prompt + output schema + 工具回调作为一次请求交给生成后端（flow 引用了未注册的工具时返回 ToolExecutionError）；
4. 结果为空返回 EmptyResult；
5. 结果按 output schema 校验，失败返回 OutputSchemaViolation（附原始结果）；
6. 有后处理则应用后处理，返回成功结果。

调用器本身不重试、不设超时、无共享可变状态；重试由调用方决定。
"""
from __future__ import annotations

import logging
from typing import Any

from careerai.core.tokens import estimate_prompt
from .backend import GenerationBackend, GenerationRequest
from .errors import (
    EmptyResult,
    InvalidInput,
    InvocationError,
    OutputSchemaViolation,
    SchemaValidationError,
    ToolExecutionError,
    ToolNotFound,
)
from .flow import FlowDefinition, InvocationResult
from .schema import is_empty, validate
from .tools import ToolRegistry

logger = logging.getLogger(__name__)


class GenerationInvoker:
    def __init__(self, backend: GenerationBackend, registry: ToolRegistry | None = None):
        self.backend = backend
        self.registry = registry or ToolRegistry()

    def check(self, flow: FlowDefinition) -> FlowDefinition:
        """启动时确认 flow 引用的工具都已注册；缺失时抛出 ToolNotFound。"""
        for name in flow.tools:
            self.registry.resolve(name)
        return flow

    def render(self, flow: FlowDefinition, data: dict[str, Any]) -> str:
        return flow.template.render(flow.context(data))

    async def invoke(self, flow: FlowDefinition, data: Any) -> InvocationResult:
        try:
            validated = validate(flow.input_schema, data)
        except SchemaValidationError as e:
            logger.info("flow %s: invalid input (%s)", flow.name, e)
            return InvocationResult.failed(flow.name, InvalidInput(e))

        prompt = self.render(flow, validated)
        if logger.isEnabledFor(logging.DEBUG):
            model_name = getattr(self.backend, "model_name", None)
            estimate = estimate_prompt(prompt, model_name)
            logger.debug(
                "flow %s: prompt ~%d tokens%s",
                flow.name,
                estimate.tokens,
                " (approximate)" if estimate.approximate else "",
            )

        try:
            tools = tuple(self.registry.bind(name) for name in flow.tools)
        except ToolNotFound as e:
            name = e.args[0] if e.args else "?"
            logger.warning("flow %s: tool %s is not registered", flow.name, name)
            return InvocationResult.failed(flow.name, ToolExecutionError(name, "tool is not registered"))

        request = GenerationRequest(
            flow=flow.name,
            prompt=prompt,
            output_schema=flow.output_schema,
            tools=tools,
        )
        logger.info("flow %s: sending request (tools=%s)", flow.name, list(flow.tools))
        try:
            raw = await self.backend.generate(request)
        except InvocationError as e:
            logger.warning("flow %s: %s: %s", flow.name, e.code, e)
            return InvocationResult.failed(flow.name, e)

        if is_empty(raw):
            logger.warning("flow %s: backend returned an empty result", flow.name)
            return InvocationResult.failed(flow.name, EmptyResult("backend returned an empty result"))

        try:
            value = validate(flow.output_schema, raw)
        except SchemaValidationError as e:
            logger.warning("flow %s: output schema violation (%s)", flow.name, e)
            return InvocationResult.failed(
                flow.name,
                OutputSchemaViolation(f"output does not match {flow.output_schema.name}: {e}", payload=raw),
            )

        if flow.post_process is not None:
            value = flow.post_process(value)
        logger.info("flow %s: ok", flow.name)
        return InvocationResult.success(flow.name, value)
