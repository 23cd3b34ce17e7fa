"""
LiteLLM 统一多平台模型：一套请求逻辑，换模型只改 model 字符串。

环境变量（任选其一即可）：OPENAI_API_KEY、ANTHROPIC_API_KEY、GEMINI_API_KEY 等，
LiteLLM 会自动读取，无需在代码里区分厂商。
模型名使用 LiteLLM 格式，例如：openai/gpt-4o、anthropic/claude-3-5-sonnet、gemini/gemini-1.5-pro。
"""
from __future__ import annotations

from typing import Any

from careerai.core.config import get_default_model


def litellm_model(model_name: str | None = None) -> Any:
    """
    供 PydanticAI Agent 使用的 LiteLLM 模型实例。
    model_name: 不传则使用 CAREERAI_DEFAULT_MODEL。
    """
    from pydantic_ai_litellm import LiteLLMModel

    return LiteLLMModel(model_name=model_name or get_default_model())
