# 配置、LiteLLM 模型句柄、tiktoken 预估

from .config import (
    get_default_model,
    resume_store_id,
    resume_fallback_policy,
    firestore_project,
    configure_logging,
)
from .llm import litellm_model
from .tokens import PromptEstimate, count_tokens, estimate_prompt

__all__ = [
    "get_default_model",
    "resume_store_id",
    "resume_fallback_policy",
    "firestore_project",
    "configure_logging",
    "litellm_model",
    "count_tokens",
    "estimate_prompt",
    "PromptEstimate",
]
