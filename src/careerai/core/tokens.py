"""
tiktoken：渲染后的 prompt 在发出前先估一遍 token 数，便于排查超长简历、控制单次调用成本。

LiteLLM 模型名带厂商前缀（openai/gpt-4o），这里只取斜杠后的部分交给 tiktoken；
非 OpenAI 模型没有官方编码表，统一按 cl100k_base 估算。
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

logger = logging.getLogger(__name__)

_FALLBACK_ENCODING = "cl100k_base"
# 无编码表时按英文 prompt 约 4 字符 / token 估算
_CHARS_PER_TOKEN = 4


@dataclass(frozen=True)
class PromptEstimate:
    tokens: int
    cost: float = 0.0
    approximate: bool = False


def _load_encoding(model_name: Optional[str]):
    import tiktoken

    base = (model_name or "").strip().lower().rsplit("/", 1)[-1]
    try:
        return tiktoken.encoding_for_model(base) if base else tiktoken.get_encoding(_FALLBACK_ENCODING)
    except KeyError:
        return tiktoken.get_encoding(_FALLBACK_ENCODING)


@lru_cache(maxsize=32)
def _get_encoding_for_model(model_name: Optional[str] = None):
    """
    编码表需联网下载；离线或下载失败时返回 None，由调用方走近似估算。
    None 同样进缓存，离线时每个模型只尝试下载一次。
    """
    try:
        return _load_encoding(model_name)
    except (OSError, ValueError) as e:
        logger.debug("tiktoken encoding unavailable for %s: %s", model_name, e)
        return None


def count_tokens(text: str, model_name: Optional[str] = None) -> int:
    if not text:
        return 0
    enc = _get_encoding_for_model(model_name)
    if enc is None:
        return max(1, len(text) // _CHARS_PER_TOKEN)
    return len(enc.encode(text))


def estimate_prompt(
    prompt: str,
    model_name: Optional[str] = None,
    price_per_1k_input: Optional[float] = None,
) -> PromptEstimate:
    """
    估算一次请求的输入 token 数与成本（美元）。
    price_per_1k_input 不传则成本为 0；approximate 为 True 表示未能加载编码表。
    """
    approximate = bool(prompt) and _get_encoding_for_model(model_name) is None
    tokens = count_tokens(prompt, model_name)
    cost = tokens / 1000.0 * price_per_1k_input if price_per_1k_input else 0.0
    return PromptEstimate(tokens=tokens, cost=cost, approximate=approximate)
