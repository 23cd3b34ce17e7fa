"""
配置：从环境变量读取，供生成调用层、工具注册表与 HTTP 入口使用。
"""
import logging
import os
from pathlib import Path

# 可选加载 .env（若存在）：先项目根（与 pyproject.toml 同层），再当前工作目录
_env_paths = [
    Path(__file__).resolve().parents[3] / ".env",  # 从 src/careerai/core 往上的项目根
    Path.cwd() / ".env",
]
for _p in _env_paths:
    if _p.exists():
        from dotenv import load_dotenv
        load_dotenv(_p)
        break

# 简历检索工具的回退策略取值（与 careerai.ai.tools.FallbackPolicy 一致）
FALLBACK_POLICIES = ("none", "on_empty", "on_error", "on_empty_or_error")


def get_default_model() -> str:
    """LiteLLM 格式的模型名，如 openai/gpt-4o、anthropic/claude-3-5-sonnet、gemini/gemini-1.5-pro。"""
    return os.getenv("CAREERAI_DEFAULT_MODEL", "openai/gpt-4o")


def resume_store_id() -> str:
    """简历存储：memory（默认，进程内）或 firestore。"""
    return (os.getenv("CAREERAI_RESUME_STORE") or "memory").strip().lower()


def resume_fallback_policy() -> str:
    """
    getAllResumes 工具的回退策略。
    none = 不回退（默认，线上部署）；on_empty / on_error / on_empty_or_error = 演示模式，
    存储为空或读取失败时返回内置示例简历。非法取值按 none 处理。
    """
    value = (os.getenv("CAREERAI_RESUME_FALLBACK") or "none").strip().lower()
    return value if value in FALLBACK_POLICIES else "none"


def firestore_project() -> str | None:
    return os.getenv("GOOGLE_CLOUD_PROJECT") or None


def log_level() -> str:
    return (os.getenv("CAREERAI_LOG_LEVEL") or "INFO").strip().upper()


def configure_logging() -> None:
    """按 CAREERAI_LOG_LEVEL 初始化根 logger；重复调用无副作用。"""
    logging.basicConfig(
        level=getattr(logging, log_level(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
