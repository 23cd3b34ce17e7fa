"""
功能 flow 目录：每个功能一个固定的 FlowDefinition，按名称查找。

装配：build_invoker() 在启动时显式构造一次后端、工具注册表与调用器，
由调用方持有并传入各 flow 函数。
"""
from __future__ import annotations

from careerai.ai import FallbackPolicy, FlowDefinition, GenerationBackend, GenerationInvoker, ToolRegistry
from careerai.resumes.sources import ResumeStore, get_resume_store

from . import job_posting, job_search, job_suggestion, resume_insights, resume_ranking, shortcomings
from .job_posting import generate_job_posting, refine_job_posting
from .job_search import search_jobs
from .job_suggestion import suggest_jobs
from .resume_insights import analyze_resume
from .resume_ranking import rank_resumes
from .resume_retrieval import resume_retrieval_tool
from .shortcomings import analyze_shortcomings

FLOWS: dict[str, FlowDefinition] = {
    m.FLOW.name: m.FLOW
    for m in (resume_insights, job_posting, job_search, job_suggestion, resume_ranking, shortcomings)
}


def get_flow(name: str) -> FlowDefinition:
    """按名称取 flow；未知名称抛出 KeyError。"""
    try:
        return FLOWS[name]
    except KeyError:
        raise KeyError(f"未知 flow: {name}，支持 {', '.join(FLOWS)}") from None


def build_registry(
    store: ResumeStore | None = None,
    policy: FallbackPolicy | str | None = None,
) -> ToolRegistry:
    """注册全部工具；store / policy 不传则读配置。"""
    registry = ToolRegistry()
    registry.register(resume_retrieval_tool(store or get_resume_store(), policy))
    return registry


def build_invoker(
    backend: GenerationBackend | None = None,
    store: ResumeStore | None = None,
    policy: FallbackPolicy | str | None = None,
) -> GenerationInvoker:
    """构造调用器并确认每个 flow 引用的工具都已注册。backend 不传则用 LiteLLM 默认模型。"""
    if backend is None:
        from careerai.ai import PydanticAIBackend
        backend = PydanticAIBackend()
    invoker = GenerationInvoker(backend, build_registry(store, policy))
    for flow in FLOWS.values():
        invoker.check(flow)
    return invoker


__all__ = [
    "FLOWS",
    "get_flow",
    "build_registry",
    "build_invoker",
    "analyze_resume",
    "generate_job_posting",
    "refine_job_posting",
    "search_jobs",
    "suggest_jobs",
    "rank_resumes",
    "analyze_shortcomings",
    "resume_retrieval_tool",
]
