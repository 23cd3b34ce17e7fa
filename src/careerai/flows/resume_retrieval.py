"""
getAllResumes 工具：返回简历存储中的全部简历正文。

存储为空或读取失败时是否回退到内置示例简历，由 CAREERAI_RESUME_FALLBACK 显式配置
（默认 none，不回退）；每次回退由 ToolRegistry 记 WARNING 日志。
"""
from __future__ import annotations

import logging

from careerai.ai import FallbackPolicy, ToolDefinition
from careerai.ai.schema import array, obj, string
from careerai.core.config import resume_fallback_policy
from careerai.resumes.samples import sample_resumes
from careerai.resumes.sources import ResumeStore

logger = logging.getLogger(__name__)

TOOL_NAME = "getAllResumes"

INPUT_SCHEMA = obj("GetAllResumesInput", [])

OUTPUT_SCHEMA = array("resumes", string("resume", "The text content of a single resume."))


def resume_retrieval_tool(
    store: ResumeStore,
    policy: FallbackPolicy | str | None = None,
) -> ToolDefinition:
    """policy 不传则读配置。"""
    policy = FallbackPolicy(policy or resume_fallback_policy())

    def get_all_resumes() -> list[str]:
        logger.info("fetching all resumes from %s", type(store).__name__)
        texts = [r.resume_text for r in store.fetch_resumes()]
        logger.info("found %d resumes", len(texts))
        return texts

    return ToolDefinition(
        name=TOOL_NAME,
        description="Returns all resumes currently stored in the database.",
        input_schema=INPUT_SCHEMA,
        output_schema=OUTPUT_SCHEMA,
        handler=get_all_resumes,
        fallback=sample_resumes,
        fallback_policy=policy,
    )
