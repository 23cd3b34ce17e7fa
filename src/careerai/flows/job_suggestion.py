"""职位推荐：根据技能、经历、证书推荐最多 3 个职位并说明理由。"""
from __future__ import annotations

from typing import Any

from careerai.ai import FlowDefinition, GenerationInvoker, InvocationResult, PromptTemplate
from careerai.ai.schema import array, obj, string

NAME = "job_suggestion"

MAX_SUGGESTIONS = 3

INPUT_SCHEMA = obj("SuggestJobsInput", [
    string("skills", "A comma-separated list of the job seeker's skills."),
    string("experience", "A description of the job seeker's work experience and qualifications."),
    string("certificates", "A comma-separated list of the job seeker's certifications."),
])

SUGGESTED_JOB = obj("SuggestedJob", [
    string("jobTitle", "The title of the suggested job."),
    string("company", "The company offering the job."),
    string(
        "reason",
        "The AI's reasoning for suggesting this job to the user, based on their skills, experience, and certificates.",
    ),
])

OUTPUT_SCHEMA = array("suggestedJobs", SUGGESTED_JOB, "A list of suggested jobs with reasons.")

TEMPLATE = PromptTemplate("""\
You are an AI job suggestion agent. A job seeker has provided the following information:

Skills: {{ skills }}
Experience: {{ experience }}
Certifications: {{ certificates }}

Suggest jobs that are a good fit for their skills and experience, and explain why you think they're a good candidate for those jobs. Format each suggestion as a JSON object with 'jobTitle', 'company', and 'reason' fields. Return a JSON array of these job suggestions. Limit suggestions to 3.

Ensure the suggestions are diverse and cover a range of potential roles.
""")


def keep_top_suggestions(suggestions: list[dict[str, Any]]) -> list[dict[str, Any]]:
    # 模型偶尔多给，按返回顺序截断
    return suggestions[:MAX_SUGGESTIONS]


FLOW = FlowDefinition(
    name=NAME,
    input_schema=INPUT_SCHEMA,
    output_schema=OUTPUT_SCHEMA,
    template=TEMPLATE,
    post_process=keep_top_suggestions,
    description="Suggest up to three jobs from skills, experience and certificates.",
)


async def suggest_jobs(
    invoker: GenerationInvoker,
    skills: str,
    experience: str,
    certificates: str,
) -> InvocationResult:
    return await invoker.invoke(FLOW, {"skills": skills, "experience": experience, "certificates": certificates})
