"""
职位发布文案生成 / 按指令改写。输出为纯文本文档，顶部带发布日期。
"""
from __future__ import annotations

from datetime import date
from typing import Any, Callable

from careerai.ai import FlowDefinition, GenerationInvoker, InvocationResult, PromptTemplate
from careerai.ai.schema import enum, obj, string

NAME = "job_posting"

JOB_TYPES = ("Full-time", "Part-time", "Contract", "Internship")

INPUT_SCHEMA = obj("JobPostingInput", [
    string("jobTitle", "The title of the job."),
    string("companyName", "The name of the company."),
    string("location", 'The location of the job (e.g., "San Francisco, CA", "Remote").'),
    string("salaryRange", "The salary range for the position.", required=False),
    enum("jobType", JOB_TYPES, "The type of employment."),
    string("description", "A general description of the company and the role."),
    string("responsibilities", "A list or description of the job responsibilities."),
    string("mustHaveSkills", "A comma-separated list of essential skills."),
    string("niceToHaveSkills", "A comma-separated list of skills that are nice to have.", required=False),
    string("userProfileId", "The ID of the user creating the job posting.", required=False),
    string("refinement", "An optional instruction to refine the previously generated posting.", required=False),
    string("previousPosting", "The previously generated job posting text to be refined.", required=False),
])

OUTPUT_SCHEMA = string("jobPosting", "The generated job posting text.")

TEMPLATE = PromptTemplate("""\
You are an expert job posting writer. Generate a compelling, professional, and well-structured job posting based on the following details. Include today's date at the top of the posting, formatted as "Posted on: {{ postedOn }}".

{% if refinement %}
You are refining a previous job posting. The user's instruction for refinement is: "{{ refinement }}".

The previous job posting was:
---
{{ previousPosting }}
---

Regenerate the entire job posting based on the original details AND the refinement instruction.
{% else %}
Generate a new job posting.
{% endif %}

Original Details:
Job Title: {{ jobTitle }}
Company Name: {{ companyName }}
Location: {{ location }}
Job Type: {{ jobType }}
{% if salaryRange %}
Salary Range: {{ salaryRange }}
{% endif %}

Company & Role Description:
{{ description }}

Responsibilities:
{{ responsibilities }}

Qualifications:
- Must-Have Skills: {{ mustHaveSkills }}
{% if niceToHaveSkills %}
- Nice-to-Have Skills: {{ niceToHaveSkills }}
{% endif %}

Structure the output clearly with sections for Description, Responsibilities, and Qualifications. Ensure the tone is engaging for potential candidates.
""")


def format_posted_on(day: date) -> str:
    """输出形如 October 19, 2026；不依赖平台相关的 %-d。"""
    return f"{day:%B} {day.day}, {day.year}"


def posted_on_context(today: Callable[[], date] = date.today) -> Callable[[dict[str, Any]], dict[str, Any]]:
    def _derive(data: dict[str, Any]) -> dict[str, Any]:
        return {"postedOn": format_posted_on(today())}
    return _derive


FLOW = FlowDefinition(
    name=NAME,
    input_schema=INPUT_SCHEMA,
    output_schema=OUTPUT_SCHEMA,
    template=TEMPLATE,
    derive=posted_on_context(),
    description="Generate or refine a job posting from employer details.",
)


async def generate_job_posting(invoker: GenerationInvoker, data: dict[str, Any]) -> InvocationResult:
    """data 使用表单字段名（jobTitle、mustHaveSkills 等）；改写时带上 refinement 与 previousPosting。"""
    return await invoker.invoke(FLOW, data)


async def refine_job_posting(
    invoker: GenerationInvoker,
    data: dict[str, Any],
    refinement: str,
    previous_posting: str,
) -> InvocationResult:
    return await invoker.invoke(FLOW, {**data, "refinement": refinement, "previousPosting": previous_posting})
