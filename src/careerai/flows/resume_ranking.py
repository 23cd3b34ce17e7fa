"""
简历排序（面向雇主）：模型先调用 getAllResumes 取回全部简历，再对每份简历排序并做差距分析。
后处理按 rank 升序排列，只保留前 10 份。
"""
from __future__ import annotations

from typing import Any

from careerai.ai import FlowDefinition, GenerationInvoker, InvocationResult, PromptTemplate
from careerai.ai.schema import array, number, obj, string
from .resume_retrieval import TOOL_NAME
from .shortcomings import OVERALL_ASSESSMENT, SHORTCOMINGS

NAME = "resume_ranking"

MAX_RANKED = 10

INPUT_SCHEMA = obj("RankResumesInput", [
    string("jobDescription", "The job description for which to rank the resumes."),
])

RANKED_RESUME = obj("RankedResume", [
    string("resume", "The resume that was ranked."),
    number("rank", "The rank of the resume (1 being the best)."),
    string("reason", "The reason for the resume ranking."),
    SHORTCOMINGS,
    OVERALL_ASSESSMENT,
])

OUTPUT_SCHEMA = array("rankedResumes", RANKED_RESUME, "An array of ranked resumes with reasons and gap analysis.")

TEMPLATE = PromptTemplate("""\
You are an expert resume ranker for employers. You will be given a job description.
Your task is to first use the '{{ toolName }}' tool to retrieve all resumes from the database.
Then, for each retrieved resume, perform two actions:
1.  Rank the resume from best to worst based on how well they match the job description.
2.  Perform a detailed gap analysis (shortcoming analysis) for each resume against the job description. For each identified shortcoming, you must specify the skill, its impact, a mitigation strategy, and a severity ('critical', 'high', 'moderate', or 'low'). Also include an 'overallAssessment'.

Job Description: {{ jobDescription }}

Return ONLY the top {{ maxRanked }} resumes.
Output the results as a JSON array. Each element in the array must contain the resume text, its rank, the reason for the rank, and the detailed gap analysis results ('shortcomings' and 'overallAssessment').
""")


def sort_by_rank(ranked: list[dict[str, Any]]) -> list[dict[str, Any]]:
    """模型不一定按名次输出：按 rank 升序（同名次保持原顺序），截取前 MAX_RANKED 份。"""
    return sorted(ranked, key=lambda r: r["rank"])[:MAX_RANKED]


FLOW = FlowDefinition(
    name=NAME,
    input_schema=INPUT_SCHEMA,
    output_schema=OUTPUT_SCHEMA,
    template=TEMPLATE,
    tools=(TOOL_NAME,),
    post_process=sort_by_rank,
    derive=lambda data: {"toolName": TOOL_NAME, "maxRanked": MAX_RANKED},
    description="Rank stored resumes against a job description with per-resume gap analysis.",
)


async def rank_resumes(invoker: GenerationInvoker, job_description: str) -> InvocationResult:
    return await invoker.invoke(FLOW, {"jobDescription": job_description})
