"""
简历洞察：ATS 总分 + 总评 + 分段打分与改进建议；可选按职位描述、公司信息定制分析。
"""
from __future__ import annotations

from careerai.ai import FlowDefinition, GenerationInvoker, InvocationResult, PromptTemplate
from careerai.ai.schema import array, number, obj, string

NAME = "resume_analysis"

INPUT_SCHEMA = obj("AnalyzeResumeInput", [
    string("resumeText", "The text content of the resume."),
    string("jobDescription", "The job description for which the resume is being analyzed (optional).", required=False),
    string("companyDetails", "Details about the company (optional).", required=False),
])

SECTION_ANALYSIS = obj("SectionAnalysis", [
    string("section", 'The name of the resume section being analyzed (e.g., "Summary", "Experience", "Skills").'),
    number("score", "The score for this specific section, from 0 to 100.", minimum=0, maximum=100),
    string("reasoning", "The reasoning behind the score for this section."),
    string("suggestions", "Actionable suggestions to improve this section."),
])

OUTPUT_SCHEMA = obj("AnalyzeResumeOutput", [
    number(
        "overallScore",
        "An estimated overall Applicant Tracking System (ATS) score for the resume (0-100).",
        minimum=0,
        maximum=100,
    ),
    string("overallSummary", "A brief, overall summary of the resume's strengths and weaknesses."),
    array(
        "sectionAnalyses",
        SECTION_ANALYSIS,
        "A point-wise breakdown of each section of the resume with scores, reasoning, and suggestions.",
    ),
])

TEMPLATE = PromptTemplate("""\
You are a resume expert specializing in providing detailed, scorable insights for job seekers.

You will analyze the resume and provide actionable suggestions to improve its chances of getting past Applicant Tracking Systems (ATS) and impressing recruiters.

Your analysis MUST be structured as follows:
1.  An "overallScore" for the entire resume (0-100).
2.  An "overallSummary" of the candidate's profile.
3.  A "sectionAnalyses" array for the key resume sections (e.g., Summary, Experience, Skills, Education). For each item in the array, you must provide a "section" name, a "score" for that section (0-100), clear "reasoning" for the score, and concrete, actionable "suggestions" for improvement.

{% if jobDescription %}
Tailor your entire analysis to the specific requirements of this job description:
{{ jobDescription }}

{% endif %}
{% if companyDetails %}
Also consider these company details in your analysis:
{{ companyDetails }}

{% endif %}
Analyze this resume:
---
{{ resumeText }}
---
""")

FLOW = FlowDefinition(
    name=NAME,
    input_schema=INPUT_SCHEMA,
    output_schema=OUTPUT_SCHEMA,
    template=TEMPLATE,
    description="ATS score and section-by-section feedback for a resume.",
)


async def analyze_resume(
    invoker: GenerationInvoker,
    resume_text: str,
    job_description: str | None = None,
    company_details: str | None = None,
) -> InvocationResult:
    data = {"resumeText": resume_text}
    if job_description:
        data["jobDescription"] = job_description
    if company_details:
        data["companyDetails"] = company_details
    return await invoker.invoke(FLOW, data)
