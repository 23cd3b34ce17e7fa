"""
简历差距分析（面向雇主）：逐项列出缺失/薄弱技能、影响、公司侧的弥补措施与严重程度，并给出总体评价。
"""
from __future__ import annotations

from careerai.ai import FlowDefinition, GenerationInvoker, InvocationResult, PromptTemplate
from careerai.ai.schema import array, enum, obj, string

NAME = "shortcoming_analysis"

SEVERITIES = ("critical", "high", "moderate", "low")

SHORTCOMING = obj("Shortcoming", [
    string("skill", "The missing or weak skill."),
    string("impact", "The potential impact of this shortcoming on job performance."),
    string("mitigation", "Suggestions on how the company can mitigate this shortcoming (training, mentoring, etc.)."),
    enum("severity", SEVERITIES, "The severity level of the shortcoming"),
])

SHORTCOMINGS = array("shortcomings", SHORTCOMING, "An array of identified shortcomings in the resume.")

OVERALL_ASSESSMENT = string(
    "overallAssessment",
    "An overall assessment of the candidate, considering their strengths and weaknesses.",
)

INPUT_SCHEMA = obj("AnalyzeResumeShortcomingsInput", [
    string("resumeText", "The text content of the resume to analyze."),
    string("jobDescription", "The job description for which the resume is being evaluated."),
])

OUTPUT_SCHEMA = obj("AnalyzeResumeShortcomingsOutput", [SHORTCOMINGS, OVERALL_ASSESSMENT])

TEMPLATE = PromptTemplate("""\
You are an AI resume analyst, tasked with identifying shortcomings in a candidate's resume and suggesting how the company can address them. Consider the job description carefully.

Job Description: {{ jobDescription }}

Resume Text: {{ resumeText }}

Analyze the resume and identify any missing skills, experiences, or qualifications that might hinder the candidate's performance in the role. For each shortcoming, assess its potential impact and suggest specific actions the company can take to mitigate it (e.g., training programs, mentoring, on-the-job learning).
Also add the severity of the shortcoming as critical, high, moderate, or low.

Return "shortcomings" and "overallAssessment", focusing on actionable insights for the employer.

Avoid generic or obvious recommendations. Focus on providing insightful and practical advice tailored to the specific job description and candidate profile.
""")

FLOW = FlowDefinition(
    name=NAME,
    input_schema=INPUT_SCHEMA,
    output_schema=OUTPUT_SCHEMA,
    template=TEMPLATE,
    description="Employer-side gap analysis of one resume against a job description.",
)


async def analyze_shortcomings(
    invoker: GenerationInvoker,
    resume_text: str,
    job_description: str,
) -> InvocationResult:
    return await invoker.invoke(FLOW, {"resumeText": resume_text, "jobDescription": job_description})
