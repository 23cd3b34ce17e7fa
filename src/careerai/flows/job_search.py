"""职位搜索：按查询语句返回 5 条职位（示例申请链接）。"""
from __future__ import annotations

from careerai.ai import FlowDefinition, GenerationInvoker, InvocationResult, PromptTemplate
from careerai.ai.schema import array, obj, string

NAME = "job_search"

INPUT_SCHEMA = obj("SearchJobsInput", [
    string("query", 'The search query for jobs, e.g., "React developer in New York".'),
])

JOB_LISTING = obj("JobListing", [
    string("title", "The job title."),
    string("company", "The company offering the job."),
    string("location", "The location of the job."),
    string("description", "A brief description of the job."),
    string("applyUrl", "The URL to apply for the job."),
])

OUTPUT_SCHEMA = array("jobListings", JOB_LISTING, "A list of found job listings.")

TEMPLATE = PromptTemplate("""\
You are a helpful job search assistant. Your task is to find and return a list of 5 job listings based on the user's query. For each job, provide a title, company, location, a brief description, and a fictional application URL.

Query: {{ query }}

Return the results as a JSON array of job listings.
""")

FLOW = FlowDefinition(
    name=NAME,
    input_schema=INPUT_SCHEMA,
    output_schema=OUTPUT_SCHEMA,
    template=TEMPLATE,
    description="Find job listings for a free-text query.",
)


async def search_jobs(invoker: GenerationInvoker, query: str) -> InvocationResult:
    return await invoker.invoke(FLOW, {"query": query})
