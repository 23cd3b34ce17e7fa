"""
功能 flow：目录、模板条件块、职位发布日期、推荐上限、简历排序后处理，以及各 flow 便捷函数。
"""
import asyncio
import dataclasses
from datetime import date

import pytest

from careerai.ai import InvalidEnumValue
from careerai.flows import (
    FLOWS,
    analyze_resume,
    analyze_shortcomings,
    build_invoker,
    generate_job_posting,
    get_flow,
    rank_resumes,
    refine_job_posting,
    search_jobs,
    suggest_jobs,
)
from careerai.flows.job_posting import format_posted_on, posted_on_context
from careerai.flows.job_suggestion import MAX_SUGGESTIONS, keep_top_suggestions
from careerai.flows.resume_ranking import MAX_RANKED, sort_by_rank
from careerai.resumes.samples import SAMPLE_RESUMES

from conftest import ScriptedBackend


def _ranked(rank, text=None):
    return {
        "resume": text or f"resume {rank}",
        "rank": rank,
        "reason": "matches stack",
        "shortcomings": [
            {"skill": "Kubernetes", "impact": "slower ops ramp-up", "mitigation": "pair with SRE", "severity": "moderate"},
        ],
        "overallAssessment": "good fit",
    }


# ──────────────────────────────────────────────
# 1. 目录与装配
# ──────────────────────────────────────────────

def test_flow_catalog():
    assert set(FLOWS) == {
        "resume_analysis",
        "job_posting",
        "job_search",
        "job_suggestion",
        "resume_ranking",
        "shortcoming_analysis",
    }


def test_get_flow_unknown():
    with pytest.raises(KeyError):
        get_flow("cover_letter")


def test_build_invoker_registers_resume_tool(store):
    invoker = build_invoker(ScriptedBackend(), store=store, policy="none")
    assert "getAllResumes" in invoker.registry
    assert FLOWS["resume_ranking"].tools == ("getAllResumes",)


# ──────────────────────────────────────────────
# 2. 简历洞察
# ──────────────────────────────────────────────

class TestResumeAnalysis:
    def test_prompt_without_optional_context(self, make_invoker, resume_analysis_output):
        backend = ScriptedBackend(resume_analysis_output)
        result = asyncio.run(analyze_resume(make_invoker(backend), "Name: Jane\nSkills: Python, SQL, Tableau"))
        assert result.ok
        prompt = backend.requests[0].prompt
        assert "Skills: Python, SQL, Tableau" in prompt
        assert "Tailor your entire analysis" not in prompt
        assert "company details" not in prompt

    def test_prompt_with_job_and_company(self, make_invoker, resume_analysis_output):
        backend = ScriptedBackend(resume_analysis_output)
        asyncio.run(analyze_resume(
            make_invoker(backend),
            "Name: Jane",
            job_description="Senior Data Analyst",
            company_details="Fintech, 200 people",
        ))
        prompt = backend.requests[0].prompt
        assert "Tailor your entire analysis to the specific requirements of this job description:\nSenior Data Analyst" in prompt
        assert "Fintech, 200 people" in prompt


# ──────────────────────────────────────────────
# 3. 职位发布
# ──────────────────────────────────────────────

class TestJobPosting:
    def test_format_posted_on(self):
        assert format_posted_on(date(2026, 10, 19)) == "October 19, 2026"
        assert format_posted_on(date(2026, 3, 5)) == "March 5, 2026"

    def test_posted_on_uses_clock(self):
        derive = posted_on_context(lambda: date(2026, 10, 19))
        assert derive({}) == {"postedOn": "October 19, 2026"}

    def test_prompt_has_date_and_new_posting_branch(self, make_invoker, job_posting_input):
        backend = ScriptedBackend("Posted on: today\n\nSenior Python Engineer")
        flow = dataclasses.replace(FLOWS["job_posting"], derive=posted_on_context(lambda: date(2026, 10, 19)))
        result = asyncio.run(make_invoker(backend).invoke(flow, job_posting_input))
        assert result.value.startswith("Posted on:")
        prompt = backend.requests[0].prompt
        assert 'formatted as "Posted on: October 19, 2026"' in prompt
        assert "Generate a new job posting." in prompt
        assert "Salary Range" not in prompt
        assert "Nice-to-Have" not in prompt
        assert "Must-Have Skills: Python, FastAPI, PostgreSQL" in prompt

    def test_default_flow_posts_today(self, make_invoker, job_posting_input):
        backend = ScriptedBackend("posting")
        asyncio.run(generate_job_posting(make_invoker(backend), job_posting_input))
        assert f"Posted on: {format_posted_on(date.today())}" in backend.requests[0].prompt

    def test_refinement_branch(self, make_invoker, job_posting_input):
        backend = ScriptedBackend("refined posting")
        result = asyncio.run(refine_job_posting(
            make_invoker(backend),
            {**job_posting_input, "salaryRange": "$150k-$180k"},
            refinement="Make it shorter",
            previous_posting="Old posting text",
        ))
        assert result.value == "refined posting"
        prompt = backend.requests[0].prompt
        assert 'The user\'s instruction for refinement is: "Make it shorter"' in prompt
        assert "Old posting text" in prompt
        assert "Generate a new job posting." not in prompt
        assert "Salary Range: $150k-$180k" in prompt

    def test_invalid_job_type(self, make_invoker, job_posting_input):
        backend = ScriptedBackend("posting")
        result = asyncio.run(generate_job_posting(make_invoker(backend), {**job_posting_input, "jobType": "Gig"}))
        assert isinstance(result.failure.error, InvalidEnumValue)
        assert backend.requests == []


# ──────────────────────────────────────────────
# 4. 职位搜索与推荐
# ──────────────────────────────────────────────

def test_search_jobs(make_invoker):
    listings = [
        {
            "title": f"React Developer {i}",
            "company": "Globex",
            "location": "New York, NY",
            "description": "Build UIs.",
            "applyUrl": f"https://jobs.example.com/{i}",
        }
        for i in range(5)
    ]
    backend = ScriptedBackend(listings)
    result = asyncio.run(search_jobs(make_invoker(backend), "React developer in New York"))
    assert len(result.value) == 5
    assert "Query: React developer in New York" in backend.requests[0].prompt


def test_search_jobs_missing_field_is_violation(make_invoker):
    listing = {"title": "Dev", "company": "Globex", "location": "NY", "description": "d"}
    result = asyncio.run(search_jobs(make_invoker(ScriptedBackend([listing])), "dev"))
    assert result.failure.code == "output_schema_violation"


class TestJobSuggestion:
    def test_capped_at_three(self, make_invoker):
        suggestions = [{"jobTitle": f"Job {i}", "company": "Initech", "reason": "skills match"} for i in range(5)]
        result = asyncio.run(suggest_jobs(make_invoker(ScriptedBackend(suggestions)), "Python", "5 years", "AWS SA"))
        assert [s["jobTitle"] for s in result.value] == ["Job 0", "Job 1", "Job 2"]

    def test_keep_top_suggestions_short_list(self):
        short = [{"jobTitle": "Only", "company": "c", "reason": "r"}]
        assert keep_top_suggestions(short) == short
        assert MAX_SUGGESTIONS == 3


# ──────────────────────────────────────────────
# 5. 差距分析与简历排序
# ──────────────────────────────────────────────

def test_analyze_shortcomings(make_invoker):
    output = {
        "shortcomings": [{"skill": "Python", "impact": "core stack", "mitigation": "training", "severity": "critical"}],
        "overallAssessment": "Strong Java engineer; needs Python ramp-up.",
    }
    backend = ScriptedBackend(output)
    result = asyncio.run(analyze_shortcomings(make_invoker(backend), "Skills: Java", "Python backend role"))
    assert result.value["shortcomings"][0]["severity"] == "critical"
    prompt = backend.requests[0].prompt
    assert "Job Description: Python backend role" in prompt
    assert "Resume Text: Skills: Java" in prompt


def test_shortcoming_severity_enum_enforced(make_invoker):
    output = {
        "shortcomings": [{"skill": "Python", "impact": "i", "mitigation": "m", "severity": "blocker"}],
        "overallAssessment": "a",
    }
    result = asyncio.run(analyze_shortcomings(make_invoker(ScriptedBackend(output)), "r", "j"))
    assert result.failure.code == "output_schema_violation"


class TestResumeRanking:
    def test_sort_by_rank(self):
        assert [r["rank"] for r in sort_by_rank([_ranked(3), _ranked(1), _ranked(2)])] == [1, 2, 3]

    def test_sort_is_stable_for_ties(self):
        ranked = sort_by_rank([_ranked(2, "b"), _ranked(1, "a"), _ranked(2, "c")])
        assert [r["resume"] for r in ranked] == ["a", "b", "c"]

    def test_trimmed_to_top_ten(self):
        ranked = sort_by_rank([_ranked(r) for r in range(12, 0, -1)])
        assert len(ranked) == MAX_RANKED == 10
        assert ranked[0]["rank"] == 1 and ranked[-1]["rank"] == 10

    def test_prompt_names_tool_and_limit(self, make_invoker):
        backend = ScriptedBackend([_ranked(1)])
        asyncio.run(rank_resumes(make_invoker(backend), "Senior React engineer"))
        prompt = backend.requests[0].prompt
        assert "use the 'getAllResumes' tool" in prompt
        assert "Return ONLY the top 10 resumes." in prompt
        assert "Job Description: Senior React engineer" in prompt

    def test_end_to_end_with_tool_call(self, make_invoker, store):
        def rank_all(request, tool_results):
            resumes = tool_results["getAllResumes"]
            return [_ranked(len(resumes) - i, text) for i, text in enumerate(resumes)]

        backend = ScriptedBackend(rank_all, call_tools=True)
        result = asyncio.run(rank_resumes(make_invoker(backend), "Python"))
        texts = [r.resume_text for r in store.fetch_resumes()]
        assert [r["resume"] for r in result.value] == list(reversed(texts))
        assert [r["rank"] for r in result.value] == [1, 2]

    def test_empty_store_with_fallback_ranks_samples(self, make_invoker, empty_store):
        def rank_all(request, tool_results):
            return [_ranked(i + 1, text) for i, text in enumerate(tool_results["getAllResumes"])]

        backend = ScriptedBackend(rank_all, call_tools=True)
        invoker = make_invoker(backend, store=empty_store, policy="on_empty")
        result = asyncio.run(rank_resumes(invoker, "Frontend engineer"))
        assert len(result.value) == MAX_RANKED
        assert result.value[0]["resume"] == SAMPLE_RESUMES[0]

    def test_empty_store_without_fallback_is_empty_result(self, make_invoker, empty_store):
        backend = ScriptedBackend(lambda request, tool_results: tool_results["getAllResumes"], call_tools=True)
        result = asyncio.run(rank_resumes(make_invoker(backend, store=empty_store), "Frontend engineer"))
        assert result.failure.code == "empty_result"
