"""
共享夹具：脚本化的假生成后端，记录每次请求，返回预置结果或抛出预置错误。
全部测试无需 API Key、不发网络请求。
"""
import pytest

from careerai.ai import GenerationInvoker
from careerai.flows import build_invoker
from careerai.resumes.schemas import StoredResume
from careerai.resumes.sources import InMemoryResumeStore, ResumeStore, ResumeStoreError


class ScriptedBackend:
    """
    result：固定返回值，或 callable(request, tool_results) 动态生成。
    error：非空时在（可选的）工具调用之后抛出。
    call_tools：为 True 时先依次调用请求里的全部工具，模拟模型回调。
    """

    model_name = "test/scripted"

    def __init__(self, result=None, error=None, call_tools=False):
        self.result = result
        self.error = error
        self.call_tools = call_tools
        self.requests = []
        self.tool_results = {}

    async def generate(self, request):
        self.requests.append(request)
        if self.call_tools:
            for tool in request.tools:
                self.tool_results[tool.name] = await tool()
        if self.error is not None:
            raise self.error
        if callable(self.result):
            return self.result(request, self.tool_results)
        return self.result


class BrokenStore(ResumeStore):
    """读取总是失败的存储。"""

    def fetch_resumes(self):
        raise ResumeStoreError("firestore unavailable")


def make_resume(i: int, text: str | None = None) -> StoredResume:
    return StoredResume(id=f"r{i}", resume_text=text or f"Name: Candidate {i}\nSkills: Python", title=f"Resume {i}")


@pytest.fixture
def store():
    return InMemoryResumeStore([make_resume(1), make_resume(2)])


@pytest.fixture
def empty_store():
    return InMemoryResumeStore()


@pytest.fixture
def make_invoker(store):
    """make_invoker(backend, store=..., policy=...) → 装配好全部 flow 的调用器。"""

    def _make(backend, store=store, policy="none") -> GenerationInvoker:
        return build_invoker(backend, store=store, policy=policy)

    return _make


@pytest.fixture
def resume_analysis_output():
    return {
        "overallScore": 78,
        "overallSummary": "Solid data analyst profile; quantify impact more.",
        "sectionAnalyses": [
            {
                "section": "Skills",
                "score": 85,
                "reasoning": "Relevant tooling listed.",
                "suggestions": "Group skills by category.",
            },
            {
                "section": "Summary",
                "score": 60,
                "reasoning": "Too generic.",
                "suggestions": "Mention years of experience and domain.",
            },
        ],
    }


@pytest.fixture
def job_posting_input():
    return {
        "jobTitle": "Senior Python Engineer",
        "companyName": "Acme Robotics",
        "location": "Remote",
        "jobType": "Full-time",
        "description": "Acme builds warehouse robots.",
        "responsibilities": "Design APIs; mentor engineers.",
        "mustHaveSkills": "Python, FastAPI, PostgreSQL",
    }
