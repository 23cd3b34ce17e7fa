"""进程内简历存储：本地运行与测试用，无需外部服务。"""
from careerai.resumes.schemas import StoredResume
from .base import ResumeStore


class InMemoryResumeStore(ResumeStore):
    def __init__(self, resumes: list[StoredResume] | None = None):
        self._resumes: dict[str, StoredResume] = {}
        for r in resumes or []:
            self.add(r)

    def add(self, resume: StoredResume) -> None:
        """按 id 覆盖写入（与简历编辑页的保存语义一致）。"""
        self._resumes[resume.id] = resume

    def fetch_resumes(self) -> list[StoredResume]:
        return list(self._resumes.values())
