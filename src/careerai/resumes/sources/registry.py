"""根据配置返回当前使用的简历存储。"""
from careerai.core.config import resume_store_id
from careerai.resumes.sources.base import ResumeStore
from careerai.resumes.sources.memory import InMemoryResumeStore


def get_resume_store(store_id: str | None = None) -> ResumeStore:
    """
    返回简历存储实例。
    store_id 可选：memory（默认）、firestore。
    不传则从环境变量 CAREERAI_RESUME_STORE 读取。
    """
    sid = (store_id or resume_store_id()).strip().lower()
    if sid == "firestore":
        from careerai.resumes.sources.firestore import FirestoreResumeStore
        return FirestoreResumeStore()
    return InMemoryResumeStore()
