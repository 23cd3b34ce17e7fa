"""
简历存储（外部文档库的只读视图）与内置示例简历。
"""
from .schemas import StoredResume
from .samples import SAMPLE_RESUMES, sample_resumes
from .sources import ResumeStore, ResumeStoreError, InMemoryResumeStore, get_resume_store

__all__ = [
    "StoredResume",
    "SAMPLE_RESUMES",
    "sample_resumes",
    "ResumeStore",
    "ResumeStoreError",
    "InMemoryResumeStore",
    "get_resume_store",
]
