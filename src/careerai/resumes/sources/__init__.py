"""
简历存储：供 getAllResumes 工具读取。
- memory：进程内存储，默认，用于本地运行与测试。
- firestore：Firestore resumes 集合，需 google-cloud-firestore。
"""
from .base import ResumeStore, ResumeStoreError
from .memory import InMemoryResumeStore
from .registry import get_resume_store

__all__ = ["ResumeStore", "ResumeStoreError", "InMemoryResumeStore", "get_resume_store"]
