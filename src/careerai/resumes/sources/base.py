"""简历存储抽象：本层只读。"""
from abc import ABC, abstractmethod

from careerai.resumes.schemas import StoredResume


class ResumeStoreError(Exception):
    """读取简历存储失败（不可达、鉴权失败、数据格式错误等）。"""


class ResumeStore(ABC):
    """简历存储接口：返回当前存储的全部简历。"""

    @abstractmethod
    def fetch_resumes(self) -> list[StoredResume]:
        """拉取全部简历；读取失败抛出 ResumeStoreError。"""
        ...
