"""
Firestore 简历存储：读取 resumes 集合，每个文档的 resumeText 字段为简历正文。
需安装 google-cloud-firestore（extra: firestore）并配置 GOOGLE_CLOUD_PROJECT 与凭据。
"""
from careerai.core.config import firestore_project
from careerai.resumes.schemas import StoredResume
from .base import ResumeStore, ResumeStoreError

COLLECTION = "resumes"


class FirestoreResumeStore(ResumeStore):
    def __init__(self, project: str | None = None, collection: str = COLLECTION, client=None):
        self.project = project or firestore_project()
        self.collection = collection
        self._client = client

    def _get_client(self):
        if self._client is None:
            try:
                from google.cloud import firestore
            except ImportError as e:
                raise ResumeStoreError("google-cloud-firestore 未安装：pip install 'careerai[firestore]'") from e
            self._client = firestore.Client(project=self.project)
        return self._client

    def fetch_resumes(self) -> list[StoredResume]:
        try:
            docs = list(self._get_client().collection(self.collection).stream())
        except ResumeStoreError:
            raise
        except Exception as e:
            raise ResumeStoreError(f"读取 Firestore 集合 {self.collection} 失败: {e}") from e
        resumes: list[StoredResume] = []
        for doc in docs:
            data = doc.to_dict() or {}
            text = data.get("resumeText")
            # 只保存了结构化内容、没有纯文本的文档跳过
            if not isinstance(text, str) or not text.strip():
                continue
            resumes.append(
                StoredResume(
                    id=doc.id,
                    resume_text=text,
                    user_profile_id=data.get("userProfileId"),
                    title=data.get("title"),
                )
            )
        return resumes
