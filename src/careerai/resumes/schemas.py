"""存储中的简历记录。"""
from pydantic import BaseModel, Field
from typing import Optional


class StoredResume(BaseModel):
    """简历存储中的一条记录（文档库 resumes 集合）。"""
    id: str = Field(..., description="文档 ID")
    resume_text: str = Field(..., description="简历纯文本，供排序与差距分析")
    user_profile_id: Optional[str] = Field(None, description="所属用户")
    title: Optional[str] = Field(None, description="简历标题，如 Jane Doe's Resume")
