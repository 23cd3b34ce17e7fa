# Pydantic Evals：prompt 模板与模型回归测试

from .datasets import (
    resume_analysis_dataset,
    shortcoming_analysis_dataset,
)

__all__ = [
    "resume_analysis_dataset",
    "shortcoming_analysis_dataset",
]
