"""
Pydantic Evals 回归数据集：简历洞察与差距分析。

通过预设 Case 验证模型表现，改 prompt 模板或换模型后跑一遍即可发现退化。
inputs 为 flow 输入，expected_output 为任务函数应返回的关键结论。
"""
from __future__ import annotations

from pydantic_evals import Case, Dataset

PYTHON_BACKEND_JD = (
    "Senior Python Backend Engineer. Must have: Python, FastAPI, PostgreSQL, Docker. "
    "Nice to have: Kubernetes, AWS."
)


def resume_analysis_dataset() -> Dataset:
    """简历洞察回归用例：期望至少分析出 Skills 段落。"""
    return Dataset(
        name="resume_analysis",
        cases=[
            Case(
                name="resume_has_skills_section",
                inputs={"resumeText": "Name: Jane Doe\nSummary: Data analyst.\nSkills: Python, SQL, Tableau"},
                expected_output="Skills",
            ),
            Case(
                name="resume_tailored_to_jd",
                inputs={
                    "resumeText": "Name: Ben Carter\nSkills: Node.js, GraphQL, PostgreSQL, Docker",
                    "jobDescription": PYTHON_BACKEND_JD,
                },
                expected_output="Skills",
            ),
        ],
    )


def shortcoming_analysis_dataset() -> Dataset:
    """差距分析回归用例：期望识别出关键缺失技能。"""
    return Dataset(
        name="shortcoming_analysis",
        cases=[
            Case(
                name="missing_python",
                inputs={
                    "resumeText": "Name: Olivia Martinez\nSkills: Java, Spring Boot, SQL, REST APIs, Maven",
                    "jobDescription": PYTHON_BACKEND_JD,
                },
                expected_output="Python",
            ),
            Case(
                name="missing_docker",
                inputs={
                    "resumeText": "Name: David Chen\nSkills: React, JavaScript, Python, Django, HTML/CSS, Git",
                    "jobDescription": PYTHON_BACKEND_JD,
                },
                expected_output="Docker",
            ),
        ],
    )
