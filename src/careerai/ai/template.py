"""
Prompt 模板渲染（Jinja2）。

- {{ field }}：替换为字段的字符串值；字段缺失或为 None 时渲染为空串。
- {% if field %}...{% else %}...{% endif %}：字段存在且为真值时保留该段；空串、None、False 均为假。
- 缺失字段（含链式访问 {{ a.b }}）不会报错，只会被省略；只有语法错误的模板会在定义时失败。
"""
from __future__ import annotations

from typing import Any, Mapping

from jinja2 import ChainableUndefined, Environment

_env = Environment(
    undefined=ChainableUndefined,
    autoescape=False,
    trim_blocks=True,
    lstrip_blocks=True,
    keep_trailing_newline=False,
    finalize=lambda value: "" if value is None else value,
)


class PromptTemplate:
    """编译一次、多次渲染；同一 (template, context) 总得到同一输出。"""

    def __init__(self, source: str):
        self.source = source
        self._template = _env.from_string(source)

    def render(self, context: Mapping[str, Any] | None = None) -> str:
        return self._template.render(dict(context or {}))

    def __repr__(self) -> str:
        head = self.source.strip().splitlines()[0] if self.source.strip() else ""
        return f"PromptTemplate({head[:40]!r})"


def render(template: str | PromptTemplate, context: Mapping[str, Any] | None = None) -> str:
    """渲染模板；传入字符串时现场编译。"""
    if not isinstance(template, PromptTemplate):
        template = PromptTemplate(template)
    return template.render(context)
