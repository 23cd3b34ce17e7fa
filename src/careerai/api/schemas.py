"""
/v1/flows 的请求与响应模型。
"""
from pydantic import BaseModel, Field
from typing import Any, Optional


class FlowInfo(BaseModel):
    """GET /v1/flows 中的一项。"""
    name: str = Field(..., description="flow 名称，用于 POST /v1/flows/{name}")
    description: str = Field("", description="功能说明")
    input_fields: list[str] = Field(default_factory=list, description="输入字段名")
    required_fields: list[str] = Field(default_factory=list, description="必填输入字段名")
    tools: list[str] = Field(default_factory=list, description="模型可调用的工具")


class FlowResponse(BaseModel):
    """POST /v1/flows/{name} 成功响应。"""
    flow: str = Field(..., description="flow 名称")
    output: Any = Field(None, description="按 output schema 校验并后处理过的结果")


class ErrorDetail(BaseModel):
    """失败时 HTTPException.detail 的结构。"""
    code: str = Field(..., description="invalid_input / empty_result / output_schema_violation / tool_execution_error / backend_unavailable")
    message: str = Field(..., description="错误信息")
    field: Optional[str] = Field(None, description="invalid_input 时出错字段的路径")
