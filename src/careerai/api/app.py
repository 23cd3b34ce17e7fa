"""
CareerAI HTTP 入口：每个功能 flow 一个单次请求/响应接口，供求职者与雇主页面调用。

POST /v1/flows/{name}：请求体即 flow 输入（字段名与表单一致，如 resumeText、jobDescription），
成功返回 {flow, output}；失败返回类型化错误码，调用方可自行重试。
"""
import logging
from typing import Any

from fastapi import Body, Depends, FastAPI, HTTPException

from careerai.ai import GenerationInvoker, InvalidInput, InvocationError
from careerai.core.config import configure_logging
from careerai.flows import FLOWS, get_flow
from .deps import get_invoker
from .schemas import ErrorDetail, FlowInfo, FlowResponse

configure_logging()
logger = logging.getLogger(__name__)

app = FastAPI(
    title="CareerAI API",
    description="CareerAI：简历洞察、职位发布生成、职位搜索与推荐、简历排序与差距分析",
    version="0.1.0",
)

# 失败类型 → HTTP 状态码
_STATUS_BY_CODE = {
    "invalid_input": 422,
    "empty_result": 502,
    "output_schema_violation": 502,
    "tool_execution_error": 502,
    "backend_unavailable": 503,
}


@app.get("/health")
def health():
    """探活。"""
    return {"status": "ok", "service": "careerai"}


@app.get("/v1/flows", response_model=list[FlowInfo])
def list_flows():
    """列出可用 flow 及其输入字段。"""
    return [
        FlowInfo(
            name=flow.name,
            description=flow.description,
            input_fields=flow.input_fields(),
            required_fields=[f.name for f in flow.input_schema.fields if f.required],
            tools=list(flow.tools),
        )
        for flow in FLOWS.values()
    ]


def _failure_response(err: InvocationError) -> HTTPException:
    detail = ErrorDetail(
        code=err.code,
        message=err.message,
        field=err.error.path if isinstance(err, InvalidInput) else None,
    )
    return HTTPException(
        status_code=_STATUS_BY_CODE.get(err.code, 500),
        detail=detail.model_dump(exclude_none=True),
    )


@app.post("/v1/flows/{name}", response_model=FlowResponse)
async def run_flow(
    name: str,
    body: dict[str, Any] = Body(..., description="flow 输入"),
    invoker: GenerationInvoker = Depends(get_invoker),
):
    """执行一次 flow：校验输入 → 渲染 prompt → 调模型 → 校验输出 → 后处理。"""
    try:
        flow = get_flow(name)
    except KeyError:
        raise HTTPException(status_code=404, detail={"code": "unknown_flow", "message": f"unknown flow: {name}"})
    result = await invoker.invoke(flow, body)
    if not result.ok:
        raise _failure_response(result.failure)
    return FlowResponse(flow=flow.name, output=result.value)
