"""
HTTP 入口的依赖：进程内唯一的调用器（后端 + 工具注册表），首次请求时构造。
测试通过 app.dependency_overrides[get_invoker] 注入假后端。
"""
from careerai.ai import GenerationInvoker
from careerai.flows import build_invoker

_invoker: GenerationInvoker | None = None


def get_invoker() -> GenerationInvoker:
    global _invoker
    if _invoker is None:
        _invoker = build_invoker()
    return _invoker
