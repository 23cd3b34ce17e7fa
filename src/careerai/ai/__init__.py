"""
AI 调用层：字段声明与校验、prompt 模板、工具注册表、生成后端与调用器。
"""
from .errors import (
    SchemaValidationError,
    MissingField,
    TypeMismatch,
    InvalidEnumValue,
    OutOfRange,
    ToolNotFound,
    InvocationError,
    InvalidInput,
    EmptyResult,
    OutputSchemaViolation,
    ToolExecutionError,
    BackendUnavailable,
)
from .schema import FieldKind, FieldSchema, build_model, validate
from .template import PromptTemplate, render
from .tools import BoundTool, FallbackPolicy, ToolDefinition, ToolRegistry
from .backend import GenerationBackend, GenerationRequest, PydanticAIBackend
from .flow import FlowDefinition, InvocationResult
from .invoker import GenerationInvoker

__all__ = [
    "SchemaValidationError",
    "MissingField",
    "TypeMismatch",
    "InvalidEnumValue",
    "OutOfRange",
    "ToolNotFound",
    "InvocationError",
    "InvalidInput",
    "EmptyResult",
    "OutputSchemaViolation",
    "ToolExecutionError",
    "BackendUnavailable",
    "FieldKind",
    "FieldSchema",
    "build_model",
    "validate",
    "PromptTemplate",
    "render",
    "BoundTool",
    "FallbackPolicy",
    "ToolDefinition",
    "ToolRegistry",
    "GenerationBackend",
    "GenerationRequest",
    "PydanticAIBackend",
    "FlowDefinition",
    "InvocationResult",
    "GenerationInvoker",
]
