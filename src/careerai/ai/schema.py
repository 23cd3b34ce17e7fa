"""
字段声明 → Pydantic 模型 → 校验。

两个独立产物：
- FieldSchema：数据形状声明（类型、必填、枚举取值、数值范围、说明）。
  description 只作为 JSON schema 说明随请求发给模型，本地不做校验。
- validate(schema, value)：按声明校验值，失败抛出 MissingField / TypeMismatch /
  InvalidEnumValue / OutOfRange，未声明的多余字段忽略。

声明到模型的转换用 pydantic.create_model 动态生成。校验与给 Agent 的 output_type 都用严格标量类型
（"5" 不是数字，True 不是数字，整数原样保留为 int）；宽松模型只用于工具参数的 JSON schema。
"""
from __future__ import annotations

import re
from enum import Enum
from functools import lru_cache
from typing import Annotated, Any, Literal, Optional, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    PlainValidator,
    StrictBool,
    StrictStr,
    ValidationError,
    WithJsonSchema,
    create_model,
    model_validator,
)
from pydantic_core import PydanticKnownError

from .errors import (
    InvalidEnumValue,
    MissingField,
    OutOfRange,
    SchemaValidationError,
    TypeMismatch,
)


class FieldKind(str, Enum):
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    ENUM = "enum"
    ARRAY = "array"
    OBJECT = "object"


class FieldSchema(BaseModel):
    """单个字段的声明；object 通过 fields 嵌套子字段，array 通过 items 声明元素。"""
    model_config = ConfigDict(frozen=True)

    name: str
    kind: FieldKind
    required: bool = True
    minimum: Optional[float] = None
    maximum: Optional[float] = None
    choices: tuple[str, ...] = ()
    description: str = ""
    items: Optional[FieldSchema] = None
    fields: tuple[FieldSchema, ...] = ()

    @model_validator(mode="after")
    def _check_kind(self) -> "FieldSchema":
        if self.kind is FieldKind.ENUM and not self.choices:
            raise ValueError(f"enum field {self.name!r} needs choices")
        if self.kind is FieldKind.ARRAY and self.items is None:
            raise ValueError(f"array field {self.name!r} needs an item schema")
        if self.kind is not FieldKind.NUMBER and (self.minimum is not None or self.maximum is not None):
            raise ValueError(f"range only applies to number fields, not {self.name!r}")
        return self


FieldSchema.model_rebuild()


# ---------- 声明辅助 ----------

def string(name: str, description: str = "", required: bool = True) -> FieldSchema:
    return FieldSchema(name=name, kind=FieldKind.STRING, required=required, description=description)


def number(
    name: str,
    description: str = "",
    required: bool = True,
    minimum: float | None = None,
    maximum: float | None = None,
) -> FieldSchema:
    return FieldSchema(
        name=name,
        kind=FieldKind.NUMBER,
        required=required,
        minimum=minimum,
        maximum=maximum,
        description=description,
    )


def boolean(name: str, description: str = "", required: bool = True) -> FieldSchema:
    return FieldSchema(name=name, kind=FieldKind.BOOLEAN, required=required, description=description)


def enum(name: str, choices: tuple[str, ...] | list[str], description: str = "", required: bool = True) -> FieldSchema:
    return FieldSchema(
        name=name,
        kind=FieldKind.ENUM,
        required=required,
        choices=tuple(choices),
        description=description,
    )


def array(name: str, items: FieldSchema, description: str = "", required: bool = True) -> FieldSchema:
    return FieldSchema(name=name, kind=FieldKind.ARRAY, required=required, items=items, description=description)


def obj(name: str, fields: list[FieldSchema] | tuple[FieldSchema, ...], description: str = "", required: bool = True) -> FieldSchema:
    return FieldSchema(
        name=name,
        kind=FieldKind.OBJECT,
        required=required,
        fields=tuple(fields),
        description=description,
    )


# ---------- 声明 → Pydantic ----------

def _model_name(name: str) -> str:
    parts = [p for p in re.split(r"[^0-9A-Za-z]+", name or "") if p]
    return "".join(p[:1].upper() + p[1:] for p in parts) or "Schema"


def _strict_number(minimum: float | None, maximum: float | None) -> Any:
    """int 保持 int、float 保持 float；字符串与布尔值不算数字。"""

    def check(value: Any) -> Union[int, float]:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise PydanticKnownError("float_type")
        if minimum is not None and value < minimum:
            raise PydanticKnownError("greater_than_equal", {"ge": minimum})
        if maximum is not None and value > maximum:
            raise PydanticKnownError("less_than_equal", {"le": maximum})
        return value

    js: dict[str, Any] = {"type": "number"}
    if minimum is not None:
        js["minimum"] = minimum
    if maximum is not None:
        js["maximum"] = maximum
    return Annotated[Union[int, float], PlainValidator(check), WithJsonSchema(js)]


def _annotation(field: FieldSchema, strict: bool) -> Any:
    """FieldSchema → 类型注解（不含可选包装）。"""
    kind = field.kind
    if kind is FieldKind.STRING:
        return StrictStr if strict else str
    if kind is FieldKind.NUMBER:
        if strict:
            return _strict_number(field.minimum, field.maximum)
        if field.minimum is None and field.maximum is None:
            return float
        return Annotated[float, Field(ge=field.minimum, le=field.maximum)]
    if kind is FieldKind.BOOLEAN:
        return StrictBool if strict else bool
    if kind is FieldKind.ENUM:
        return Literal[field.choices]
    if kind is FieldKind.ARRAY:
        return list[_annotation(field.items, strict)]
    return build_model(field, strict)


@lru_cache(maxsize=None)
def build_model(schema: FieldSchema, strict: bool = False) -> type[BaseModel]:
    """object 声明 → 动态 Pydantic 模型；未声明字段忽略（extra=ignore）。"""
    if schema.kind is not FieldKind.OBJECT:
        raise TypeError(f"build_model expects an object schema, got {schema.kind.value}")
    field_defs: dict[str, Any] = {}
    for f in schema.fields:
        ann = _annotation(f, strict)
        info = Field(... if f.required else None, description=f.description or None)
        field_defs[f.name] = (ann if f.required else Optional[ann], info)
    return create_model(
        _model_name(schema.name),
        __config__=ConfigDict(extra="ignore"),
        **field_defs,
    )


def python_type(schema: FieldSchema) -> Any:
    """
    给 PydanticAI output_type 用的严格类型：模型返回 "85" 作分数时由 Agent 当场拒绝，
    而不是先被转换成 85.0 再交给 validate。纯文本输出用 str，保持文本输出模式。
    """
    if schema.kind is FieldKind.STRING:
        return str
    return _annotation(schema, strict=True)


def json_schema(schema: FieldSchema) -> dict[str, Any]:
    """object 声明的 JSON schema（含 description），用于工具参数。"""
    return build_model(schema).model_json_schema()


# ---------- 校验 ----------

_ENUM_ERRORS = {"literal_error", "enum"}
_RANGE_ERRORS = {"greater_than_equal", "less_than_equal", "greater_than", "less_than"}
_ABSENT = object()


@lru_cache(maxsize=None)
def _envelope(schema: FieldSchema) -> type[BaseModel]:
    # 根节点统一包一层 value 字段，object / array / 标量走同一条校验路径
    return create_model(
        f"{_model_name(schema.name)}Envelope",
        value=(_annotation(schema, strict=True), ...),
    )


def _translate(schema: FieldSchema, exc: ValidationError) -> SchemaValidationError:
    err = exc.errors()[0]
    loc = [str(p) for p in err.get("loc", ())[1:]]
    path = ".".join(loc) or schema.name
    msg = err.get("msg", "invalid value")
    etype = err.get("type", "")
    if etype == "missing" or err.get("input", _ABSENT) is None:
        return MissingField(path, "field required")
    if etype in _ENUM_ERRORS:
        return InvalidEnumValue(path, msg)
    if etype in _RANGE_ERRORS:
        return OutOfRange(path, msg)
    return TypeMismatch(path, msg)


def is_empty(value: Any) -> bool:
    """None、空白字符串、空 list/dict 视为空结果。"""
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (list, tuple, dict)):
        return len(value) == 0
    return False


def validate(schema: FieldSchema, value: Any) -> Any:
    """
    按声明校验 value，返回清洗后的值（多余字段去掉，缺省的可选字段保持缺省）。
    纯函数，无 I/O；失败抛出 SchemaValidationError 子类。
    """
    if value is None:
        raise MissingField(schema.name, "value required")
    try:
        model = _envelope(schema).model_validate({"value": value})
    except ValidationError as exc:
        raise _translate(schema, exc) from None
    return model.model_dump(exclude_unset=True)["value"]
