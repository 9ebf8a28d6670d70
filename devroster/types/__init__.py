"""项目内共享的类型别名."""

from typing import TypeAlias

from flask.typing import ResponseReturnValue

from .structures import (
    ContextDict,
    ContextMapping,
    ContextValue,
    JsonDict,
    JsonValue,
    LoggerExtra,
    MutablePayloadDict,
    PayloadMapping,
    PayloadValue,
    ScalarValue,
    StructlogEventDict,
)

RouteReturn: TypeAlias = ResponseReturnValue

__all__ = [
    "ContextDict",
    "ContextMapping",
    "ContextValue",
    "JsonDict",
    "JsonValue",
    "LoggerExtra",
    "MutablePayloadDict",
    "PayloadMapping",
    "PayloadValue",
    "RouteReturn",
    "ScalarValue",
    "StructlogEventDict",
]
