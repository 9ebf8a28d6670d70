"""Schema 校验与错误映射."""

from __future__ import annotations

from typing import TypeVar

from pydantic import BaseModel, ValidationError as PydanticValidationError

from devroster.constants import ErrorMessages
from devroster.errors import ValidationError

ModelT = TypeVar("ModelT", bound=BaseModel)


def validate_or_raise(model: type[ModelT], payload: object, *, message_key: str | None = None) -> ModelT:
    """执行 schema 校验并抛出项目的 ValidationError.

    只取第一条错误作为对外文案, 字段名写入 extra 便于日志检索.

    Args:
        model: pydantic model.
        payload: 待校验的 payload(通常来自 request payload adapter).
        message_key: 错误的 message_key, 缺省为 VALIDATION_ERROR.

    """
    try:
        return model.model_validate(payload)
    except PydanticValidationError as exc:
        message, field = _extract_first_error(exc)
        raise ValidationError(message, message_key=message_key, extra={"field": field}) from None


def _extract_first_error(exc: PydanticValidationError) -> tuple[str, str | None]:
    errors = exc.errors()
    if not errors:
        return ErrorMessages.VALIDATION_ERROR, None

    first = errors[0]
    field = None
    loc = first.get("loc")
    if isinstance(loc, tuple) and loc and isinstance(loc[0], str):
        field = loc[0]

    if first.get("type") == "missing" and field:
        return ErrorMessages.MISSING_REQUIRED_FIELDS.format(fields=field), field

    ctx = first.get("ctx")
    if isinstance(ctx, dict) and isinstance(ctx.get("error"), BaseException):
        return str(ctx["error"]), field

    msg = first.get("msg")
    if isinstance(msg, str) and msg.strip():
        return msg, field

    return ErrorMessages.VALIDATION_ERROR, field
