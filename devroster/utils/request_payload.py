"""请求 payload 解析与规范化.

目标:
- 统一处理 JSON dict 与 Werkzeug MultiDict(form/query).
- 提供最小的输入规范化(字符串 strip/NUL 清理).
- 支持按字段固定 list 形状,避免 MultiDict 单值/多值导致 payload 形状漂移
  (例如复选框 `lang` 只勾选一项时仍输出 list).

注意:
- 本模块只负责 "取参形状" 与 "基础规范化",不做业务校验.
- 业务字段校验应交由 schema 层(pydantic)完成.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, cast

from flask import has_request_context, request

from devroster.types import MutablePayloadDict, PayloadValue, ScalarValue

_STRING_LIKE_TYPES = (str, bytes, bytearray)
_PARSE_PAYLOAD_MARKER = "_devroster_parse_payload_called"


def _guard_parse_payload_called_once() -> None:
    if not has_request_context():
        return
    if getattr(request, _PARSE_PAYLOAD_MARKER, False):
        raise RuntimeError("parse_payload 只允许在一次请求链路内执行一次")
    setattr(request, _PARSE_PAYLOAD_MARKER, True)


def parse_payload(payload: object | None, *, list_fields: Sequence[str] = ()) -> MutablePayloadDict:
    """解析并规范化 payload.

    Args:
        payload: JSON dict 或 MultiDict 兼容对象.
        list_fields: 需要固定为 list 形状的字段名集合(单值也输出 list).

    Returns:
        规范化后的 payload dict.

    Raises:
        TypeError: payload 既不是 mapping 也不是 MultiDict 时.

    """
    _guard_parse_payload_called_once()
    list_field_set = set(list_fields)

    if payload is None:
        return {}

    if hasattr(payload, "getlist"):
        return _parse_multidict(payload, list_fields=list_field_set)

    if isinstance(payload, Mapping):
        return {
            key: _sanitize_value(value, force_list=(key in list_field_set)) for key, value in payload.items()
        }

    raise TypeError("payload 必须为 mapping 或 MultiDict 兼容对象")


def _parse_multidict(payload: object, *, list_fields: set[str]) -> MutablePayloadDict:
    multi_dict = cast(Any, payload)
    sanitized: MutablePayloadDict = {}
    for key in list(multi_dict.keys()):
        values = list(multi_dict.getlist(key) or [])
        if not values:
            sanitized[key] = None
            continue

        cleaned_values: list[ScalarValue] = [_sanitize_scalar_value(value) for value in values]
        if key in list_fields:
            sanitized[key] = cleaned_values
        else:
            sanitized[key] = cleaned_values[-1]
    return sanitized


def _sanitize_value(value: object, *, force_list: bool) -> PayloadValue:
    if force_list:
        if value is None:
            return []
        if isinstance(value, Sequence) and not isinstance(value, _STRING_LIKE_TYPES):
            return [_sanitize_scalar_value(item) for item in value]
        return [_sanitize_scalar_value(value)]

    if isinstance(value, Sequence) and not isinstance(value, _STRING_LIKE_TYPES):
        if not value:
            return None
        return _sanitize_scalar_value(value[-1])

    return _sanitize_scalar_value(value)


def _sanitize_scalar_value(value: object) -> ScalarValue:
    if value is None:
        return None
    if isinstance(value, (bool, int, float)):
        return cast(ScalarValue, value)
    if isinstance(value, (bytes, bytearray)):
        return _strip_nul(value.decode(errors="ignore"))
    if isinstance(value, str):
        return _strip_nul(value)
    return _strip_nul(str(value))


def _strip_nul(value: str) -> str:
    return value.replace("\x00", "").strip()
