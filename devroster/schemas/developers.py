"""开发者表单 schema.

两种声明式绑定:
- DevParams: 逐个声明请求参数(名称、是否必填、默认值), 对应 `dev2.do`.
- DevCommand: 字段名与 Developer 属性一致的命令对象, 对应 `dev3.do` 及增改接口.
"""

from __future__ import annotations

import re
from typing import Any

from pydantic import AliasChoices, Field, field_validator

from devroster.constants import ErrorMessages
from devroster.errors import ValidationError
from devroster.models.developer import Developer, Gender
from devroster.schemas.base import PayloadSchema, QuerySchema

DEFAULT_DEV_NAME = "(unnamed)"
LANG_FIELD = "lang"
INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1
_INT_PATTERN = re.compile(r"[+-]?[0-9]+")


def parse_int_field(value: Any, *, field: str) -> int:
    """按十进制解析 32 位有符号整数.

    只接受可选符号加 ASCII 数字, 超出 32 位范围同样非法.

    Raises:
        ValueError: 取值不是合法的 32 位整数时抛出, 文案为 INVALID_INTEGER.

    """
    message = ErrorMessages.INVALID_INTEGER.format(field=field)
    if isinstance(value, bool):
        raise ValueError(message)
    if isinstance(value, int):
        number = value
    else:
        text = value.strip() if isinstance(value, str) else ""
        if not _INT_PATTERN.fullmatch(text):
            raise ValueError(message)
        try:
            number = int(text, 10)
        except ValueError:
            # 超过解释器整数位数上限的超长数字串
            raise ValueError(message) from None
    if not INT32_MIN <= number <= INT32_MAX:
        raise ValueError(message)
    return number


def _parse_career(value: Any) -> int:
    career = parse_int_field(value, field="career")
    if career < 0:
        raise ValueError(ErrorMessages.NEGATIVE_CAREER)
    return career


def _parse_gender(value: Any) -> Gender | None:
    if value is None or isinstance(value, Gender):
        return value
    try:
        return Gender.parse(str(value))
    except ValidationError as exc:
        raise ValueError(exc.message) from None


def _parse_languages(value: Any) -> list[str]:
    if value is None:
        return []
    if isinstance(value, str):
        value = [value]
    return [item for item in (str(raw).strip() for raw in value) if item]


class DevParams(PayloadSchema):
    """声明式请求参数.

    - name: 可选, 缺失或空白时使用默认值
    - career/email/lang: 必填
    - gender: 可选
    """

    name: str = DEFAULT_DEV_NAME
    career: int
    email: str
    gender: Gender | None = None
    lang: list[str]

    @field_validator("name", mode="before")
    @classmethod
    def _default_blank_name(cls, value: Any) -> Any:
        if value is None or (isinstance(value, str) and not value.strip()):
            return DEFAULT_DEV_NAME
        return value

    @field_validator("career", mode="before")
    @classmethod
    def _validate_career(cls, value: Any) -> int:
        return _parse_career(value)

    @field_validator("gender", mode="before")
    @classmethod
    def _validate_gender(cls, value: Any) -> Gender | None:
        return _parse_gender(value)

    @field_validator("lang", mode="before")
    @classmethod
    def _validate_lang(cls, value: Any) -> list[str]:
        return _parse_languages(value)

    def to_developer(self) -> Developer:
        """构造尚未保存的开发者记录."""
        return Developer(
            name=self.name,
            career=self.career,
            email=self.email,
            gender=self.gender,
            languages=self.lang,
        )


class DevCommand(PayloadSchema):
    """命令对象: 按 Developer 属性名绑定请求参数.

    表单中的复选框沿用 `lang` 作为参数名, 同时接受 `languages`.
    """

    id: int = 0
    name: str
    career: int
    email: str
    gender: Gender | None = None
    languages: list[str] = Field(
        default_factory=list,
        validation_alias=AliasChoices("languages", LANG_FIELD),
    )

    @field_validator("id", mode="before")
    @classmethod
    def _validate_id(cls, value: Any) -> int:
        if value is None or (isinstance(value, str) and not value.strip()):
            return 0
        return parse_int_field(value, field="id")

    @field_validator("name", "email")
    @classmethod
    def _strip_text(cls, value: str) -> str:
        return value.strip()

    @field_validator("career", mode="before")
    @classmethod
    def _validate_career(cls, value: Any) -> int:
        return _parse_career(value)

    @field_validator("gender", mode="before")
    @classmethod
    def _validate_gender(cls, value: Any) -> Gender | None:
        return _parse_gender(value)

    @field_validator("languages", mode="before")
    @classmethod
    def _validate_languages(cls, value: Any) -> list[str]:
        return _parse_languages(value)

    def to_developer(self) -> Developer:
        """构造开发者记录, id 为 0 表示新记录."""
        return Developer(
            id=self.id,
            name=self.name,
            career=self.career,
            email=self.email,
            gender=self.gender,
            languages=self.languages,
        )


class DevNoPayload(PayloadSchema):
    """按主键定位开发者的 form 参数."""

    no: int

    @field_validator("no", mode="before")
    @classmethod
    def _validate_no(cls, value: Any) -> int:
        return parse_int_field(value, field="no")


class DevNoQuery(QuerySchema):
    """按主键定位开发者的 query 参数."""

    no: int

    @field_validator("no", mode="before")
    @classmethod
    def _validate_no(cls, value: Any) -> int:
        return parse_int_field(value, field="no")
