"""devroster - 开发者模型."""

from __future__ import annotations

from datetime import datetime
from enum import Enum

from devroster import db
from devroster.constants import ErrorMessages
from devroster.errors import ValidationError
from devroster.utils.time_utils import time_utils


class Gender(str, Enum):
    """开发者性别, 表单按成员名提交."""

    MALE = "MALE"
    FEMALE = "FEMALE"

    @classmethod
    def parse(cls, token: str | None) -> Gender | None:
        """按成员名解析性别.

        Args:
            token: 表单提交的原始值, 缺失或空白表示未选择.

        Returns:
            对应的枚举成员, 未选择时返回 None.

        Raises:
            ValidationError: 取值不属于任何成员时抛出.

        """
        if token is None:
            return None
        cleaned = token.strip()
        if not cleaned:
            return None
        try:
            return cls[cleaned]
        except KeyError:
            raise ValidationError(
                ErrorMessages.INVALID_GENDER.format(token=cleaned),
                extra={"gender": cleaned},
            ) from None


class Developer(db.Model):
    """开发者模型.

    Attributes:
        id: 主键, 0 表示尚未保存.
        name: 姓名.
        career: 从业年限.
        email: 邮箱.
        gender: 性别, 可为空.
        languages: 掌握的编程语言, 保持提交顺序.
        created_at: 创建时间, 构造对象时写入.

    """

    __tablename__ = "developers"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(100), nullable=False)
    career = db.Column(db.Integer, nullable=False, default=0)
    email = db.Column(db.String(255), nullable=False)
    gender = db.Column(db.Enum(Gender, name="developer_gender"), nullable=True)
    languages = db.Column(db.JSON, nullable=False, default=list)
    created_at = db.Column(db.DateTime(timezone=True), nullable=False, default=time_utils.now)

    def __init__(
        self,
        name: str,
        career: int,
        email: str,
        gender: Gender | None = None,
        languages: list[str] | None = None,
        *,
        id: int = 0,  # noqa: A002
        created_at: datetime | None = None,
    ) -> None:
        """初始化开发者记录.

        Args:
            name: 姓名.
            career: 从业年限.
            email: 邮箱.
            gender: 性别, 可选.
            languages: 编程语言列表, 默认为空列表.
            id: 主键, 新记录为 0.
            created_at: 创建时间, 默认为当前时间.

        """
        self.id = id
        self.name = name
        self.career = career
        self.email = email
        self.gender = gender
        self.languages = list(languages or [])
        self.created_at = created_at or time_utils.now()

    @property
    def is_new(self) -> bool:
        """是否为尚未保存的记录."""
        return not self.id

    def to_dict(self) -> dict:
        """转换为字典格式.

        Returns:
            包含开发者完整信息的字典, gender 输出成员名.
        """
        return {
            "id": self.id,
            "name": self.name,
            "career": self.career,
            "email": self.email,
            "gender": self.gender.name if self.gender else None,
            "languages": list(self.languages or []),
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }

    def __repr__(self) -> str:
        return (
            f"<Developer id={self.id} name={self.name!r} career={self.career} email={self.email!r} "
            f"gender={self.gender.name if self.gender else None} languages={self.languages!r}>"
        )
