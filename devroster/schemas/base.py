"""Schema 基础设施."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class PayloadSchema(BaseModel):
    """写路径 payload 的基础 schema.

    约定:
    - 默认忽略未知字段, 以兼容表单中的提交按钮、csrf_token 等额外字段.
    - schema 负责业务校验与错误文案, request payload adapter 负责基础规范化.
    """

    model_config = ConfigDict(extra="ignore")


class QuerySchema(BaseModel):
    """读路径 query 参数的基础 schema.

    默认拒绝未知字段，避免“拼错参数却被静默忽略”的隐患。
    """

    model_config = ConfigDict(extra="forbid")
