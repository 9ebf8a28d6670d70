"""devroster - 常量定义模块

统一管理错误分类、严重度以及对外提示文案.
"""

from enum import Enum


class LogLevel(Enum):
    """日志级别枚举."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class ErrorCategory(Enum):
    """错误分类枚举."""

    VALIDATION = "validation"
    BUSINESS = "business"
    DATABASE = "database"
    SYSTEM = "system"
    UNKNOWN = "unknown"


class ErrorSeverity(Enum):
    """错误严重度枚举."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


# 错误消息常量
class ErrorMessages:
    """错误消息常量."""

    # 通用错误
    INTERNAL_ERROR = "internal server error"
    VALIDATION_ERROR = "invalid input"
    INVALID_REQUEST = "invalid request"
    MISSING_REQUIRED_FIELDS = "missing required field: {fields}"

    # 开发者表单
    INVALID_INTEGER = "{field} must be an integer"
    INVALID_GENDER = "unknown gender: {token}"
    NEGATIVE_CAREER = "career must not be negative"

    # 数据库错误
    DATABASE_QUERY_ERROR = "database operation failed"


# 成功消息常量
class SuccessMessages:
    """成功消息常量."""

    # 开发者管理
    DEV_CREATED = "creation succeeded"
    DEV_UPDATED = "update succeeded"
    DEV_DELETED = "deletion succeeded"
