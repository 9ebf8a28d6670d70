"""常量模块。

集中管理系统常量，包括错误分类、提示文案、HTTP 相关常量与 Flash 类别。
"""

# 导入HTTP状态码常量（使用Python标准库）
from http import HTTPStatus as HttpStatus

# 导入Flash类别常量
from .flash_categories import FlashCategory

# 导入HTTP头常量
from .http_headers import HttpHeaders

# 导入所有系统常量
from .system_constants import (
    ErrorCategory,
    ErrorMessages,
    ErrorSeverity,
    LogLevel,
    SuccessMessages,
)

__all__ = [
    "ErrorCategory",
    "ErrorMessages",
    "ErrorSeverity",
    "FlashCategory",
    "HttpHeaders",
    "HttpStatus",
    "LogLevel",
    "SuccessMessages",
]
