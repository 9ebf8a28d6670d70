"""开发者相关服务."""

from .developer_service import DeveloperService

__all__ = ["DeveloperService"]
