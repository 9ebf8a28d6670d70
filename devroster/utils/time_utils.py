"""统一时间处理工具模块.

记录统一以 UTC 存储, 展示时按 `TimeFormats` 格式化.
"""

from datetime import UTC, datetime


class TimeFormats:
    """时间格式常量."""

    DATETIME_FORMAT = "%Y-%m-%d %H:%M:%S"
    DATE_FORMAT = "%Y-%m-%d"


class TimeUtils:
    """统一时间处理工具类."""

    @staticmethod
    def now() -> datetime:
        """获取当前 UTC 时间.

        Returns:
            带 UTC 时区信息的当前时间.

        """
        return datetime.now(UTC)

    @staticmethod
    def to_utc(dt: datetime | None) -> datetime | None:
        """将时间转换为 UTC, naive 时间视为 UTC."""
        if dt is None:
            return None
        if dt.tzinfo is None:
            return dt.replace(tzinfo=UTC)
        return dt.astimezone(UTC)

    @staticmethod
    def format_utc_time(dt: datetime | None, format_str: str = TimeFormats.DATETIME_FORMAT) -> str:
        """格式化 UTC 时间显示.

        Args:
            dt: 待格式化的日期时间对象.
            format_str: strftime 兼容格式,默认为 `%Y-%m-%d %H:%M:%S`.

        Returns:
            成功时返回格式化后的 UTC 字符串;转换失败时返回 `-`.

        """
        utc_dt = TimeUtils.to_utc(dt)
        if not utc_dt:
            return "-"

        try:
            return utc_dt.strftime(format_str)
        except (ValueError, TypeError):
            return "-"


time_utils = TimeUtils()
