"""HTTP头常量.

定义项目用到的HTTP头名称，避免魔法字符串。
"""


class HttpHeaders:
    """HTTP头常量."""

    X_REQUEST_ID = "X-Request-ID"
    X_FORWARDED_PROTO = "X-Forwarded-Proto"
    X_FORWARDED_SSL = "X-Forwarded-Ssl"
