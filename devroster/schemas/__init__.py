"""请求参数 schema."""
