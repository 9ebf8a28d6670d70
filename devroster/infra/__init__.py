"""基础设施层: 事务边界与请求级日志."""
