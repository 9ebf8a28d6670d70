"""数据访问 Repository."""
