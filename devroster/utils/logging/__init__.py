"""日志相关的辅助模块."""
