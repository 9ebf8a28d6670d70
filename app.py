"""devroster - 本地开发环境启动文件."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING, Final

from devroster import create_app, db
from devroster.utils.structlog_config import get_system_logger

if TYPE_CHECKING:
    from flask import Flask

os.environ.setdefault("FLASK_APP", "devroster")
os.environ.setdefault("FLASK_ENV", "development")

DEFAULT_HOST: Final[str] = "127.0.0.1"
DEFAULT_PORT: Final[str] = "5001"
DEFAULT_DEBUG: Final[str] = "true"


def _ensure_tables(flask_app: Flask) -> None:
    """确保数据表存在, 避免初次启动访问列表页失败.

    Args:
        flask_app: 当前的 Flask 应用实例, 用于推入 application context.

    """
    with flask_app.app_context():
        db.create_all()


def _load_runtime_config() -> tuple[str, int, bool]:
    """读取开发服务器运行参数."""
    host = os.environ.get("FLASK_HOST") or DEFAULT_HOST
    port = int(os.environ.get("FLASK_PORT", DEFAULT_PORT))
    debug = os.environ.get("FLASK_DEBUG", DEFAULT_DEBUG).lower() == "true"
    return host, port, debug


def _log_startup_instructions(host: str, port: int, *, debug: bool) -> None:
    logger = get_system_logger()
    logger.info("devroster 开发环境已启动", host=host, port=port, debug=debug)
    logger.info("访问入口", url=f"http://{host}:{port}")
    logger.info("登记表单", url=f"http://{host}:{port}/demo/devForm.do")
    logger.info("开发者列表", url=f"http://{host}:{port}/demo/devList.do")


def main() -> None:
    """建表后启动 Flask 开发服务器."""
    app = create_app()
    host, port, debug = _load_runtime_config()
    _ensure_tables(app)
    _log_startup_instructions(host, port, debug=debug)

    app.run(host=host, port=port, debug=debug, threaded=True, use_reloader=False)


if __name__ == "__main__":
    main()
