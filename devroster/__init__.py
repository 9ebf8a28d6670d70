"""devroster - Flask 应用初始化.

开发者名册演示应用: 表单绑定的三种写法与开发者的增删改查.
"""

import logging
from datetime import datetime
from importlib import import_module
from logging.handlers import RotatingFileHandler
from pathlib import Path

from flask import Blueprint, Flask, jsonify, request
from flask.typing import ResponseReturnValue
from flask_sqlalchemy import SQLAlchemy
from flask_wtf.csrf import CSRFProtect

from devroster.constants import FlashCategory, HttpHeaders
from devroster.infra.logging.request_middleware import register_request_logging
from devroster.settings import Settings
from devroster.utils.response_utils import unified_error_response
from devroster.utils.structlog_config import ErrorContext, configure_structlog
from devroster.utils.time_utils import TimeFormats, time_utils

# 初始化扩展
db = SQLAlchemy()
csrf = CSRFProtect()


def create_app(*, settings: Settings | None = None) -> Flask:
    """创建Flask应用实例.

    Args:
        settings: 可选的配置对象,用于测试或多环境启动.

    Returns:
        Flask: Flask应用实例

    """
    resolved_settings = settings or Settings.load()
    app = Flask(__name__)

    # 配置应用
    configure_app(app, resolved_settings)

    # 配置会话安全
    configure_security(app, resolved_settings)

    # 初始化扩展
    initialize_extensions(app)

    # 注册蓝图
    configure_blueprints(app)

    # 配置日志
    configure_logging(app)

    # 配置统一日志系统
    configure_structlog(app)
    register_request_logging(app)

    # 设置全局日志级别
    log_level_name = str(app.config.get("LOG_LEVEL", "INFO"))
    logging.getLogger().setLevel(getattr(logging, log_level_name, logging.INFO))

    # 注册全局错误处理器
    @app.errorhandler(Exception)
    def handle_global_exception(error: Exception) -> ResponseReturnValue:
        """全局错误处理."""
        payload, status_code = unified_error_response(error, context=ErrorContext(error, request))
        return jsonify(payload), status_code

    # 配置模板过滤器
    configure_template_filters(app)

    return app


def configure_app(app: Flask, settings: Settings) -> None:
    """写入 Settings 提供的配置并注册基础钩子.

    Args:
        app: Flask 应用实例.
        settings: 统一配置对象,包含环境变量解析、默认值与校验结果.

    """
    app.config.from_mapping(settings.to_flask_config())
    app.config.setdefault("APPLICATION_ROOT", "/")
    _register_protocol_detector(app)


def _register_protocol_detector(app: Flask) -> None:
    @app.before_request
    def detect_protocol() -> None:
        """动态检测请求协议."""
        if request.headers.get(HttpHeaders.X_FORWARDED_PROTO) == "https":
            app.config["PREFERRED_URL_SCHEME"] = "https"
            return

        if request.is_secure or request.headers.get(HttpHeaders.X_FORWARDED_SSL) == "on":
            app.config["PREFERRED_URL_SCHEME"] = "https"


def configure_security(app: Flask, settings: Settings) -> None:
    """配置会话 Cookie 选项.

    flash 消息存放在会话中, 会话 Cookie 承载一次性消息的传递.
    """
    app.config["PERMANENT_SESSION_LIFETIME"] = settings.session_lifetime_seconds
    app.config["SESSION_COOKIE_SECURE"] = settings.is_production
    app.config["SESSION_COOKIE_HTTPONLY"] = True
    app.config["SESSION_COOKIE_SAMESITE"] = "Lax"
    app.config["SESSION_COOKIE_NAME"] = "devroster_session"


def initialize_extensions(app: Flask) -> None:
    """初始化数据库与 CSRF 扩展."""
    db.init_app(app)
    csrf.init_app(app)


def configure_blueprints(app: Flask) -> None:
    """注册所有蓝图以暴露路由."""
    blueprint_specs: list[tuple[str, str, str | None]] = [
        ("devroster.routes.main", "main_bp", None),
        ("devroster.routes.developers", "demo_bp", "/demo"),
    ]

    blueprints: list[tuple[Blueprint, str | None]] = []
    for module_path, attr_name, prefix in blueprint_specs:
        module = import_module(module_path)
        blueprint = getattr(module, attr_name)
        blueprints.append((blueprint, prefix))

    for blueprint, prefix in blueprints:
        if prefix:
            app.register_blueprint(blueprint, url_prefix=prefix)
        else:
            app.register_blueprint(blueprint)


def configure_logging(app: Flask) -> None:
    """配置日志系统与文件处理器.

    调试与测试模式只输出到控制台, 其余情况追加滚动文件日志.
    """
    if not app.debug and not app.testing:
        log_path = Path(app.config["LOG_FILE"])
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = RotatingFileHandler(
            log_path,
            maxBytes=app.config["LOG_MAX_SIZE"],
            backupCount=app.config["LOG_BACKUP_COUNT"],
        )
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s: %(message)s [in %(pathname)s:%(lineno)d]"),
        )
        file_handler.setLevel(getattr(logging, app.config["LOG_LEVEL"]))
        app.logger.addHandler(file_handler)
        logging.getLogger().addHandler(file_handler)

        app.logger.setLevel(getattr(logging, app.config["LOG_LEVEL"]))
        app.logger.info("devroster 应用启动")


def configure_template_filters(app: Flask) -> None:
    """注册时间显示与 flash 样式的模板过滤器."""

    @app.template_filter("utc_datetime")
    def utc_datetime_filter(dt: datetime | None) -> str:
        """UTC 日期时间格式化过滤器."""
        return time_utils.format_utc_time(dt, TimeFormats.DATETIME_FORMAT)

    @app.template_filter("utc_date")
    def utc_date_filter(dt: datetime | None) -> str:
        return time_utils.format_utc_time(dt, TimeFormats.DATE_FORMAT)

    @app.template_filter("flash_css")
    def flash_css_filter(category: str) -> str:
        return FlashCategory.get_css_class(category)


from devroster import models  # noqa: F401, E402
