"""devroster - 主要路由."""

from http import HTTPStatus

from flask import Blueprint, render_template

from devroster.types import RouteReturn

# 创建蓝图
main_bp = Blueprint("main", __name__)


@main_bp.route("/")
def index() -> RouteReturn:
    """首页.

    重定向回首页的请求在这里消费一次性 flash 消息.

    Returns:
        str: 首页模板.

    """
    return render_template("index.html")


@main_bp.route("/favicon.ico")
def favicon() -> RouteReturn:
    """提供 favicon.ico 占位响应,避免 404."""
    return "", HTTPStatus.NO_CONTENT
