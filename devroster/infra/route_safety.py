"""事务边界安全执行与结构化日志助手.

提供 `log_with_context` 与 `safe_route_call` 两个 helper,用于复用结构化日志字段,
并集中处理视图层的异常捕获与 commit/rollback.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Literal, TypeVar

from werkzeug.exceptions import HTTPException

from devroster import db
from devroster.errors import AppError, SystemError
from devroster.utils.structlog_config import get_logger

if TYPE_CHECKING:
    from devroster.types import ContextDict, ContextMapping, LoggerExtra

R = TypeVar("R")
LogLevel = Literal["debug", "info", "warning", "error", "critical"]
DEFAULT_EXPECTED_EXCEPTIONS: tuple[type[BaseException], ...] = (AppError, HTTPException)


def log_with_context(
    level: LogLevel,
    event: str,
    *,
    module: str,
    action: str,
    context: ContextMapping | None = None,
    extra: LoggerExtra | None = None,
) -> None:
    """记录带有统一上下文字段的结构化日志.

    Args:
        level: 日志级别,使用 structlog 的方法名,例如 "info", "error".
        event: 日志事件描述.
        module: 所属模块或领域,用于快速过滤.
        action: 当前操作名称,通常对应视图函数名.
        context: 业务维度字段.
        extra: 额外诊断字段.

    """
    logger = get_logger("app")
    payload: ContextDict = {"module": module, "action": action}
    if context:
        payload.update(context)
    if extra:
        payload.update(extra)

    log_method = getattr(logger, level, logger.error)
    log_method(event, **payload)


def safe_route_call(
    func: Callable[[], R],
    *,
    module: str,
    action: str,
    public_error: str,
    context: ContextMapping | None = None,
) -> R:
    """安全执行视图逻辑,成功时提交事务,失败时回滚并记录日志.

    Args:
        func: 真实的业务函数,建议为局部闭包以捕获参数.
        module: 记录日志用的模块名称.
        action: 业务动作名称,例如 "insert_dev".
        public_error: 非预期异常包装为 SystemError 时暴露给客户端的文案.
        context: 写入日志的业务维度字段.

    Returns:
        业务函数的执行结果,通常是 Flask 的响应对象.

    Raises:
        AppError: 业务逻辑主动抛出的异常原样抛出,其余异常包装为 SystemError.

    """
    event = f"{action}执行失败"
    context_payload: ContextDict = dict(context or {})

    try:
        result = func()
    except DEFAULT_EXPECTED_EXCEPTIONS as exc:
        db.session.rollback()
        log_with_context(
            "warning",
            event,
            module=module,
            action=action,
            context=context_payload,
            extra={"error_type": exc.__class__.__name__, "error_message": str(exc)},
        )
        raise
    except Exception as exc:
        db.session.rollback()
        log_with_context(
            "error",
            event,
            module=module,
            action=action,
            context=context_payload,
            extra={"error_type": exc.__class__.__name__, "unexpected": True},
        )
        raise SystemError(public_error) from exc

    try:
        db.session.commit()
    except Exception as exc:
        db.session.rollback()
        log_with_context(
            "error",
            event,
            module=module,
            action=action,
            context=context_payload,
            extra={"error_type": exc.__class__.__name__, "unexpected": True, "commit_failed": True},
        )
        raise SystemError(public_error) from exc
    return result
