"""devroster - 开发者演示路由.

同一份开发者表单的三种取参方式(手工解析/声明式参数/命令对象),
以及基于命令对象的增删改查.
"""

from flask import Blueprint, flash, redirect, render_template, request, url_for
from werkzeug.wrappers.response import Response

from devroster.constants import ErrorMessages, FlashCategory, SuccessMessages
from devroster.errors import ValidationError
from devroster.infra.route_safety import safe_route_call
from devroster.models.developer import Developer, Gender
from devroster.schemas.developers import (
    LANG_FIELD,
    DevCommand,
    DevNoPayload,
    DevNoQuery,
    DevParams,
    parse_int_field,
)
from devroster.schemas.validation import validate_or_raise
from devroster.services.developers import DeveloperService
from devroster.types import MutablePayloadDict
from devroster.utils.request_payload import parse_payload
from devroster.utils.structlog_config import log_debug, log_info, log_warning

# 创建蓝图
demo_bp = Blueprint("demo", __name__)
_developer_service = DeveloperService()

_MODULE = "demo"


def _form_payload() -> MutablePayloadDict:
    payload = parse_payload(request.form, list_fields=(LANG_FIELD,))
    log_debug("表单参数解析完成", module=_MODULE, endpoint=request.endpoint, fields=sorted(payload))
    return payload


def _require_int(payload: MutablePayloadDict, field: str) -> int:
    raw = payload.get(field)
    if raw is None or raw == "":
        raise ValidationError(ErrorMessages.MISSING_REQUIRED_FIELDS.format(fields=field), extra={"field": field})
    try:
        return parse_int_field(raw, field=field)
    except ValueError as exc:
        raise ValidationError(str(exc), extra={"field": field}) from None


def _log_dev(dev: Developer) -> None:
    log_info(f"dev = {dev!r}", module=_MODULE, dev=dev.to_dict())


@demo_bp.route("/devForm.do", methods=["GET"])
def dev_form() -> str:
    """开发者登记表单."""
    log_info("/demo/devForm.do 请求", module=_MODULE)
    return render_template("demo/devForm.html")


@demo_bp.route("/dev1.do", methods=["POST"])
def dev1() -> str:
    """手工解析表单参数并展示结果.

    逐个读取参数: career 按十进制整数解析, gender 按成员名解析,
    lang 读取全部取值.

    Raises:
        ValidationError: career 缺失或非整数、gender 不合法时抛出.

    """
    payload = _form_payload()

    career = _require_int(payload, "career")
    if career < 0:
        raise ValidationError(ErrorMessages.NEGATIVE_CAREER, extra={"field": "career"})
    raw_gender = payload.get("gender")
    gender = Gender.parse(str(raw_gender)) if raw_gender is not None else None
    languages = [str(item) for item in payload.get(LANG_FIELD) or [] if item]

    dev = Developer(
        name=str(payload.get("name") or ""),
        career=career,
        email=str(payload.get("email") or ""),
        gender=gender,
        languages=languages,
    )
    _log_dev(dev)
    return render_template("demo/devResult.html", dev=dev)


@demo_bp.route("/dev2.do", methods=["POST"])
def dev2() -> str:
    """按声明的参数表绑定后展示结果."""
    params = validate_or_raise(DevParams, _form_payload())
    dev = params.to_developer()
    _log_dev(dev)
    return render_template("demo/devResult.html", dev=dev)


@demo_bp.route("/dev3.do", methods=["POST"])
def dev3() -> str:
    """命令对象绑定后展示结果."""
    dev = validate_or_raise(DevCommand, _form_payload()).to_developer()
    _log_dev(dev)
    return render_template("demo/devResult.html", dev=dev)


@demo_bp.route("/insertDev.do", methods=["POST"])
def insert_dev() -> Response:
    """新增开发者后重定向到首页."""
    command = validate_or_raise(DevCommand, _form_payload())
    dev = command.to_developer()
    dev.id = 0

    def _execute() -> Response:
        _developer_service.insert_dev(dev)
        flash(SuccessMessages.DEV_CREATED, FlashCategory.SUCCESS)
        return redirect(url_for("main.index"))

    return safe_route_call(
        _execute,
        module=_MODULE,
        action="insert_dev",
        public_error="开发者新增失败",
        context={"name": dev.name},
    )


@demo_bp.route("/devList.do", methods=["GET"])
def dev_list() -> str:
    """开发者列表页."""

    def _execute() -> str:
        developers = _developer_service.select_dev_list()
        log_info("开发者列表查询完成", module=_MODULE, count=len(developers))
        return render_template("demo/devList.html", list=developers)

    return safe_route_call(
        _execute,
        module=_MODULE,
        action="dev_list",
        public_error="加载开发者列表失败",
    )


@demo_bp.route("/updateDev.do", methods=["GET"])
def dev_update_form() -> str:
    """开发者修改表单, 记录不存在时 updateInfo 为 None."""
    no = validate_or_raise(DevNoQuery, parse_payload(request.args)).no

    def _execute() -> str:
        update_info = _developer_service.select_dev_by_no(no)
        log_info(f"updateInfo = {update_info!r}", module=_MODULE, no=no, found=update_info is not None)
        return render_template("demo/devUpdateForm.html", updateInfo=update_info)

    return safe_route_call(
        _execute,
        module=_MODULE,
        action="dev_update_form",
        public_error="加载开发者信息失败",
        context={"no": no},
    )


@demo_bp.route("/updateDev.do", methods=["POST"])
def dev_update() -> Response:
    """修改开发者后重定向到列表页."""
    dev = validate_or_raise(DevCommand, _form_payload()).to_developer()

    def _execute() -> Response:
        affected = _developer_service.update_dev(dev)
        if not affected:
            log_warning("待修改的开发者不存在", module=_MODULE, no=dev.id)
        flash(SuccessMessages.DEV_UPDATED, FlashCategory.SUCCESS)
        return redirect(url_for("demo.dev_list"))

    return safe_route_call(
        _execute,
        module=_MODULE,
        action="dev_update",
        public_error="开发者修改失败",
        context={"no": dev.id},
    )


@demo_bp.route("/deleteDev.do", methods=["POST"])
def dev_delete() -> Response:
    """删除开发者后重定向到首页."""
    no = validate_or_raise(DevNoPayload, _form_payload()).no

    def _execute() -> Response:
        affected = _developer_service.delete_dev(no)
        if not affected:
            log_warning("待删除的开发者不存在", module=_MODULE, no=no)
        flash(SuccessMessages.DEV_DELETED, FlashCategory.SUCCESS)
        return redirect(url_for("main.index"))

    return safe_route_call(
        _execute,
        module=_MODULE,
        action="dev_delete",
        public_error="开发者删除失败",
        context={"no": no},
    )
