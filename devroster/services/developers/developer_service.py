"""开发者持久化 Service.

职责:
- 编排开发者的新增/查询/更新/删除
- 调用 repository 执行 add/delete/flush
- 写操作返回受影响行数
- 不返回 Response、不 commit(事务边界在路由层 safe_route_call)
"""

from __future__ import annotations

from sqlalchemy.exc import SQLAlchemyError

from devroster.errors import DatabaseError
from devroster.models.developer import Developer
from devroster.repositories.developers_repository import DevelopersRepository
from devroster.utils.structlog_config import log_info


class DeveloperService:
    """开发者持久化服务."""

    def __init__(self, repository: DevelopersRepository | None = None) -> None:
        """初始化服务并注入开发者仓库."""
        self._repository = repository or DevelopersRepository()

    def insert_dev(self, dev: Developer) -> int:
        """新增开发者, 主键由数据库分配."""
        # 0 表示未保存
        if not dev.id:
            dev.id = None
        try:
            self._repository.add(dev)
        except SQLAlchemyError as exc:
            raise DatabaseError(extra={"action": "insert_dev", "exception": str(exc)}) from exc

        log_info("开发者新增成功", module="developers", developer_id=dev.id, name=dev.name)
        return 1

    def select_dev_list(self) -> list[Developer]:
        """查询全部开发者, 新记录在前."""
        try:
            return self._repository.list_all()
        except SQLAlchemyError as exc:
            raise DatabaseError(extra={"action": "select_dev_list", "exception": str(exc)}) from exc

    def select_dev_by_no(self, no: int) -> Developer | None:
        """按主键查询开发者, 不存在时返回 None."""
        try:
            return self._repository.get_by_id(no)
        except SQLAlchemyError as exc:
            raise DatabaseError(extra={"action": "select_dev_by_no", "no": no, "exception": str(exc)}) from exc

    def update_dev(self, dev: Developer) -> int:
        """用提交的记录覆盖已保存记录的可编辑字段.

        Returns:
            受影响行数, 记录不存在时为 0.

        """
        try:
            stored = self._repository.get_by_id(dev.id) if dev.id else None
            if stored is None:
                return 0

            stored.name = dev.name
            stored.career = dev.career
            stored.email = dev.email
            stored.gender = dev.gender
            stored.languages = list(dev.languages or [])
            self._repository.flush()
        except SQLAlchemyError as exc:
            raise DatabaseError(extra={"action": "update_dev", "no": dev.id, "exception": str(exc)}) from exc

        log_info("开发者更新成功", module="developers", developer_id=stored.id)
        return 1

    def delete_dev(self, no: int) -> int:
        """按主键删除开发者, 返回受影响行数."""
        try:
            deleted = self._repository.delete_by_id(no)
        except SQLAlchemyError as exc:
            raise DatabaseError(extra={"action": "delete_dev", "no": no, "exception": str(exc)}) from exc

        log_info("开发者删除完成", module="developers", developer_id=no, affected=deleted)
        return deleted
