"""开发者 Repository.

职责:
- 负责 Query 组装与数据库读取（read）
- 负责写操作的数据落库（add/delete/flush）（write）
- 不做序列化、不返回 Response、不 commit
"""

from __future__ import annotations

from typing import cast

from devroster import db
from devroster.models.developer import Developer


class DevelopersRepository:
    """开发者 Repository."""

    def get_by_id(self, developer_id: int) -> Developer | None:
        return cast("Developer | None", db.session.get(Developer, developer_id))

    def list_all(self) -> list[Developer]:
        return list(Developer.query.order_by(Developer.id.desc()).all())

    def add(self, developer: Developer) -> Developer:
        db.session.add(developer)
        db.session.flush()
        return developer

    def flush(self) -> None:
        db.session.flush()

    def delete_by_id(self, developer_id: int) -> int:
        deleted = Developer.query.filter_by(id=developer_id).delete(synchronize_session="fetch")
        db.session.flush()
        return int(deleted or 0)
