# tests/unit/routes/conftest.py
"""路由测试专用 fixtures.

提供 test_client 与记录调用的假 Service。
"""

import pytest

import devroster.routes.developers as developer_routes


class RecordingDeveloperService:
    """记录调用参数的 DeveloperService 替身."""

    def __init__(self, developers=None, found=None, affected=1):
        self.developers = list(developers or [])
        self.found = found
        self.affected = affected
        self.calls = []

    def insert_dev(self, dev):
        self.calls.append(("insert_dev", dev))
        return self.affected

    def select_dev_list(self):
        self.calls.append(("select_dev_list", None))
        return self.developers

    def select_dev_by_no(self, no):
        self.calls.append(("select_dev_by_no", no))
        return self.found

    def update_dev(self, dev):
        self.calls.append(("update_dev", dev))
        return self.affected

    def delete_dev(self, no):
        self.calls.append(("delete_dev", no))
        return self.affected

    def calls_to(self, name):
        return [arg for called, arg in self.calls if called == name]


@pytest.fixture(scope="function")
def client(app):
    """创建测试客户端."""
    return app.test_client()


@pytest.fixture(scope="function")
def fake_service(monkeypatch):
    """替换路由模块级的 DeveloperService."""
    service = RecordingDeveloperService()
    monkeypatch.setattr(developer_routes, "_developer_service", service)
    return service
