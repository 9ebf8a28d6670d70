# tests/integration/conftest.py
"""集成测试专用 fixtures.

路由 -> Service -> Repository -> SQLite 的完整链路, 不替换任何协作者。
"""

import pytest

from devroster import create_app, db
from devroster.settings import Settings


@pytest.fixture(scope="function")
def app(monkeypatch):
    """创建测试应用实例并建表."""
    monkeypatch.setenv("FLASK_ENV", "testing")
    monkeypatch.setenv("SECRET_KEY", "test-secret-key")
    monkeypatch.setenv("DATABASE_URL", "sqlite:///:memory:")
    monkeypatch.delenv("WTF_CSRF_ENABLED", raising=False)

    app = create_app(settings=Settings.load())
    app.config["TESTING"] = True
    with app.app_context():
        db.create_all()
    return app


@pytest.fixture(scope="function")
def client(app):
    """测试客户端，每个测试函数独立."""
    return app.test_client()
