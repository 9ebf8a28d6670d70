# tests/unit/conftest.py
"""单元测试专用 fixtures.

提供 monkeypatch 相关的通用 fixtures。
"""

import pytest
from flask import template_rendered


@pytest.fixture(autouse=True)
def _unit_test_env(monkeypatch):
    """为 unit tests 强制注入隔离环境变量.

    目标:
    - unit tests 只使用内存 SQLite
    - 避免开发者本机环境变量与 `.env` 影响测试稳定性
    """
    monkeypatch.setenv("FLASK_ENV", "testing")
    monkeypatch.setenv("DATABASE_URL", "sqlite:///:memory:")
    monkeypatch.setenv("SECRET_KEY", "test-secret-key")
    monkeypatch.delenv("WTF_CSRF_ENABLED", raising=False)
    monkeypatch.delenv("FLASK_DEBUG", raising=False)


@pytest.fixture(scope="function")
def app():
    """创建测试应用实例, 内存数据库已建表."""
    from devroster import create_app, db
    from devroster.settings import Settings

    settings = Settings.load()
    app = create_app(settings=settings)
    app.config["TESTING"] = True
    with app.app_context():
        db.create_all()
    return app


@pytest.fixture(scope="function")
def captured_templates(app):
    """记录请求期间渲染的模板与上下文."""
    recorded = []

    def _record(sender, template, context, **extra):
        recorded.append((template.name, context))

    template_rendered.connect(_record, app)
    yield recorded
    template_rendered.disconnect(_record, app)
