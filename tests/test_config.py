"""
Todo API — Configuration and Bootstrap Tests
=============================================
"""

import logging

import pytest
from httpx import ASGITransport, AsyncClient
from pydantic import ValidationError as PydanticValidationError

from todo_api.config import Settings
from todo_api.main import create_app
from todo_api.middleware.logging import level_for_status


class TestSettings:

    def test_defaults_bind_all_interfaces_on_8080(self, monkeypatch):
        monkeypatch.delenv("BACKEND_HOST", raising=False)
        monkeypatch.delenv("BACKEND_PORT", raising=False)

        settings = Settings(_env_file=None)

        assert settings.backend_host == "0.0.0.0"
        assert settings.backend_port == 8080

    def test_port_from_environment(self, monkeypatch):
        monkeypatch.setenv("BACKEND_PORT", "9090")

        assert Settings(_env_file=None).backend_port == 9090

    def test_log_level_is_normalized(self):
        assert Settings(_env_file=None, log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level_rejected(self):
        with pytest.raises(PydanticValidationError):
            Settings(_env_file=None, log_level="loud")

    @pytest.mark.parametrize("raw", ["explorer", "/explorer/", "explorer/"])
    def test_explorer_prefix_is_normalized(self, raw):
        settings = Settings(_env_file=None, explorer_prefix=raw)

        assert settings.explorer_prefix == "/explorer"


class TestCreateApp:

    def test_apps_do_not_share_stores(self):
        assert create_app().state.todo_store is not create_app().state.todo_store

    @pytest.mark.asyncio
    async def test_custom_explorer_prefix(self):
        app = create_app(Settings(_env_file=None, explorer_prefix="/docs-ui"))
        transport = ASGITransport(app=app)

        assert app.state.swagger_config.url == "/docs-ui/swagger.json"
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            moved = await client.get("/docs-ui/swagger.json")
            default = await client.get("/explorer/swagger.json")

        assert moved.status_code == 200
        assert "/todos" in moved.json()["paths"]
        assert default.status_code == 404

    def test_builtin_docs_disabled(self):
        app = create_app()

        assert app.docs_url is None
        assert app.openapi_url is None


@pytest.mark.parametrize(
    "status, level",
    [(200, logging.INFO), (201, logging.INFO), (404, logging.WARNING), (500, logging.ERROR)],
)
def test_access_log_level(status, level):
    assert level_for_status(status) == level
