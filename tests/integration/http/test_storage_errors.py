from __future__ import annotations

import pytest
from httpx import ASGITransport, AsyncClient

from kambaz.application.errors import StorageUnavailable
from kambaz.config.settings import Settings
from kambaz.infrastructure.repos.errors import storage_errors
from kambaz.interfaces.http.main import create_app


@pytest.fixture()
def unreachable_settings(tmp_path) -> Settings:
    # SQLite cannot create the missing parent directory, so every connect fails
    db_path = tmp_path / "missing" / "nested" / "test.db"
    return Settings.model_validate(
        {"database_url": f"sqlite+aiosqlite:///{db_path}", "environment": "test"}
    )


async def test_unreachable_store_maps_to_503(unreachable_settings):
    app = create_app(settings=unreachable_settings)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        response = await client.get("/api/enrollments")
    await app.state.engine.dispose()

    assert response.status_code == 503
    assert response.json()["code"] == "storage_unavailable"


def test_storage_errors_wraps_connection_failures():
    with pytest.raises(StorageUnavailable) as info:
        with storage_errors("listing enrollments"):
            raise ConnectionRefusedError("refused")
    assert info.value.status_code == 503
    assert isinstance(info.value.__cause__, ConnectionRefusedError)


def test_storage_errors_leaves_other_errors_alone():
    with pytest.raises(KeyError):
        with storage_errors("listing enrollments"):
            raise KeyError("boom")


def test_settings_rewrites_postgres_scheme():
    settings = Settings.model_validate({"database_url": "postgres://u:p@db:5432/kambaz"})
    assert settings.database_url == "postgresql+asyncpg://u:p@db:5432/kambaz"
    plain = Settings.model_validate({"database_url": "postgresql://u:p@db/kambaz"})
    assert plain.database_url.startswith("postgresql+asyncpg://")
    assert settings.cors_allow_origins_list == ["*"]
