"""Pytest configuration and fixtures."""

from collections.abc import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient

from studydesk.config import Settings
from studydesk.db.session import create_session_factory, create_storage_engine
from studydesk.main import create_app
from studydesk.services.storage import LocalStorage
from studydesk.services.workspace import Workspace



@pytest.fixture
def storage(tmp_path) -> LocalStorage:
    """Local storage on a fresh SQLite file."""
    engine = create_storage_engine(f"sqlite:///{tmp_path / 'studydesk.db'}")
    return LocalStorage(create_session_factory(engine))


@pytest.fixture
def workspace(storage: LocalStorage) -> Workspace:
    """Empty workspace (no seed data)."""
    return Workspace.open(storage)


@pytest.fixture
async def client(workspace: Workspace, tmp_path) -> AsyncGenerator[AsyncClient, None]:
    """Async HTTP client for testing FastAPI endpoints."""
    settings = Settings(storage_path=tmp_path / "unused.db", seed_demo_data=False)
    app = create_app(settings, workspace=workspace)
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac
