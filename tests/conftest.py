import os
from typing import AsyncGenerator, Generator

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.orm import Session

os.environ["ENV_STATE"] = "test"
from alembic import command
from alembic.config import Config
from fleet_service.api.deps import get_db
from fleet_service.core.database import engine, session_factory
from fleet_service.main import app


@pytest.fixture(scope="session")
def anyio_backend():
    return "asyncio"


@pytest.fixture(scope="session")
def alembic_cfg() -> Config:
    cfg = Config("alembic.ini")
    cfg.set_main_option("sqlalchemy.url", str(engine.url))
    return cfg


def run_migration(cfg: Config, direction, revision: str) -> None:
    # share the app engine's connection, a new one would open a different in-memory database
    with engine.begin() as connection:
        cfg.attributes["connection"] = connection
        direction(cfg, revision)


@pytest.fixture()
def db_session(alembic_cfg) -> Generator[Session, None, None]:
    """fresh schema for every test built by the migrations, in-memory sqlite by default"""
    run_migration(alembic_cfg, command.upgrade, "head")
    session = session_factory()
    yield session
    session.close()
    run_migration(alembic_cfg, command.downgrade, "base")


@pytest.fixture()
async def async_client(db_session) -> AsyncGenerator[AsyncClient, None]:
    def overrides_get_db():
        yield db_session

    app.dependency_overrides[get_db] = overrides_get_db
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://testserver"
    ) as c:
        yield c
    app.dependency_overrides.clear()
