"""Shared fixtures: in-memory SQLite store and an HTTP client bound to it."""

import os

os.environ.setdefault("DB_PASSWORD", "test")
os.environ.setdefault("DB_DSN", "sqlite+aiosqlite://")

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from app.core.database import Base, get_db
from app.main import app
from app.modules.company.models import Company  # noqa: F401
from app.modules.company.repository import CompanyRepository
from app.modules.company.service import CompanyService
from app.modules.user.models import User  # noqa: F401
from app.modules.user.repository import UserRepository
from app.modules.user.service import UserService


@pytest.fixture
async def engine():
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


@pytest.fixture
async def session(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
def company_repository(session):
    return CompanyRepository(session)


@pytest.fixture
def company_service(company_repository):
    return CompanyService(company_repository)


@pytest.fixture
def user_repository(session):
    return UserRepository(session)


@pytest.fixture
def user_service(user_repository):
    return UserService(user_repository)


@pytest.fixture
async def client(session_factory):
    """HTTP client whose requests each run in their own committed transaction."""

    async def override_get_db():
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test"
    ) as ac:
        yield ac
    app.dependency_overrides.clear()
