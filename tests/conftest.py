import os

os.environ.setdefault("SECRET_KEY", "testing-secret-key")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

import pytest
import httpx
from httpx import ASGITransport
from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker, AsyncSession

from ingredient_admin.models import Base, Ingredient
from ingredient_admin.repositories.ingredient_repository import IngredientRepository
from tests.testing_config import testing_settings


@pytest.fixture
async def db_engine(tmp_path):
    engine = create_async_engine(testing_settings.async_test_database_url(tmp_path))
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(db_engine):
    return async_sessionmaker(bind=db_engine, expire_on_commit=False)


@pytest.fixture
async def db_session(session_factory) -> AsyncGenerator[AsyncSession, None]:
    async with session_factory() as session:
        yield session


@pytest.fixture
def repository(db_session) -> IngredientRepository:
    return IngredientRepository(db_session)


@pytest.fixture
def make_ingredients(session_factory):
    """Insert ingredients named ``<prefix> 1`` .. ``<prefix> n`` in their own session."""

    async def _make(count: int, prefix: str = "Ingrédient", price: float = 10.0) -> list[Ingredient]:
        ingredients = [Ingredient(name=f"{prefix} {i}", price=price) for i in range(1, count + 1)]
        async with session_factory() as session:
            session.add_all(ingredients)
            await session.commit()
        return ingredients

    return _make


@pytest.fixture
async def async_client(session_factory):
    from ingredient_admin.main import app
    from ingredient_admin.db.session import get_db

    async def override_get_db() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    async with httpx.AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()
