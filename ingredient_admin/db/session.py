from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession
from sqlalchemy.orm import sessionmaker
from typing import AsyncGenerator

from fastapi import Depends

from ingredient_admin.core.config import settings
from ingredient_admin.repositories.ingredient_repository import IngredientRepository

engine = create_async_engine(settings.ASYNC_DATABASE_URL, echo=settings.DB_ECHO, pool_pre_ping=True)
AsyncSessionLocal = sessionmaker(
    bind=engine,
    class_=AsyncSession,
    expire_on_commit=False
)

async def get_db() -> AsyncGenerator[AsyncSession, None]:
    async with AsyncSessionLocal() as session:
        yield session

def get_repository(db: AsyncSession = Depends(get_db)) -> IngredientRepository:
    return IngredientRepository(db)
