"""
Data access for persisted ingredients.
"""

import logging
from typing import Sequence

from sqlalchemy import func
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from ingredient_admin.models import Ingredient

logger = logging.getLogger(__name__)


class IngredientRepository:
    """Reads and writes Ingredient rows through one AsyncSession."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_all(self) -> Sequence[Ingredient]:
        """Every ingredient, in insertion (id) order."""
        result = await self.db.execute(select(Ingredient).order_by(Ingredient.id))
        return result.scalars().all()

    async def find_by_id(self, ingredient_id: int) -> Ingredient | None:
        query = select(Ingredient).where(Ingredient.id == ingredient_id)
        result = await self.db.execute(query)
        return result.scalar_one_or_none()

    async def count(self) -> int:
        result = await self.db.execute(select(func.count()).select_from(Ingredient))
        return result.scalar_one()

    async def save(self, ingredient: Ingredient) -> Ingredient:
        """
        Insert the ingredient when it has no id yet, otherwise write its
        pending changes. The id is assigned by the database on insert.
        """
        self.db.add(ingredient)
        await self.db.commit()
        await self.db.refresh(ingredient)
        return ingredient

    async def delete(self, ingredient: Ingredient) -> bool:
        """
        Remove the ingredient's row.

        Returns False when the row no longer exists.
        """
        current = await self.find_by_id(ingredient.id) if ingredient.id is not None else None
        if current is None:
            logger.warning(f"Ingredient {ingredient.id} already removed, nothing to delete")
            return False

        await self.db.delete(current)
        await self.db.commit()
        return True

    def detach(self, ingredient: Ingredient) -> None:
        """Stop tracking the ingredient so its unsaved changes are never flushed."""
        if ingredient in self.db:
            self.db.expunge(ingredient)
