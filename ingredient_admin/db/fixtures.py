"""
Random demo ingredients for development databases.
"""

import logging
import random

from faker import Faker
from sqlalchemy.ext.asyncio import AsyncSession

from ingredient_admin.models import Ingredient
from ingredient_admin.schemas import IngredientForm

logger = logging.getLogger(__name__)

MIN_PRICE = 0
MAX_PRICE = 100
MAX_ATTEMPTS = 100


def build_ingredient(faker: Faker, rng: random.Random, form: IngredientForm) -> Ingredient:
    """Draw ingredients until one passes the form constraints."""
    for _ in range(MAX_ATTEMPTS):
        ingredient = Ingredient(name=faker.word(), price=rng.randint(MIN_PRICE, MAX_PRICE))
        if not form.validate(ingredient):
            return ingredient
    raise RuntimeError(f"Could not draw a valid ingredient in {MAX_ATTEMPTS} attempts")


async def load_fixtures(
    db: AsyncSession, *, count: int = 10, locale: str = "fr_FR", seed: int | None = None
) -> list[Ingredient]:
    faker = Faker(locale)
    rng = random.Random(seed)
    if seed is not None:
        faker.seed_instance(seed)

    form = IngredientForm()
    ingredients = [build_ingredient(faker, rng, form) for _ in range(count)]

    db.add_all(ingredients)
    await db.commit()

    logger.info(f"Inserted {len(ingredients)} demo ingredients")
    return ingredients
