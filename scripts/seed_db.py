import argparse
import asyncio
import sys
import os

from sqlalchemy import delete

sys.path.append(os.getcwd())

from ingredient_admin.core.config import settings
from ingredient_admin.db.fixtures import load_fixtures
from ingredient_admin.db.session import AsyncSessionLocal
from ingredient_admin.models import Ingredient


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Fill the database with demo ingredients.")
    parser.add_argument("--count", type=int, default=settings.SEED_COUNT)
    parser.add_argument("--locale", default=settings.SEED_LOCALE)
    parser.add_argument("--seed", type=int, default=None, help="Random seed for repeatable data")
    parser.add_argument("--purge", action="store_true", help="Delete existing ingredients first")
    return parser.parse_args(argv)


async def seed(args):
    print("Seeding database...")

    async with AsyncSessionLocal() as db:
        if args.purge:
            print(" - Cleaning old data...")
            await db.execute(delete(Ingredient))
            await db.commit()

        print(" - Loading ingredients...")
        ingredients = await load_fixtures(db, count=args.count, locale=args.locale, seed=args.seed)

        print(f"Successfully inserted {len(ingredients)} ingredients.")

if __name__ == "__main__":
    asyncio.run(seed(parse_args()))
