import pytest

from ingredient_admin.db.fixtures import MAX_PRICE, load_fixtures
from ingredient_admin.repositories.ingredient_repository import IngredientRepository
from ingredient_admin.schemas import IngredientForm


@pytest.mark.asyncio
class TestLoadFixtures:
    async def test_inserts_the_requested_count(self, db_session, repository: IngredientRepository):
        inserted = await load_fixtures(db_session, count=25, seed=1234)

        assert len(inserted) == 25
        assert await repository.count() == 25
        assert all(i.id is not None for i in inserted)

    async def test_seeded_rows_respect_the_form_constraints(self, db_session):
        form = IngredientForm()
        inserted = await load_fixtures(db_session, count=50, seed=42)

        assert all(form.validate(i) == [] for i in inserted)
        assert all(0 < i.price <= MAX_PRICE for i in inserted)

    async def test_same_seed_gives_the_same_data(self, session_factory):
        async with session_factory() as first_session:
            first = [(i.name, i.price) for i in await load_fixtures(first_session, count=5, seed=7)]
        async with session_factory() as second_session:
            second = [(i.name, i.price) for i in await load_fixtures(second_session, count=5, seed=7)]

        assert first == second
