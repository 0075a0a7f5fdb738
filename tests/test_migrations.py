from alembic import command
from alembic.config import Config
from sqlalchemy import create_engine, inspect
from sqlalchemy_utils import create_database, database_exists, drop_database

from tests.testing_config import testing_settings


def test_upgrade_creates_the_ingredient_table(tmp_path):
    sync_url = testing_settings.sync_test_database_url(tmp_path)
    if database_exists(sync_url):
        drop_database(sync_url)
    create_database(sync_url)

    alembic_cfg = Config("alembic.ini")
    alembic_cfg.set_main_option("sqlalchemy.url", testing_settings.async_test_database_url(tmp_path))
    alembic_cfg.attributes["configure_logger"] = False
    command.upgrade(alembic_cfg, "head")

    engine = create_engine(sync_url)
    try:
        columns = {c["name"] for c in inspect(engine).get_columns("ingredient")}
    finally:
        engine.dispose()
    assert columns == {"id", "name", "price", "created_at"}

    command.downgrade(alembic_cfg, "base")
    engine = create_engine(sync_url)
    try:
        assert "ingredient" not in inspect(engine).get_table_names()
    finally:
        engine.dispose()

    drop_database(sync_url)
