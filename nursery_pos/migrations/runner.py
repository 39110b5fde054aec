# nursery_pos/migrations/runner.py

from pathlib import Path

from alembic import command
from alembic.config import Config

MIGRATIONS_DIR = Path(__file__).resolve().parent


def alembic_config(url: str | None = None) -> Config:
    config = Config()
    config.set_main_option("script_location", str(MIGRATIONS_DIR))
    if url:
        config.set_main_option("sqlalchemy.url", url)
    return config


def run_migrations(engine):
    """Upgrade the database behind ``engine`` to the latest revision."""
    config = alembic_config(engine.url.render_as_string(hide_password=False))

    with engine.begin() as connection:
        config.attributes["connection"] = connection
        command.upgrade(config, "head")
