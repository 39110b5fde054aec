# nursery_pos/database.py

import logging

from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker

from nursery_pos.core.config import settings

logger = logging.getLogger(__name__)

connect_args = {}
if settings.DATABASE_URL.startswith("sqlite"):
    connect_args = {"check_same_thread": False, "timeout": 10}

engine = create_engine(
    settings.DATABASE_URL,
    connect_args=connect_args,
    echo=False,
    pool_pre_ping=True,
)

SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False)
Base = declarative_base()


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db():
    """
    Bring the store up to date and seed the settings row.

    Runs on every startup. A failing migration is logged and
    the app keeps serving with whatever schema it has.
    """
    # Register models on Base.metadata
    from nursery_pos.models import products, sales, shop_settings  # noqa: F401
    from nursery_pos.migrations.runner import run_migrations
    from nursery_pos.services.configuration import ConfigurationService

    Base.metadata.create_all(bind=engine)

    try:
        run_migrations(engine)
    except Exception:
        logger.exception("Database migration failed, continuing startup")

    db = SessionLocal()
    try:
        ConfigurationService(db).seed_settings()
    finally:
        db.close()
