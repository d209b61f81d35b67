import logging
from pathlib import Path

from alembic.config import Config
from alembic import command
from sqlalchemy import inspect

from app.db.session import engine
from app.db.base import Base

logger = logging.getLogger("app")

PROJECT_ROOT = Path(__file__).resolve().parents[2]

def alembic_config(database_url: str = None) -> Config:
    cfg = Config(str(PROJECT_ROOT / "alembic.ini"))
    cfg.set_main_option("script_location", str(PROJECT_ROOT / "alembic"))
    if database_url:
        cfg.set_main_option("sqlalchemy.url", database_url)
    return cfg

def init_db(database_url: str = None) -> None:
    """
    Initialize the database by running Alembic migrations.
    """
    try:
        command.upgrade(alembic_config(database_url), "head")
        logger.info("Database migrations applied successfully")
    except Exception as e:
        logger.error(f"Error applying database migrations: {e}")
        raise


def create_all_tables(bind=None) -> bool:
    bind = bind if bind is not None else engine
    try:
        existing_tables = inspect(bind).get_table_names()

        Base.metadata.create_all(bind=bind)

        new_tables = set(inspect(bind).get_table_names()) - set(existing_tables)
        if new_tables:
            logger.info(f"Created new tables: {new_tables}")

        return True
    except Exception as e:
        logger.error(f"Error creating database tables: {e}")
        return False


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    logger.info("Applying database migrations")
    init_db()
    logger.info("Database ready")
