"""The Alembic history builds the same tables as the models."""

from sqlalchemy import create_engine, inspect

from app.db.init_db import init_db


def test_upgrade_creates_tables(tmp_path):
    url = f"sqlite:///{tmp_path / 'migrated.db'}"

    init_db(url)

    inspector = inspect(create_engine(url))
    assert {"users", "profiles", "posts"} <= set(inspector.get_table_names())
    post_columns = {c["name"] for c in inspector.get_columns("posts")}
    assert {"likes", "comments", "user", "date"} <= post_columns
