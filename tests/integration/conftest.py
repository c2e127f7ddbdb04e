import os
import uuid
from collections.abc import Generator
from typing import Any

import psycopg
import pytest

from estate_import.config.settings import Settings
from estate_import.database.connection import build_conninfo, close_pool, get_connection, init_pool


def _test_settings() -> Settings:
    return Settings(db_database=os.environ.get("DB_DATABASE", "snaphouse_test"))


@pytest.fixture(scope="session")
def test_settings() -> Settings:
    return _test_settings()


@pytest.fixture(scope="session", autouse=True)
def integration_pool(test_settings: Settings) -> Generator[None, None, None]:
    try:
        with psycopg.connect(build_conninfo(test_settings), connect_timeout=3):
            pass
    except psycopg.Error as e:
        pytest.skip(f"PostgreSQL test DB not available: {e}. Set DB_* env to run integration tests")
    init_pool(test_settings)
    try:
        yield
    finally:
        close_pool()


@pytest.fixture
def db_conn() -> Generator[psycopg.Connection[Any], None, None]:
    with get_connection() as conn:
        yield conn


@pytest.fixture
def user_id() -> Generator[str, None, None]:
    """Fresh owner id; every row written under it is removed afterwards."""
    owner = str(uuid.uuid4())
    yield owner
    with get_connection() as conn:
        with conn.cursor() as cur:
            for table in ("properties", "buyers", "sellers", "contacts"):
                cur.execute(f"DELETE FROM {table} WHERE user_id = %s", (owner,))
        conn.commit()
