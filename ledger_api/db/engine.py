# ledger_api/db/engine.py

import os
from functools import lru_cache

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine

DEFAULT_DB_URL = "sqlite:///db.sqlite"  # file in project root


def get_db_url() -> str:
    return os.getenv("LEDGER_DB_URL", DEFAULT_DB_URL)


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    # SQLite ignores ON DELETE CASCADE unless this is set per connection
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


@lru_cache(maxsize=None)
def _engine_for(url: str) -> Engine:
    # echo=True if you want to see SQL printed in the terminal
    engine = create_engine(url, future=True)
    if url.startswith("sqlite"):
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)
    return engine


def get_engine() -> Engine:
    return _engine_for(get_db_url())
