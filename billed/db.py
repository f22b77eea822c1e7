import logging

from sqlalchemy import Connection, create_engine, text
from sqlalchemy.engine import Engine

from billed.settings import settings

logger = logging.getLogger(__name__)

SCHEMA_DDL = """
CREATE TABLE IF NOT EXISTS bills (
    id VARCHAR(26) PRIMARY KEY,
    email VARCHAR(255) NOT NULL DEFAULT '',
    type VARCHAR(64) NOT NULL,
    name TEXT NOT NULL,
    amount INTEGER NOT NULL DEFAULT 0,
    date VARCHAR(32) NOT NULL,
    vat VARCHAR(32),
    pct INTEGER NOT NULL DEFAULT 20,
    commentary TEXT NOT NULL DEFAULT '',
    file_url TEXT,
    file_name VARCHAR(255),
    status VARCHAR(16) NOT NULL DEFAULT 'pending',
    comment_admin TEXT NOT NULL DEFAULT '',
    created_at DATETIME NOT NULL,
    updated_at DATETIME NOT NULL
)
"""

_engine: Engine | None = None
_connection: Connection | None = None


def get_engine() -> Engine:
    global _engine
    if _engine is None:
        _engine = create_engine(settings.db_url, pool_pre_ping=True)
        logger.info("Database engine created")
    return _engine


def get_connection() -> Connection:
    """Return a process-wide connection. The terminal front-end is single-user."""
    global _connection
    if _connection is None:
        _connection = get_engine().connect()
        logger.debug("Singleton DB connection created")
    return _connection


def create_schema(conn: Connection) -> None:
    conn.execute(text(SCHEMA_DDL))
    conn.commit()


def initialize_db() -> None:
    logger.info("Creating bill schema if missing")
    create_schema(get_connection())
