"""SQLite key/value store holding the one analyzed document."""

import logging
import sqlite3
from datetime import datetime

from pydantic import ValidationError

from . import config
from .data import SAMPLE_DOCUMENT
from .models import DocumentAnalysis

logger = logging.getLogger(__name__)

_CREATE_SQL = """
CREATE TABLE IF NOT EXISTS kv_store (
    key TEXT PRIMARY KEY,
    value TEXT NOT NULL,
    updated TEXT NOT NULL
);
"""


def get_db() -> sqlite3.Connection:
    db = sqlite3.connect(str(config.DB_PATH))
    db.row_factory = sqlite3.Row
    db.execute("PRAGMA journal_mode=WAL")
    db.executescript(_CREATE_SQL)
    return db


def set_item(key: str, value: str):
    db = get_db()
    db.execute(
        "INSERT OR REPLACE INTO kv_store (key, value, updated) VALUES (?, ?, ?)",
        (key, value, datetime.now().isoformat()),
    )
    db.commit()
    db.close()


def get_item(key: str) -> str | None:
    db = get_db()
    row = db.execute("SELECT value FROM kv_store WHERE key = ?", (key,)).fetchone()
    db.close()
    return row["value"] if row else None


def remove_item(key: str):
    db = get_db()
    db.execute("DELETE FROM kv_store WHERE key = ?", (key,))
    db.commit()
    db.close()


# ---------------------------------------------------------------------------
# Document slot
# ---------------------------------------------------------------------------

def save_document(document: DocumentAnalysis):
    """Replace the stored document."""
    set_item(config.DOCUMENT_KEY, document.model_dump_json())
    logger.info("Saved document '%s' (%d clauses)", document.title, len(document.clauses))


def has_document() -> bool:
    return get_item(config.DOCUMENT_KEY) is not None


def load_document() -> DocumentAnalysis:
    """The stored document, or the sample lease when nothing usable is stored."""
    raw = get_item(config.DOCUMENT_KEY)
    if raw is None:
        return SAMPLE_DOCUMENT.model_copy(deep=True)
    try:
        return DocumentAnalysis.model_validate_json(raw)
    except ValidationError:
        logger.warning("Stored document is not readable, showing the sample instead", exc_info=True)
        return SAMPLE_DOCUMENT.model_copy(deep=True)


def clear_document():
    remove_item(config.DOCUMENT_KEY)
