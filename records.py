"""
records.py - Advocate Record Source

Provides the record collection the search endpoint runs over.

Sources (selected with the RECORD_SOURCE setting):
    seed:     The static seed data, validated once on first use and then
              shared read-only by every request for the life of the process.
    database: Every row of the advocates table, loaded per request through
              a short-lived SQLAlchemy session.

Any failure to obtain the collection is raised as RecordSourceError, which
the HTTP layer reports as a generic failure response.
"""

import logging
from functools import lru_cache
from typing import Tuple

from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError

import crud
import schemas
from config import RECORD_SOURCE, RECORD_SOURCE_DATABASE, RECORD_SOURCE_SEED
from database import SessionLocal
from seed.advocates import ADVOCATE_DATA

logger = logging.getLogger(__name__)


class RecordSourceError(Exception):
    """The advocate collection could not be obtained"""


# ==============================================================================
# SOURCES
# ==============================================================================


@lru_cache(maxsize=1)
def load_seed_advocates() -> Tuple[schemas.Advocate, ...]:
    """
    Validate the static seed data into an immutable record collection.

    Returns:
        Tuple of Advocate records, in seed order

    Raises:
        RecordSourceError: If a seed record fails validation
    """
    try:
        records = tuple(schemas.Advocate.model_validate(item) for item in ADVOCATE_DATA)
    except ValidationError as exc:
        logger.error(f"Invalid advocate seed data: {exc}")
        raise RecordSourceError("Advocate seed data is invalid") from exc

    logger.info(f"Loaded {len(records)} advocates from seed data")
    return records


def load_database_advocates(session_factory=SessionLocal) -> Tuple[schemas.Advocate, ...]:
    """
    Load every advocate row from the database.

    Args:
        session_factory: Callable returning a new Session

    Returns:
        Tuple of Advocate records, ordered by ID

    Raises:
        RecordSourceError: If the database cannot be queried
    """
    db = session_factory()
    try:
        rows = crud.get_advocates(db)
        return tuple(schemas.Advocate.model_validate(row.to_dict()) for row in rows)
    except (SQLAlchemyError, ValidationError) as exc:
        logger.error(f"Failed to load advocates from database: {exc}")
        raise RecordSourceError("Advocate database is unavailable") from exc
    finally:
        db.close()


def load_advocates(source: str = RECORD_SOURCE) -> Tuple[schemas.Advocate, ...]:
    """
    Load the record collection from the configured source.

    Raises:
        RecordSourceError: If the source is unknown or unavailable
    """
    if source == RECORD_SOURCE_SEED:
        return load_seed_advocates()
    if source == RECORD_SOURCE_DATABASE:
        return load_database_advocates()
    raise RecordSourceError(f"Unknown record source: '{source}'")


# ==============================================================================
# DEPENDENCY INJECTION
# ==============================================================================

def get_advocate_records() -> Tuple[schemas.Advocate, ...]:
    """
    Record collection dependency for FastAPI.

    Usage in FastAPI:
        @router.get("/advocates")
        def search_advocates(records = Depends(get_advocate_records)):
            ...
    """
    return load_advocates()
