"""
crud.py - Database Operations for Advocates

This module is the data access layer between the record source, the seeding
command and the advocates table.

Operations Provided:
    READ:
        - get_advocates(): All advocates ordered by ID
        - count_advocates(): Total row count

    WRITE:
        - replace_advocates(): Delete every row and insert a new collection,
          in one transaction (used by seeding)

Error Handling:
    - ValueError: Record validation errors from the model layer
    - SQLAlchemyError: Logged, transaction rolled back, then re-raised
"""

from sqlalchemy.orm import Session  # Database session type
from sqlalchemy.exc import SQLAlchemyError  # Database exceptions
from typing import Iterable, List  # Type hints
import models  # SQLAlchemy models
import schemas  # Pydantic schemas
import logging  # Application logging

# ==============================================================================
# LOGGING SETUP
# ==============================================================================

logger = logging.getLogger(__name__)

# ==============================================================================
# CONSTANTS
# ==============================================================================

DATABASE_ERROR_MSG = "Database error occurred"


# ==============================================================================
# ADVOCATE RETRIEVAL FUNCTIONS
# ==============================================================================

def get_advocates(db: Session) -> List[models.Advocate]:
    """
    Get every advocate, ordered by ID so the collection order is stable
    across requests.

    Args:
        db: Database session

    Returns:
        List of Advocate rows
    """
    return db.query(models.Advocate).order_by(models.Advocate.id).all()


def count_advocates(db: Session) -> int:
    return db.query(models.Advocate).count()


# ==============================================================================
# SEEDING
# ==============================================================================

def replace_advocates(db: Session, advocates: Iterable[schemas.Advocate]) -> List[models.Advocate]:
    """
    Replace the contents of the advocates table.

    Existing rows are deleted and the given records inserted in a single
    transaction. Record IDs and timestamps are assigned by the database.

    Args:
        db: Database session
        advocates: Records to insert

    Returns:
        List of inserted Advocate rows, refreshed with their IDs

    Raises:
        ValueError: If a record fails model validation
        SQLAlchemyError: If the database rejects the transaction
    """
    try:
        deleted = db.query(models.Advocate).delete()
        logger.info(f"Cleared {deleted} existing advocates")

        rows = [
            models.Advocate(
                first_name=advocate.first_name,
                last_name=advocate.last_name,
                city=advocate.city,
                degree=advocate.degree,
                specialties=list(advocate.specialties),
                years_of_experience=advocate.years_of_experience,
                phone_number=advocate.phone_number,
            )
            for advocate in advocates
        ]
        db.add_all(rows)
        db.commit()

        for row in rows:
            db.refresh(row)

        logger.info(f"Inserted {len(rows)} advocates")
        return rows

    except ValueError:
        db.rollback()
        raise
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"{DATABASE_ERROR_MSG} while replacing advocates: {e}")
        raise
