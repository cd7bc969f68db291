"""Seeding command: replace the advocates table with the static seed data."""

import logging

import click
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker

import crud
import models  # noqa: F401 - registers the advocates table on Base.metadata
from config import DATABASE_URL
from database import Base, build_engine, check_database_health
from records import RecordSourceError, load_seed_advocates

logger = logging.getLogger(__name__)


def seed_database(engine) -> int:
    """
    Create the advocates table if needed and replace its contents.

    Args:
        engine: SQLAlchemy engine for the target database

    Returns:
        int: Number of advocates inserted
    """
    Base.metadata.create_all(bind=engine)
    session = sessionmaker(autocommit=False, autoflush=False, bind=engine)()
    try:
        inserted = crud.replace_advocates(session, load_seed_advocates())
        return len(inserted)
    finally:
        session.close()


@click.command(name="seed")
@click.option("--database-url", default=DATABASE_URL, show_default=True, help="Target database URL")
@click.option("--dry-run", is_flag=True, help="Validate the seed data without touching the database")
def seed(database_url, dry_run):
    """Replace the advocates table with the static seed data."""
    try:
        advocates = load_seed_advocates()
    except RecordSourceError as exc:
        raise click.ClickException(str(exc))

    if dry_run:
        click.echo(f"[OK] {len(advocates)} seed advocates are valid")
        return

    target = database_url.split('@')[-1]
    click.echo(f"[SEED] Seeding advocates into {target}...")

    engine = build_engine(database_url)
    if not check_database_health(engine):
        raise click.ClickException(f"Could not connect to {target}")

    try:
        count = seed_database(engine)
    except (SQLAlchemyError, ValueError) as exc:
        logger.error(f"Error seeding database: {exc}")
        raise click.ClickException(f"Seeding failed: {exc}")
    finally:
        engine.dispose()

    click.echo(f"[OK] Inserted {count} advocates")
