"""
seed - Advocate Seed Data and Seeding Command

- advocates: The static record collection
- cli: `python -m seed` replaces the advocates table with the seed data
"""

from seed.advocates import ADVOCATE_DATA, SPECIALTIES

__all__ = ["ADVOCATE_DATA", "SPECIALTIES"]
