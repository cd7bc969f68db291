"""
utils - Utility Functions Package

This package contains helper functions used across the application:
- validators: Advocate record validation
- query_params: Lenient coercion of raw query string values
"""

from utils.validators import (
    validate_degree,
    validate_phone_number,
    validate_years_of_experience,
)
from utils.query_params import parse_int, parse_positive_int, clean_text

__all__ = [
    "validate_degree",
    "validate_phone_number",
    "validate_years_of_experience",
    "parse_int",
    "parse_positive_int",
    "clean_text",
]
