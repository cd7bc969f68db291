"""
utils/validators.py - Record Validation Helpers

Functions for validating advocate data before it reaches the database
or the in-memory record collection:
- Degree validation
- Phone number validation
- Years of experience validation
"""

from config import VALID_DEGREES, PHONE_NUMBER_DIGITS


def validate_degree(degree: str) -> str:
    """
    Validate degree value against allowed options.

    Args:
        degree: Degree code to validate (case-sensitive)

    Returns:
        str: The degree, unchanged

    Raises:
        ValueError: If degree is not one of the enumerated codes
    """
    if degree not in VALID_DEGREES:
        raise ValueError(
            f"Degree must be one of: {', '.join(VALID_DEGREES)}. "
            f"Got: '{degree}'"
        )
    return degree


def validate_phone_number(phone_number: int) -> int:
    """
    Validate that a phone number is an unformatted 10-digit integer.

    Raises:
        ValueError: If the number does not have exactly 10 digits
    """
    if isinstance(phone_number, bool) or not isinstance(phone_number, int):
        raise ValueError("Phone number must be an integer")
    if phone_number < 0 or len(str(phone_number)) != PHONE_NUMBER_DIGITS:
        raise ValueError(f"Phone number must have exactly {PHONE_NUMBER_DIGITS} digits")
    return phone_number


def validate_years_of_experience(years: int) -> int:
    """Years of experience cannot be negative"""
    if years is None or years < 0:
        raise ValueError("Years of experience must be a non-negative integer")
    return years
