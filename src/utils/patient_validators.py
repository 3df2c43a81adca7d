"""
Patient field validation utilities.

Provides centralized validation logic for patient fields
for consistent validation across the application.
"""

from core.constants import PATIENT_NUMBER_PREFIX, PATIENT_NUMBER_WIDTH

VALID_GENDERS = ("Male", "Female", "Other")


def validate_gender_field(v: str) -> str:
    """
    Validate gender field value.

    Valid values: 'Male', 'Female', 'Other' (case-insensitive on input).

    Args:
        v: Gender value to validate

    Returns:
        Normalized gender value ('Male', 'Female' or 'Other')

    Raises:
        ValueError: If the value is not a valid gender value
    """
    normalized = v.strip().capitalize()
    if normalized in VALID_GENDERS:
        return normalized
    raise ValueError("Gender must be one of Male, Female or Other")


def generate_patient_number(existing_count: int) -> str:
    """
    Build the next sequential patient number.

    Example:
        >>> generate_patient_number(3)
        'P004'
    """
    return f"{PATIENT_NUMBER_PREFIX}{existing_count + 1:0{PATIENT_NUMBER_WIDTH}d}"
