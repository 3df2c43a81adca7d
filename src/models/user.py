from enum import Enum


class UserRole(str, Enum):
    """Front desk roles; each sees its own dashboard."""
    RECEPTIONIST = "receptionist"
    DOCTOR = "doctor"
