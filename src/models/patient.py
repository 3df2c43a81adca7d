"""
Patient model representing individuals registered at the front desk.

Patients are identified internally by ``id`` and shown to staff by their
sequential ``patient_number`` (P001, P002, ...).
"""

from typing import Optional

from pydantic import BaseModel, Field, field_validator

from utils.datetime_utils import validate_date_string
from utils.patient_validators import validate_gender_field


class Patient(BaseModel):
    """Patient entity registered at the clinic."""

    id: str
    """Unique identifier for the patient."""

    patient_number: str
    """Human-facing sequential number, e.g. "P001"."""

    surname: str
    name: str

    gender: str
    """One of 'Male', 'Female', 'Other'."""

    age: int = Field(ge=0, le=150)
    address: str = ""
    phone_number: str = ""

    registration_date: str
    """Day the patient was registered (YYYY-MM-DD)."""

    is_new: Optional[bool] = None
    """Set for patients registered through the front desk in this session."""

    @field_validator('gender')
    @classmethod
    def validate_gender(cls, v: str) -> str:
        return validate_gender_field(v)

    @field_validator('registration_date')
    @classmethod
    def validate_registration_date(cls, v: str) -> str:
        return validate_date_string(v)

    @property
    def full_name(self) -> str:
        """Display name in "name surname" order, as snapshotted on appointments."""
        return f"{self.name} {self.surname}"
