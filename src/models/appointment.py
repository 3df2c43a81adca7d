"""
Appointment model representing a booked visit with a doctor.

An appointment occupies exactly one slot of its doctor's day: ``time`` must be
the start time of one of the generated slots for ``date``. Patient name and
number are copied in when the appointment is booked and are not refreshed if
the patient record changes later, so the appointment keeps the historical
record of who was booked.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, field_validator

from utils.datetime_utils import validate_date_string, validate_time_string


class AppointmentStatus(str, Enum):
    """Lifecycle states of an appointment."""
    SCHEDULED = "Scheduled"
    COMPLETED = "Completed"
    CANCELLED = "Cancelled"


class Appointment(BaseModel):
    """Appointment entity linking a patient to one doctor slot."""

    id: str
    """Unique identifier of the appointment."""

    patient_id: str
    """Reference to the booked patient."""

    patient_number: str
    """Snapshot of the patient number at booking time."""

    patient_name: str
    """Snapshot of "name surname" at booking time."""

    date: str
    """Calendar day of the appointment (YYYY-MM-DD)."""

    time: str
    """Start time of the occupied slot (HH:MM)."""

    doctor_id: str
    """Doctor whose slot is occupied."""

    status: AppointmentStatus = AppointmentStatus.SCHEDULED
    """Only Scheduled appointments mark their slot as booked."""

    is_new_patient: bool = False
    """Whether the patient was newly registered when booked."""

    notes: Optional[str] = None
    """Optional free-text notes."""

    @field_validator('date')
    @classmethod
    def validate_date_format(cls, v: str) -> str:
        return validate_date_string(v)

    @field_validator('time')
    @classmethod
    def validate_time_format(cls, v: str) -> str:
        return validate_time_string(v)

    @property
    def is_active(self) -> bool:
        """True when the appointment currently holds its slot."""
        return self.status == AppointmentStatus.SCHEDULED

    def occupies(self, doctor_id: str, date: str) -> bool:
        """Whether this appointment actively holds a slot of the doctor's day."""
        return self.is_active and self.doctor_id == doctor_id and self.date == date
