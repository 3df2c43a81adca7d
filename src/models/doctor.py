"""
Doctor model and working-hours configuration.

Doctors are static configuration of the clinic: they are seeded when the clinic
state is created and never added or removed at runtime. Their working hours
define the shape of every day's slot list.
"""

from typing import Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from utils.datetime_utils import time_to_minutes, validate_time_string


class WorkingHours(BaseModel):
    """Schema for a doctor's daily working hours."""
    start: str = Field(description="Start of the working day (HH:MM format, 24-hour)")
    end: str = Field(description="End of the working day (HH:MM format, 24-hour), exclusive")
    slot_duration: int = Field(gt=0, le=24 * 60, description="Length of one bookable slot in minutes")

    @field_validator('start', 'end')
    @classmethod
    def validate_time_format(cls, v: str) -> str:
        """Validate that time is in HH:MM format."""
        return validate_time_string(v)

    @model_validator(mode='after')
    def validate_same_day_interval(self) -> "WorkingHours":
        """Working hours must be a non-empty interval within one day."""
        if time_to_minutes(self.start) >= time_to_minutes(self.end):
            raise ValueError(
                f"Working hours start ({self.start}) must be before end ({self.end})"
            )
        return self

    @property
    def start_minutes(self) -> int:
        return time_to_minutes(self.start)

    @property
    def end_minutes(self) -> int:
        return time_to_minutes(self.end)


class Doctor(BaseModel):
    """
    Doctor entity whose schedule is managed by the front desk.

    Represents a practitioner with fixed working hours. Availability for any
    date is derived from ``working_hours`` alone.
    """

    id: str
    """Unique identifier, e.g. "D001"."""

    name: str
    """Display name, e.g. "Dr. Anderson"."""

    specialization: Optional[str] = None
    """Optional specialization shown next to the name."""

    working_hours: WorkingHours
    """Daily working hours and slot length."""
