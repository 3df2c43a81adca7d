"""
Read-only schedule queries used by the dashboards.

Covers the day lists shown to receptionists and doctors, the calendar
highlighting of days with appointments and the quick date picker.
"""

from dataclasses import dataclass, field
from datetime import date
from typing import List

from core.clinic_state import ClinicState
from models import Appointment
from utils.datetime_utils import add_days, format_date


@dataclass
class DayAppointments:
    """Appointments of one day split by whether the patient is new."""
    date_str: str  # YYYY-MM-DD format
    new_patients: List[Appointment] = field(default_factory=list)
    existing_patients: List[Appointment] = field(default_factory=list)

    @property
    def all(self) -> List[Appointment]:
        return sorted(self.new_patients + self.existing_patients, key=lambda a: a.time)


@dataclass
class QuickDate:
    """One entry of the quick date picker."""
    date_str: str  # YYYY-MM-DD format
    label: str  # "Today", "Tomorrow" or e.g. "Mon, Jan 12"


class ScheduleQueryService:
    """Service class for schedule listings."""

    def __init__(self, state: ClinicState):
        self.state = state

    def appointments_for_day(self, doctor_id: str, date_str: str) -> List[Appointment]:
        """All appointments of a doctor on a date, any status, ordered by time."""
        return sorted(
            (a for a in self.state.appointments if a.doctor_id == doctor_id and a.date == date_str),
            key=lambda a: a.time,
        )

    def appointments_on(self, date_str: str) -> DayAppointments:
        """Appointments of every doctor on a date, split into new and existing patients."""
        day = DayAppointments(date_str=date_str)
        for appointment in sorted(self.state.appointments, key=lambda a: a.time):
            if appointment.date != date_str:
                continue
            if appointment.is_new_patient:
                day.new_patients.append(appointment)
            else:
                day.existing_patients.append(appointment)
        return day

    def todays_appointments(self, today: date) -> DayAppointments:
        return self.appointments_on(format_date(today))

    def dates_with_appointments(self, doctor_id: str) -> List[str]:
        """Distinct dates, ascending, on which the doctor has Scheduled appointments."""
        return sorted({a.date for a in self.state.appointments if a.doctor_id == doctor_id and a.is_active})

    @staticmethod
    def upcoming_dates(today: date, days: int) -> List[QuickDate]:
        """
        Build the quick date picker entries starting today.

        Example:
            >>> [d.label for d in ScheduleQueryService.upcoming_dates(date(2026, 1, 9), 3)]
            ['Today', 'Tomorrow', 'Sun, Jan 11']
        """
        entries = []
        for offset in range(days):
            day = add_days(today, offset)
            if offset == 0:
                label = "Today"
            elif offset == 1:
                label = "Tomorrow"
            else:
                label = f"{day.strftime('%a, %b')} {day.day}"
            entries.append(QuickDate(date_str=format_date(day), label=label))
        return entries
