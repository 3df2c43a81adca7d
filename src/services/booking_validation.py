"""
Booking precondition checks run by views before calling the booking engine.

A booking is rejected when its date or time has already passed (the current
minute still counts as bookable) or when the target slot is missing, booked or
blocked. Failures raise BookingValidationError carrying the message shown to
the user.
"""

import logging
from datetime import datetime
from typing import Callable, Iterable, List, NoReturn, Optional

from shared_types.availability import DoctorAvailability, TimeSlot
from utils.datetime_utils import current_time_string, format_date, local_now, time_to_minutes

logger = logging.getLogger(__name__)


class BookingValidationError(ValueError):
    """Raised when a booking request violates a precondition."""


class BookingValidator:
    """
    Validation helpers for booking requests.

    The clock is injectable so that "now" is fixed in tests.
    """

    def __init__(self, clock: Optional[Callable[[], datetime]] = None):
        self.clock = clock or local_now

    def _today(self) -> str:
        return format_date(self.clock().date())

    @staticmethod
    def _reject(message: str) -> NoReturn:
        logger.info(f"Booking rejected: {message}")
        raise BookingValidationError(message)

    def is_date_in_past(self, date: str) -> bool:
        """Whether ``date`` is before today."""
        return date < self._today()

    def is_time_in_past(self, date: str, time: str) -> bool:
        """
        Whether the slot start ``time`` on ``date`` has already passed.

        Future dates are never past and earlier dates always are. On today, a
        time equal to the current minute is still bookable.
        """
        today = self._today()
        if date > today:
            return False
        if date < today:
            return True
        return time_to_minutes(time) < time_to_minutes(current_time_string(self.clock()))

    def validate(self, availability: Optional[DoctorAvailability], date: str, time: str) -> TimeSlot:
        """
        Check that a booking at (date, time) may proceed.

        Args:
            availability: Availability of the target doctor for ``date``
            date: Date string in YYYY-MM-DD format
            time: Slot start time (HH:MM)

        Returns:
            The target slot

        Raises:
            BookingValidationError: If the request violates a precondition
        """
        if self.is_date_in_past(date):
            self._reject("Cannot book appointments for past dates.")
        if self.is_time_in_past(date, time):
            self._reject("Cannot book appointments for times that have already passed.")
        if availability is None:
            self._reject("Doctor not found.")

        slot = availability.find_slot(time)
        if slot is None:
            self._reject(f"No time slot starts at {time}.")
        if slot.is_booked:
            self._reject(f"The {time} slot is already booked.")
        if slot.is_blocked:
            self._reject(f"The {time} slot is blocked by the doctor.")
        return slot

    def bookable_slots(self, slots: Iterable[TimeSlot], date: str) -> List[TimeSlot]:
        """Drop slots whose start time has already passed on ``date``."""
        return [slot for slot in slots if not self.is_time_in_past(date, slot.start_time)]
