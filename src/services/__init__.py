"""
Services package for the front desk business logic.

This package contains the scheduling core (slot generation, availability
store, booking and blocking engines, change bus) and the services built on it.
"""

from .slot_generator import SlotGenerator
from .availability_store import AvailabilityStore
from .availability_events import AvailabilityChangeBus
from .appointment_service import AppointmentService
from .blocking_service import BlockingService
from .booking_validation import BookingValidator, BookingValidationError
from .patient_service import PatientService
from .schedule_query_service import ScheduleQueryService
from .session_service import SessionService
from .clinic_context import ClinicContext

__all__ = [
    "SlotGenerator",
    "AvailabilityStore",
    "AvailabilityChangeBus",
    "AppointmentService",
    "BlockingService",
    "BookingValidator",
    "BookingValidationError",
    "PatientService",
    "ScheduleQueryService",
    "SessionService",
    "ClinicContext",
]
