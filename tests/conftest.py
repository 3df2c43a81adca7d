"""
Test configuration and shared fixtures for the clinic front desk test suite.

Every test gets its own ClinicState, so there is no shared state to roll back.
"now" is pinned to FIXED_NOW through an injected clock.
"""

import pytest
from datetime import datetime
from typing import Callable

from core.clinic_state import ClinicState
from core.session_store import InMemoryKeyValueStore
from models import Appointment, AppointmentStatus, Doctor, Patient, WorkingHours
from services.appointment_service import AppointmentService
from services.availability_events import AvailabilityChangeBus
from services.availability_store import AvailabilityStore
from services.blocking_service import BlockingService
from services.clinic_context import ClinicContext


# The day before the seeded appointment date, mid-morning
FIXED_NOW = datetime(2026, 1, 8, 10, 15)
SCENARIO_DATE = "2026-01-09"


@pytest.fixture
def clock() -> Callable[[], datetime]:
    """Clock pinned to FIXED_NOW."""
    return lambda: FIXED_NOW


@pytest.fixture
def doctor() -> Doctor:
    """Doctor working 09:00-17:00 in 30 minute slots."""
    return Doctor(
        id="D001",
        name="Dr. Anderson",
        specialization="General Medicine",
        working_hours=WorkingHours(start="09:00", end="17:00", slot_duration=30),
    )


@pytest.fixture
def patient() -> Patient:
    return Patient(
        id="1", patient_number="P001", surname="Smith", name="John",
        gender="Male", age=45, registration_date="2024-01-15",
    )


@pytest.fixture
def state(doctor, patient) -> ClinicState:
    """Unseeded state with one doctor, one patient and no appointments."""
    return ClinicState(doctors=[doctor], patients=[patient])


@pytest.fixture
def bus() -> AvailabilityChangeBus:
    return AvailabilityChangeBus()


@pytest.fixture
def store(state) -> AvailabilityStore:
    return AvailabilityStore(state)


@pytest.fixture
def appointment_service(state, store, bus) -> AppointmentService:
    return AppointmentService(state, store, bus)


@pytest.fixture
def blocking_service(store, bus) -> BlockingService:
    return BlockingService(store, bus)


@pytest.fixture
def context(state, clock) -> ClinicContext:
    return ClinicContext(state=state, session_store=InMemoryKeyValueStore(), clock=clock)


@pytest.fixture
def make_appointment() -> Callable[..., Appointment]:
    """Factory for appointments with sensible defaults."""
    def _make(
        appointment_id: str = "A1",
        time: str = "09:00",
        date: str = SCENARIO_DATE,
        doctor_id: str = "D001",
        status: AppointmentStatus = AppointmentStatus.SCHEDULED,
        **kwargs
    ) -> Appointment:
        return Appointment(
            id=appointment_id,
            patient_id=kwargs.pop("patient_id", "1"),
            patient_number=kwargs.pop("patient_number", "P001"),
            patient_name=kwargs.pop("patient_name", "John Smith"),
            date=date,
            time=time,
            doctor_id=doctor_id,
            status=status,
            **kwargs
        )
    return _make


class RecordingSubscriber:
    """Change bus subscriber remembering every (doctor_id, date) it receives."""

    def __init__(self):
        self.calls = []

    def __call__(self, doctor_id: str, date: str) -> None:
        self.calls.append((doctor_id, date))


@pytest.fixture
def recorder() -> RecordingSubscriber:
    return RecordingSubscriber()
