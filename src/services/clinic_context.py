"""
Clinic context: the single entry point used by front desk views.

Wires one ClinicState to the availability store, the change bus, the booking
and blocking engines and the supporting services, and exposes the operations
views call. Views hold one ClinicContext for the lifetime of the application
and subscribe to availability changes through it.
"""

import logging
from datetime import datetime
from typing import Callable, List, Optional

from core.clinic_state import ClinicState
from core.config import DEFAULT_DOCTOR_ID, QUICK_DATE_RANGE_DAYS
from core.session_store import KeyValueStore, get_session_store
from models import Appointment, AppointmentStatus, CaseSheet, Doctor, Patient, UserRole, Visit
from services.appointment_service import AppointmentService
from services.availability_events import AvailabilityCallback, AvailabilityChangeBus, Unsubscribe
from services.availability_store import AvailabilityStore
from services.blocking_service import BlockingService
from services.booking_validation import BookingValidationError, BookingValidator
from services.patient_service import PatientService
from services.schedule_query_service import DayAppointments, QuickDate, ScheduleQueryService
from services.session_service import SessionService
from shared_types.availability import DoctorAvailability, TimeSlot
from utils.datetime_utils import local_now
from utils.id_utils import new_record_id

logger = logging.getLogger(__name__)


class ClinicContext:
    """
    Facade over the clinic state and its services.

    Every availability-changing operation publishes on the change bus after
    the store is updated, so subscribers can re-query immediately.
    """

    def __init__(
        self,
        state: Optional[ClinicState] = None,
        session_store: Optional[KeyValueStore] = None,
        clock: Optional[Callable[[], datetime]] = None
    ):
        self.state = state if state is not None else ClinicState.seeded()
        self.clock = clock or local_now

        self.bus = AvailabilityChangeBus()
        self.availability = AvailabilityStore(self.state)
        self.appointments = AppointmentService(self.state, self.availability, self.bus)
        self.blocking = BlockingService(self.availability, self.bus)
        self.patients = PatientService(self.state, self.clock)
        self.schedule = ScheduleQueryService(self.state)
        self.validator = BookingValidator(self.clock)
        self.session = SessionService(session_store if session_store is not None else get_session_store())

    # ===== Doctors =====

    def list_doctors(self) -> List[Doctor]:
        return list(self.state.doctors.values())

    def get_doctor(self, doctor_id: str) -> Optional[Doctor]:
        return self.state.get_doctor(doctor_id)

    # ===== Availability =====

    def get_doctor_availability(self, doctor_id: str, date: str) -> Optional[DoctorAvailability]:
        """Get-or-create availability; None for an unknown doctor."""
        return self.availability.get(doctor_id, date)

    def generate_time_slots(self, doctor_id: str, date: str) -> Optional[DoctorAvailability]:
        """Regenerate a day's slots, keeping blocks, e.g. when a view opens that day."""
        return self.availability.regenerate(doctor_id, date)

    def update_doctor_availability(self, availability: DoctorAvailability) -> None:
        self.availability.update(availability)

    def get_available_time_slots(self, doctor_id: str, date: str) -> List[TimeSlot]:
        """Slots neither booked nor blocked; empty for an unknown doctor."""
        availability = self.availability.get(doctor_id, date)
        if not availability:
            return []
        return list(availability.available_slots())

    def get_bookable_time_slots(self, doctor_id: str, date: str) -> List[TimeSlot]:
        """Available slots whose start time has not passed yet."""
        return self.validator.bookable_slots(self.get_available_time_slots(doctor_id, date), date)

    def block_time_slot(
        self,
        doctor_id: str,
        date: str,
        start_time: str,
        end_time: str,
        reason: Optional[str] = None
    ) -> Optional[DoctorAvailability]:
        return self.blocking.block_range(doctor_id, date, start_time, end_time, reason)

    def unblock_time_slot(self, doctor_id: str, date: str, slot_id: str) -> Optional[DoctorAvailability]:
        return self.blocking.unblock_slot(doctor_id, date, slot_id)

    def refresh_availability(self) -> int:
        """
        Force dependent views to re-render.

        Touches no availability data; only bumps the revision counter views
        compare against.

        Returns:
            The new revision number
        """
        self.state.availability_revision += 1
        return self.state.availability_revision

    def subscribe_to_availability_updates(self, callback: AvailabilityCallback) -> Unsubscribe:
        return self.bus.subscribe(callback)

    def broadcast_availability_update(self, doctor_id: str, date: str) -> None:
        self.bus.publish(doctor_id, date)

    # ===== Appointments =====

    def add_appointment(self, appointment: Appointment) -> Appointment:
        """Book without validation; callers check BookingValidator first."""
        return self.appointments.book(appointment)

    def update_appointment(self, appointment: Appointment) -> Optional[Appointment]:
        return self.appointments.update_appointment(appointment)

    def delete_appointment(self, appointment_id: str) -> Optional[Appointment]:
        return self.appointments.delete_appointment(appointment_id)

    def set_appointment_status(self, appointment_id: str, status: AppointmentStatus) -> Optional[Appointment]:
        return self.appointments.update_status(appointment_id, status)

    def create_appointment(
        self,
        patient_id: str,
        date: str,
        time: str,
        doctor_id: str = DEFAULT_DOCTOR_ID,
        notes: Optional[str] = None
    ) -> Appointment:
        """
        Validate and book an appointment for a registered patient.

        The patient's current name and number are snapshotted onto the
        appointment.

        Raises:
            BookingValidationError: If the patient is unknown or the slot
                cannot be booked
        """
        patient = self.patients.get_patient(patient_id)
        if not patient:
            raise BookingValidationError("Patient not found.")

        availability = self.availability.get(doctor_id, date)
        self.validator.validate(availability, date, time)

        appointment = Appointment(
            id=new_record_id(),
            patient_id=patient.id,
            patient_number=patient.patient_number,
            patient_name=patient.full_name,
            date=date,
            time=time,
            doctor_id=doctor_id,
            status=AppointmentStatus.SCHEDULED,
            is_new_patient=bool(patient.is_new),
            notes=notes,
        )
        return self.appointments.book(appointment)

    def appointments_for_day(self, doctor_id: str, date: str) -> List[Appointment]:
        return self.schedule.appointments_for_day(doctor_id, date)

    def todays_appointments(self) -> DayAppointments:
        return self.schedule.todays_appointments(self.clock().date())

    def dates_with_appointments(self, doctor_id: str) -> List[str]:
        return self.schedule.dates_with_appointments(doctor_id)

    def upcoming_dates(self, days: int = QUICK_DATE_RANGE_DAYS) -> List[QuickDate]:
        return self.schedule.upcoming_dates(self.clock().date(), days)

    # ===== Patients =====

    def add_patient(self, patient: Patient) -> Patient:
        return self.patients.add_patient(patient)

    def update_patient(self, patient: Patient) -> Optional[Patient]:
        return self.patients.update_patient(patient)

    def search_patients(self, query: str) -> List[Patient]:
        return self.patients.search_patients(query)

    def add_visit(self, visit: Visit) -> Visit:
        return self.patients.add_visit(visit)

    def add_case_sheet(self, case_sheet: CaseSheet) -> CaseSheet:
        return self.patients.add_case_sheet(case_sheet)

    # ===== Session =====

    @property
    def current_role(self) -> UserRole:
        return self.session.current_role

    def set_current_role(self, role: UserRole) -> None:
        self.session.select_role(role)

    def login(self, username: str, password: str) -> Optional[UserRole]:
        return self.session.login_with_credentials(username, password)

    def logout(self, reset_state: bool = False) -> None:
        """
        Clear the persisted session flags.

        Args:
            reset_state: Also return the clinic data to its initial contents
        """
        self.session.logout()
        if reset_state:
            self.reset()

    def reset(self) -> None:
        """Return the clinic state to its initial contents; subscribers stay registered."""
        self.state.reset()
        logger.info("Clinic context reset")
