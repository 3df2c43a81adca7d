"""
Clinic state container and lifecycle.

All mutable front desk data lives in one ``ClinicState`` object that is passed
to the services that need it, the same way a database session would be. The
state is created with ``ClinicState.seeded()`` (or empty for tests) and can be
returned to its seeded contents with ``reset()``.

The lists are mutated in place and never rebound, so services holding a
reference to a state always see its current contents.
"""

import logging
from typing import Dict, Iterable, List, Optional

from core import seed_data
from models import Appointment, CaseSheet, Doctor, Patient, Visit
from shared_types.availability import DoctorAvailability

logger = logging.getLogger(__name__)


class ClinicState:
    """In-memory store of doctors, patients, appointments and availability."""

    def __init__(
        self,
        doctors: Optional[Iterable[Doctor]] = None,
        patients: Optional[Iterable[Patient]] = None,
        appointments: Optional[Iterable[Appointment]] = None,
        visits: Optional[Iterable[Visit]] = None,
        case_sheets: Optional[Iterable[CaseSheet]] = None
    ):
        self.doctors: Dict[str, Doctor] = {doctor.id: doctor for doctor in doctors or ()}
        self.patients: List[Patient] = list(patients or ())
        self.appointments: List[Appointment] = list(appointments or ())
        self.visits: List[Visit] = list(visits or ())
        self.case_sheets: List[CaseSheet] = list(case_sheets or ())

        # Availability cache keyed by "<doctor_id>_<date>"
        self.availability: Dict[str, DoctorAvailability] = {}

        # Bumped by refresh_availability so views can detect a forced re-render
        self.availability_revision = 0

        self._seeded = False

    @classmethod
    def seeded(cls) -> "ClinicState":
        """Create a state loaded with the mock clinic data."""
        state = cls()
        state._load_seed_data()
        return state

    def _load_seed_data(self) -> None:
        self.doctors.clear()
        self.doctors.update({doctor.id: doctor for doctor in seed_data.initial_doctors()})
        self.patients[:] = seed_data.initial_patients()
        self.appointments[:] = seed_data.initial_appointments()
        self.visits[:] = seed_data.initial_visits()
        self.case_sheets[:] = seed_data.initial_case_sheets()
        self._seeded = True

    def reset(self) -> None:
        """
        Drop every change made since creation.

        A seeded state returns to the seed data; an unseeded one keeps its
        doctors (static configuration) and empties everything else. The
        availability cache is always emptied.
        """
        if self._seeded:
            self._load_seed_data()
        else:
            self.patients.clear()
            self.appointments.clear()
            self.visits.clear()
            self.case_sheets.clear()
        self.availability.clear()
        self.availability_revision = 0
        logger.info("Clinic state reset")

    def get_doctor(self, doctor_id: str) -> Optional[Doctor]:
        return self.doctors.get(doctor_id)

    def find_appointment(self, appointment_id: str) -> Optional[Appointment]:
        for appointment in self.appointments:
            if appointment.id == appointment_id:
                return appointment
        return None
