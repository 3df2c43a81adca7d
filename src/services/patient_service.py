"""
Patient service for registration, lookup and medical history records.

Appointments keep their own snapshot of the patient's name and number, so
nothing here touches the appointment list.
"""

import logging
from datetime import datetime
from typing import Callable, List, Optional

from core.clinic_state import ClinicState
from models import CaseSheet, Patient, Visit
from utils.datetime_utils import format_date, local_now
from utils.id_utils import new_record_id
from utils.patient_validators import generate_patient_number

logger = logging.getLogger(__name__)


class PatientService:
    """Service class for patient operations."""

    def __init__(self, state: ClinicState, clock: Optional[Callable[[], datetime]] = None):
        self.state = state
        self.clock = clock or local_now

    def add_patient(self, patient: Patient) -> Patient:
        """Store an already-built patient record."""
        self.state.patients.append(patient)
        logger.info(f"Added patient {patient.patient_number}")
        return patient

    def register_patient(
        self,
        surname: str,
        name: str,
        gender: str,
        age: int,
        address: str = "",
        phone_number: str = ""
    ) -> Patient:
        """
        Register a new patient at the front desk.

        Assigns the next sequential patient number, today's registration date
        and marks the patient as new.

        Returns:
            The created patient

        Raises:
            pydantic.ValidationError: If a field is invalid (e.g. unknown gender)
        """
        patient = Patient(
            id=new_record_id(),
            patient_number=generate_patient_number(len(self.state.patients)),
            surname=surname,
            name=name,
            gender=gender,
            age=age,
            address=address,
            phone_number=phone_number,
            registration_date=format_date(self.clock().date()),
            is_new=True,
        )
        return self.add_patient(patient)

    def update_patient(self, updated: Patient) -> Optional[Patient]:
        """
        Replace the patient with the same id.

        Returns:
            The stored patient, or None if no patient has that id
        """
        for index, patient in enumerate(self.state.patients):
            if patient.id == updated.id:
                self.state.patients[index] = updated
                logger.info(f"Updated patient {updated.patient_number}")
                return updated
        logger.warning(f"Patient {updated.id} not found for update")
        return None

    def get_patient(self, patient_id: str) -> Optional[Patient]:
        for patient in self.state.patients:
            if patient.id == patient_id:
                return patient
        return None

    def list_patients(self) -> List[Patient]:
        return list(self.state.patients)

    def search_patients(self, query: str) -> List[Patient]:
        """
        Search patients by number, name, surname, full name or phone.

        Matching is a case-insensitive substring test, except for the phone
        number which is matched as typed. A blank query returns no patients.
        """
        needle = query.strip().lower()
        if not needle:
            return []

        results = []
        for patient in self.state.patients:
            if (
                needle in patient.patient_number.lower()
                or needle in patient.name.lower()
                or needle in patient.surname.lower()
                or needle in patient.full_name.lower()
                or needle in patient.phone_number
            ):
                results.append(patient)
        return results

    def add_visit(self, visit: Visit) -> Visit:
        self.state.visits.append(visit)
        logger.info(f"Recorded visit {visit.id} for patient {visit.patient_id}")
        return visit

    def list_visits(self, patient_id: str) -> List[Visit]:
        return [visit for visit in self.state.visits if visit.patient_id == patient_id]

    def add_case_sheet(self, case_sheet: CaseSheet) -> CaseSheet:
        self.state.case_sheets.append(case_sheet)
        logger.info(f"Filed case sheet {case_sheet.file_name} for patient {case_sheet.patient_id}")
        return case_sheet

    def list_case_sheets(self, patient_id: str) -> List[CaseSheet]:
        return [sheet for sheet in self.state.case_sheets if sheet.patient_id == patient_id]
