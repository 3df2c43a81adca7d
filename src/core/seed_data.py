"""
Mock data loaded into a freshly created clinic state.

Each function returns new objects so that resetting one clinic state never
leaks changes into another.
"""

from typing import List

from models import Appointment, CaseSheet, Doctor, Patient, Visit, WorkingHours


def initial_doctors() -> List[Doctor]:
    return [
        Doctor(
            id="D001",
            name="Dr. Anderson",
            specialization="General Medicine",
            working_hours=WorkingHours(start="09:00", end="17:00", slot_duration=30),
        ),
    ]


def initial_patients() -> List[Patient]:
    return [
        Patient(
            id="1", patient_number="P001", surname="Smith", name="John",
            gender="Male", age=45, address="123 Main St, New York, NY 10001",
            phone_number="+1-555-0101", registration_date="2024-01-15",
        ),
        Patient(
            id="2", patient_number="P002", surname="Johnson", name="Emily",
            gender="Female", age=32, address="456 Oak Ave, Brooklyn, NY 11201",
            phone_number="+1-555-0102", registration_date="2024-02-20",
        ),
        Patient(
            id="3", patient_number="P003", surname="Williams", name="Michael",
            gender="Male", age=58, address="789 Pine Rd, Queens, NY 11354",
            phone_number="+1-555-0103", registration_date="2024-03-10",
        ),
    ]


def initial_appointments() -> List[Appointment]:
    return [
        Appointment(
            id="1", patient_id="1", patient_number="P001", patient_name="John Smith",
            date="2026-01-09", time="09:00", doctor_id="D001",
        ),
        Appointment(
            id="2", patient_id="2", patient_number="P002", patient_name="Emily Johnson",
            date="2026-01-09", time="10:30", doctor_id="D001",
        ),
        Appointment(
            id="3", patient_id="3", patient_number="P003", patient_name="Michael Williams",
            date="2026-01-09", time="14:00", doctor_id="D001",
        ),
    ]


def initial_visits() -> List[Visit]:
    return [
        Visit(
            id="1", patient_id="1", visit_date="2025-12-15", doctor_name="Dr. Anderson",
            diagnosis="Hypertension", prescription="Lisinopril 10mg once daily",
            notes="Blood pressure: 145/90. Follow-up in 3 months.",
        ),
        Visit(
            id="2", patient_id="2", visit_date="2025-11-20", doctor_name="Dr. Anderson",
            diagnosis="Seasonal Allergies", prescription="Cetirizine 10mg as needed",
            notes="Mild symptoms, recommend antihistamines.",
        ),
    ]


def initial_case_sheets() -> List[CaseSheet]:
    return [
        CaseSheet(
            id="1", patient_id="1", upload_date="2025-12-15",
            file_name="case-sheet-dec-2025.pdf", file_url="#", uploaded_by="Dr. Anderson",
        ),
    ]
