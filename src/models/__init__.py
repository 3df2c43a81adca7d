# Package initialization
from .doctor import Doctor, WorkingHours
from .appointment import Appointment, AppointmentStatus
from .patient import Patient
from .medical_record import Visit, CaseSheet
from .user import UserRole

__all__ = [
    "Doctor",
    "WorkingHours",
    "Appointment",
    "AppointmentStatus",
    "Patient",
    "Visit",
    "CaseSheet",
    "UserRole",
]
