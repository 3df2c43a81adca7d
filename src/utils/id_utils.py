import uuid

from core.constants import ID_SEPARATOR


def new_record_id() -> str:
    """Random id for newly created appointments, visits and case sheets."""
    return uuid.uuid4().hex[:12]


def availability_id(doctor_id: str, date_str: str) -> str:
    """Cache key and id of a DoctorAvailability, e.g. "D001_2026-01-09"."""
    return f"{doctor_id}{ID_SEPARATOR}{date_str}"


def slot_id(date_str: str, start_time: str) -> str:
    """Deterministic TimeSlot id, e.g. "2026-01-09_09:00"."""
    return f"{date_str}{ID_SEPARATOR}{start_time}"
