"""
Availability store for per-doctor, per-date slot lists.

This module caches one DoctorAvailability per (doctor, date) inside the clinic
state. Entries are materialized lazily on first read and live until the state
is reset.
"""

import logging
from typing import Optional

from core.clinic_state import ClinicState
from services.slot_generator import SlotGenerator
from shared_types.availability import DoctorAvailability
from utils.id_utils import availability_id

logger = logging.getLogger(__name__)


class AvailabilityStore:
    """
    Service class for availability cache operations.

    Reads return the cached record itself; callers treat it as a snapshot and
    write changes back through ``update``.
    """

    def __init__(self, state: ClinicState):
        self.state = state

    def get(self, doctor_id: str, date: str) -> Optional[DoctorAvailability]:
        """
        Get-or-create the availability of a doctor for a date.

        Creating and caching a missing entry is part of this method's
        contract: after the first call, repeated calls without an intervening
        mutation return the same object.

        Args:
            doctor_id: Doctor ID
            date: Date string in YYYY-MM-DD format

        Returns:
            DoctorAvailability, or None if the doctor is unknown
        """
        key = availability_id(doctor_id, date)
        cached = self.state.availability.get(key)
        if cached is not None:
            return cached

        doctor = self.state.get_doctor(doctor_id)
        if not doctor:
            logger.warning(f"Availability requested for unknown doctor {doctor_id}")
            return None

        slots = SlotGenerator.generate(doctor, date, self.state.appointments)
        availability = DoctorAvailability(id=key, doctor_id=doctor_id, date=date, time_slots=slots)
        self.state.availability[key] = availability
        logger.info(f"Created availability {key} with {len(slots)} slots")
        return availability

    def get_if_exists(self, doctor_id: str, date: str) -> Optional[DoctorAvailability]:
        """Cached availability for (doctor, date) without creating one."""
        return self.state.availability.get(availability_id(doctor_id, date))

    def regenerate(self, doctor_id: str, date: str) -> Optional[DoctorAvailability]:
        """
        Rebuild the slots of a (doctor, date) entry from scratch.

        Booked state is recomputed from the appointment list; block state is
        carried forward from the current cached slots by start time. The
        entry keeps its id.

        Returns:
            The regenerated DoctorAvailability, or None if the doctor is unknown
        """
        doctor = self.state.get_doctor(doctor_id)
        if not doctor:
            logger.warning(f"Cannot regenerate availability for unknown doctor {doctor_id}")
            return None

        key = availability_id(doctor_id, date)
        existing = self.state.availability.get(key)
        slots = SlotGenerator.generate(
            doctor,
            date,
            self.state.appointments,
            existing.time_slots if existing else None,
        )
        availability = DoctorAvailability(id=key, doctor_id=doctor_id, date=date, time_slots=slots)
        self.state.availability[key] = availability
        logger.debug(f"Regenerated availability {key}")
        return availability

    def update(self, availability: DoctorAvailability) -> None:
        """
        Replace the cached entry with the same id.

        An availability whose id is not cached is ignored, matching the
        replace-by-id semantics of the store.
        """
        if availability.id not in self.state.availability:
            logger.warning(f"Ignoring update for uncached availability {availability.id}")
            return
        self.state.availability[availability.id] = availability

    def clear(self) -> None:
        self.state.availability.clear()

    def __len__(self) -> int:
        return len(self.state.availability)
