"""
Blocking service for doctor-imposed unavailability.

Blocks are independent of bookings: blocking a slot never cancels or unbooks
the appointment already in it.
"""

import logging
from typing import Optional

from services.availability_events import AvailabilityChangeBus
from services.availability_store import AvailabilityStore
from shared_types.availability import DoctorAvailability, TimeSlot
from utils.datetime_utils import time_to_minutes

logger = logging.getLogger(__name__)


class BlockingService:
    """Service class for blocking and unblocking slots."""

    def __init__(self, store: AvailabilityStore, bus: AvailabilityChangeBus):
        self.store = store
        self.bus = bus

    @staticmethod
    def _slot_overlaps_range(slot: TimeSlot, range_start: int, range_end: int) -> bool:
        """
        Check whether a slot should be blocked by [range_start, range_end).

        A slot matches when it starts inside the range, ends inside the range,
        or contains the whole range. The containment test is inclusive, so a
        zero-length range at a slot boundary blocks both neighbouring slots.
        """
        slot_start = time_to_minutes(slot.start_time)
        slot_end = time_to_minutes(slot.end_time)
        return (
            (range_start <= slot_start < range_end)
            or (range_start < slot_end <= range_end)
            or (slot_start <= range_start and slot_end >= range_end)
        )

    def block_range(
        self,
        doctor_id: str,
        date: str,
        start_time: str,
        end_time: str,
        reason: Optional[str] = None
    ) -> Optional[DoctorAvailability]:
        """
        Block every slot of the day overlapping [start_time, end_time).

        Every matched slot gets ``reason`` as its block reason, replacing any
        earlier one. Booked state is left untouched.

        Args:
            doctor_id: Doctor ID
            date: Date string in YYYY-MM-DD format
            start_time: Range start (HH:MM)
            end_time: Range end (HH:MM)
            reason: Optional reason shown to staff

        Returns:
            Updated DoctorAvailability, or None if the doctor is unknown
        """
        availability = self.store.get(doctor_id, date)
        if not availability:
            return None

        range_start = time_to_minutes(start_time)
        range_end = time_to_minutes(end_time)

        blocked_count = 0
        slots = []
        for slot in availability.time_slots:
            if self._slot_overlaps_range(slot, range_start, range_end):
                slot = slot.blocked(reason)
                blocked_count += 1
            slots.append(slot)

        updated = availability.with_slots(slots)
        self.store.update(updated)
        logger.info(
            f"Blocked {blocked_count} slots for doctor {doctor_id} on {date} "
            f"({start_time}-{end_time})"
        )

        self.bus.publish(doctor_id, date)
        return updated

    def unblock_slot(self, doctor_id: str, date: str, slot_id: str) -> Optional[DoctorAvailability]:
        """
        Clear the block on exactly one slot.

        Returns:
            Updated DoctorAvailability, or None if the doctor is unknown
        """
        availability = self.store.get(doctor_id, date)
        if not availability:
            return None

        if availability.find_slot_by_id(slot_id) is None:
            logger.warning(f"Slot {slot_id} not found for doctor {doctor_id} on {date}")

        updated = availability.with_slots(
            slot.unblocked() if slot.id == slot_id else slot
            for slot in availability.time_slots
        )
        self.store.update(updated)
        logger.info(f"Unblocked slot {slot_id} for doctor {doctor_id}")

        self.bus.publish(doctor_id, date)
        return updated
