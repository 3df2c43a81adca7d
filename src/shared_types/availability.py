"""
Shared types for availability-related functionality.

This module contains the slot and availability records shared by the slot
generator, the availability store and the booking and blocking engines. Both
records are frozen: engines produce replacements with ``dataclasses.replace``
instead of editing them, so a record handed to a view stays valid until the
next mutating call.
"""

from dataclasses import dataclass, replace
from typing import Dict, Iterable, Optional, Tuple, Union

SlotDictValue = Union[str, bool, None]


@dataclass(frozen=True)
class TimeSlot:
    """
    Represents one fixed-length slot of a doctor's day.

    Booked and blocked are independent flags: a slot booked before it was
    blocked keeps both.
    """
    id: str  # "<date>_<start_time>"
    start_time: str  # Format: "HH:MM"
    end_time: str  # Format: "HH:MM"
    is_booked: bool = False
    appointment_id: Optional[str] = None
    is_blocked: bool = False
    block_reason: Optional[str] = None

    @property
    def is_available(self) -> bool:
        """Free to book: neither booked nor blocked."""
        return not self.is_booked and not self.is_blocked

    def booked_by(self, appointment_id: str) -> "TimeSlot":
        return replace(self, is_booked=True, appointment_id=appointment_id)

    def released(self) -> "TimeSlot":
        return replace(self, is_booked=False, appointment_id=None)

    def blocked(self, reason: Optional[str]) -> "TimeSlot":
        return replace(self, is_blocked=True, block_reason=reason)

    def unblocked(self) -> "TimeSlot":
        return replace(self, is_blocked=False, block_reason=None)

    def to_dict(self) -> Dict[str, SlotDictValue]:
        """Convert to dictionary format."""
        result: Dict[str, SlotDictValue] = {
            "id": self.id,
            "start_time": self.start_time,
            "end_time": self.end_time,
            "is_booked": self.is_booked,
            "is_blocked": self.is_blocked,
        }
        if self.appointment_id is not None:
            result["appointment_id"] = self.appointment_id
        if self.block_reason is not None:
            result["block_reason"] = self.block_reason
        return result


@dataclass(frozen=True)
class DoctorAvailability:
    """
    All slots of one doctor on one date, ordered by start time.

    There is at most one instance per (doctor_id, date) in an availability
    store; its id is "<doctor_id>_<date>".
    """
    id: str
    doctor_id: str
    date: str  # Format: "YYYY-MM-DD"
    time_slots: Tuple[TimeSlot, ...] = ()

    def find_slot(self, start_time: str) -> Optional[TimeSlot]:
        """Slot starting at ``start_time``, or None."""
        for slot in self.time_slots:
            if slot.start_time == start_time:
                return slot
        return None

    def find_slot_by_id(self, slot_id: str) -> Optional[TimeSlot]:
        for slot in self.time_slots:
            if slot.id == slot_id:
                return slot
        return None

    def available_slots(self) -> Tuple[TimeSlot, ...]:
        return tuple(slot for slot in self.time_slots if slot.is_available)

    def with_slots(self, slots: Iterable[TimeSlot]) -> "DoctorAvailability":
        """Copy of this availability with a new slot sequence, same id."""
        return replace(self, time_slots=tuple(slots))

    def to_dict(self) -> Dict[str, object]:
        return {
            "id": self.id,
            "doctor_id": self.doctor_id,
            "date": self.date,
            "time_slots": [slot.to_dict() for slot in self.time_slots],
        }
