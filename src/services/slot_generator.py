"""
Slot generation for a doctor's working day.

Derives the canonical ordered list of slots for a (doctor, date) pair from the
doctor's working hours, then overlays booked state from the appointment list
and blocked state carried forward from a previous generation of the same day.
"""

import logging
from typing import Dict, Iterable, Optional, Sequence, Tuple

from models import Appointment, Doctor
from shared_types.availability import TimeSlot
from utils.datetime_utils import minutes_to_time
from utils.id_utils import slot_id

logger = logging.getLogger(__name__)


class SlotGenerator:
    """
    Service class for slot generation.

    Generation is a pure function of the doctor's working hours, the date, the
    appointment list and the previous slots of that date, so repeated calls
    with the same inputs return equal slots.
    """

    @staticmethod
    def generate(
        doctor: Doctor,
        date: str,
        appointments: Iterable[Appointment],
        existing_slots: Optional[Sequence[TimeSlot]] = None
    ) -> Tuple[TimeSlot, ...]:
        """
        Generate the slots of ``doctor`` for ``date``.

        Args:
            doctor: Doctor whose working hours define the slot grid
            date: Date string in YYYY-MM-DD format
            appointments: All appointments; only Scheduled ones at this
                doctor and date mark a slot as booked
            existing_slots: Slots from a previous generation of the same date,
                used to carry forward block state by start time

        Returns:
            Slots ordered by start time

        Algorithm:
            1. Walk from start to end in slot_duration steps
            2. Emit [cursor, cursor + duration) only while it fits before end
               (a trailing partial slot is dropped)
            3. Mark booked from the first active appointment at that start
            4. Copy is_blocked/block_reason from the previous slot with the
               same start time
        """
        hours = doctor.working_hours
        duration = hours.slot_duration
        end = hours.end_minutes

        bookings = SlotGenerator._index_active_appointments(appointments, doctor.id, date)
        previous = {slot.start_time: slot for slot in existing_slots or ()}

        slots = []
        cursor = hours.start_minutes
        while cursor + duration <= end:
            start_time = minutes_to_time(cursor)
            end_time = minutes_to_time(cursor + duration)

            appointment_id = bookings.get(start_time)
            prior = previous.get(start_time)

            slots.append(TimeSlot(
                id=slot_id(date, start_time),
                start_time=start_time,
                end_time=end_time,
                is_booked=appointment_id is not None,
                appointment_id=appointment_id,
                is_blocked=prior.is_blocked if prior else False,
                block_reason=prior.block_reason if prior else None,
            ))
            cursor += duration

        logger.debug(f"Generated {len(slots)} slots for doctor {doctor.id} on {date}")
        return tuple(slots)

    @staticmethod
    def _index_active_appointments(
        appointments: Iterable[Appointment],
        doctor_id: str,
        date: str
    ) -> Dict[str, str]:
        """
        Map start time to appointment id for active appointments of one day.

        When several active appointments share a start time (double booking by
        a caller that skipped validation) the first one in list order wins.
        """
        index: Dict[str, str] = {}
        for appointment in appointments:
            if appointment.occupies(doctor_id, date):
                index.setdefault(appointment.time, appointment.id)
        return index
