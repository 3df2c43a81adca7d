"""
Appointment service for booking, rescheduling and cancelling appointments.

Every change to the appointment list is mirrored into the availability store
so that a slot is booked exactly while a Scheduled appointment holds it, and
each affected (doctor, date) is announced on the change bus after the store
update.

Booking preconditions (slot free, not in the past) are checked by the caller
through BookingValidator; this service does not re-check them, so two
appointments can end up in one slot if a caller skips validation.
"""

import logging
from typing import List, Optional

from core.clinic_state import ClinicState
from models import Appointment, AppointmentStatus
from services.availability_events import AvailabilityChangeBus
from services.availability_store import AvailabilityStore
from shared_types.availability import DoctorAvailability, TimeSlot

logger = logging.getLogger(__name__)


class AppointmentService:
    """
    Service class for appointment operations.

    Contains the booking engine: the only code that adds, replaces or removes
    appointments in the clinic state.
    """

    def __init__(self, state: ClinicState, store: AvailabilityStore, bus: AvailabilityChangeBus):
        self.state = state
        self.store = store
        self.bus = bus

    @staticmethod
    def _release_slot(slots: List[TimeSlot], appointment: Appointment) -> List[TimeSlot]:
        # A slot re-booked after this appointment went inactive belongs to the new booking
        return [
            slot.released()
            if slot.start_time == appointment.time and slot.appointment_id == appointment.id
            else slot
            for slot in slots
        ]

    @staticmethod
    def _book_slot(slots: List[TimeSlot], appointment: Appointment) -> List[TimeSlot]:
        if not any(slot.start_time == appointment.time for slot in slots):
            logger.warning(
                f"Appointment {appointment.id} at {appointment.time} does not match any slot "
                f"of doctor {appointment.doctor_id} on {appointment.date}"
            )
        return [
            slot.booked_by(appointment.id) if slot.start_time == appointment.time else slot
            for slot in slots
        ]

    def _index_of(self, appointment_id: str) -> Optional[int]:
        for index, appointment in enumerate(self.state.appointments):
            if appointment.id == appointment_id:
                return index
        return None

    def get_appointment(self, appointment_id: str) -> Optional[Appointment]:
        return self.state.find_appointment(appointment_id)

    def list_appointments(self) -> List[Appointment]:
        return list(self.state.appointments)

    def book(self, appointment: Appointment) -> Appointment:
        """
        Add an appointment and mark its slot as booked.

        Args:
            appointment: Appointment to add; ``time`` should be a slot start

        Returns:
            The stored appointment
        """
        self.state.appointments.append(appointment)
        logger.info(
            f"Booked appointment {appointment.id} for patient {appointment.patient_number} "
            f"with doctor {appointment.doctor_id} on {appointment.date} at {appointment.time}"
        )

        availability = self.store.get(appointment.doctor_id, appointment.date)
        if availability:
            slots = list(availability.time_slots)
            if appointment.is_active:
                slots = self._book_slot(slots, appointment)
            self.store.update(availability.with_slots(slots))
            self.bus.publish(appointment.doctor_id, appointment.date)

        return appointment

    def reschedule(self, old: Appointment, new: Appointment) -> Appointment:
        """
        Replace an appointment and move its booking to the new slot.

        The old slot is released first (only when an availability entry
        already exists for the old date), then the new slot is booked if the
        new appointment is Scheduled. When both slots belong to the same
        (doctor, date) the two edits are applied to one fetched availability
        and written back once.

        Args:
            old: Appointment as currently stored
            new: Replacement with the same id

        Returns:
            The stored replacement
        """
        index = self._index_of(old.id)
        if index is None:
            logger.warning(f"Rescheduling appointment {old.id} that is not in the appointment list")
        else:
            self.state.appointments[index] = new

        same_day = old.doctor_id == new.doctor_id and old.date == new.date

        if same_day:
            availability = self.store.get(new.doctor_id, new.date)
            if availability:
                slots = self._release_slot(list(availability.time_slots), old)
                if new.is_active:
                    slots = self._book_slot(slots, new)
                self.store.update(availability.with_slots(slots))
                self.bus.publish(new.doctor_id, new.date)
        else:
            old_availability = self.store.get_if_exists(old.doctor_id, old.date)
            if old_availability:
                slots = self._release_slot(list(old_availability.time_slots), old)
                self.store.update(old_availability.with_slots(slots))
                self.bus.publish(old.doctor_id, old.date)

            new_availability = self.store.get(new.doctor_id, new.date)
            if new_availability:
                slots = list(new_availability.time_slots)
                if new.is_active:
                    slots = self._book_slot(slots, new)
                self.store.update(new_availability.with_slots(slots))
                self.bus.publish(new.doctor_id, new.date)

        logger.info(
            f"Rescheduled appointment {new.id} from {old.date} {old.time} "
            f"to {new.date} {new.time} ({new.status.value})"
        )
        return new

    def update_appointment(self, updated: Appointment) -> Optional[Appointment]:
        """
        Replace the stored appointment with the same id.

        Returns:
            The stored replacement, or None if no appointment has that id
        """
        existing = self.get_appointment(updated.id)
        if not existing:
            logger.warning(f"Appointment {updated.id} not found for update")
            return None
        return self.reschedule(existing, updated)

    def update_status(self, appointment_id: str, status: AppointmentStatus) -> Optional[Appointment]:
        """
        Change an appointment's status, releasing its slot unless Scheduled.

        Returns:
            Updated appointment, or None if not found
        """
        existing = self.get_appointment(appointment_id)
        if not existing:
            logger.warning(f"Appointment {appointment_id} not found for status change")
            return None
        return self.reschedule(existing, existing.model_copy(update={"status": status}))

    def cancel(self, appointment: Appointment) -> None:
        """
        Remove an appointment and release its slot.

        Args:
            appointment: Appointment to remove (matched by id)
        """
        index = self._index_of(appointment.id)
        if index is not None:
            del self.state.appointments[index]
        else:
            logger.warning(f"Cancelling appointment {appointment.id} that is not in the appointment list")

        availability: Optional[DoctorAvailability] = self.store.get(appointment.doctor_id, appointment.date)
        if availability:
            slots = self._release_slot(list(availability.time_slots), appointment)
            self.store.update(availability.with_slots(slots))
            self.bus.publish(appointment.doctor_id, appointment.date)

        logger.info(f"Cancelled appointment {appointment.id} on {appointment.date} at {appointment.time}")

    def delete_appointment(self, appointment_id: str) -> Optional[Appointment]:
        """
        Cancel the appointment with the given id.

        Returns:
            The removed appointment, or None if no appointment has that id
        """
        existing = self.get_appointment(appointment_id)
        if not existing:
            logger.warning(f"Appointment {appointment_id} not found for deletion")
            return None
        self.cancel(existing)
        return existing
