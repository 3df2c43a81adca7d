"""
Integration tests for the clinic context.

Exercise the store, booking and blocking engines and the change bus together
the way front desk views use them. "Now" is 2026-01-08 10:15.
"""

import pytest

from core.clinic_state import ClinicState
from core.session_store import InMemoryKeyValueStore
from models import AppointmentStatus, UserRole
from services.booking_validation import BookingValidationError
from services.clinic_context import ClinicContext

DATE = "2026-01-09"


@pytest.fixture
def seeded_context(clock):
    return ClinicContext(state=ClinicState.seeded(), session_store=InMemoryKeyValueStore(), clock=clock)


class TestFrontDeskScenario:
    """Test the booking and blocking flow of one day."""

    def test_book_and_block_day(self, context, make_appointment):
        """Test 16 slots, one booked at 09:00 and a lunch block leave 13 available."""
        assert len(context.get_doctor_availability("D001", DATE).time_slots) == 16
        assert len(context.get_available_time_slots("D001", DATE)) == 16

        context.add_appointment(make_appointment("A1", "09:00"))
        context.block_time_slot("D001", DATE, "12:00", "13:00", "Lunch")

        availability = context.get_doctor_availability("D001", DATE)
        available = context.get_available_time_slots("D001", DATE)
        assert len(available) == 13
        assert availability.find_slot("09:00").appointment_id == "A1"
        assert [s.start_time for s in availability.time_slots if s.is_blocked] == ["12:00", "12:30"]
        assert {s.start_time for s in available}.isdisjoint({"09:00", "12:00", "12:30"})

    def test_booked_plus_blocked_counts_once(self, context, make_appointment):
        """Test a slot both booked and blocked is unavailable and keeps both flags."""
        context.add_appointment(make_appointment("A1", "12:00"))
        context.block_time_slot("D001", DATE, "12:00", "12:30")

        slot = context.get_doctor_availability("D001", DATE).find_slot("12:00")
        assert slot.is_booked and slot.is_blocked
        assert len(context.get_available_time_slots("D001", DATE)) == 15

        context.unblock_time_slot("D001", DATE, slot.id)
        assert context.get_doctor_availability("D001", DATE).find_slot("12:00").is_booked is True

    def test_regenerate_after_cancel_keeps_blocks(self, context, make_appointment):
        """Test regenerating a day recomputes bookings and keeps blocks."""
        context.add_appointment(make_appointment("A1", "09:00"))
        context.block_time_slot("D001", DATE, "16:00", "17:00", "Admin")
        context.delete_appointment("A1")

        regenerated = context.generate_time_slots("D001", DATE)

        assert not any(s.is_booked for s in regenerated.time_slots)
        assert [s.start_time for s in regenerated.time_slots if s.is_blocked] == ["16:00", "16:30"]

    def test_unknown_doctor(self, context):
        """Test unknown doctors yield no availability."""
        assert context.get_doctor_availability("D999", DATE) is None
        assert context.get_available_time_slots("D999", DATE) == []


class TestLiveRefresh:
    """Test that open views learn about changes through the bus."""

    def test_two_views_stay_in_sync(self, context, make_appointment):
        """Test that a booking in one view refreshes another view's slot list."""
        view = {"available": len(context.get_available_time_slots("D001", DATE))}

        def refresh(doctor_id, date):
            if (doctor_id, date) == ("D001", DATE):
                view["available"] = len(context.get_available_time_slots(doctor_id, date))

        unsubscribe = context.subscribe_to_availability_updates(refresh)

        context.add_appointment(make_appointment("A1", "09:00"))
        assert view["available"] == 15

        context.block_time_slot("D001", DATE, "12:00", "13:00")
        assert view["available"] == 13

        context.set_appointment_status("A1", AppointmentStatus.COMPLETED)
        assert view["available"] == 14

        unsubscribe()
        context.delete_appointment("A1")
        assert view["available"] == 14

    def test_manual_broadcast(self, context, recorder):
        """Test that views can broadcast a change themselves."""
        context.subscribe_to_availability_updates(recorder)

        context.broadcast_availability_update("D001", DATE)

        assert recorder.calls == [("D001", DATE)]

    def test_refresh_bumps_revision_only(self, context):
        """Test refresh_availability touches no availability data."""
        before = context.get_doctor_availability("D001", DATE)

        assert context.refresh_availability() == 1
        assert context.refresh_availability() == 2
        assert context.get_doctor_availability("D001", DATE) is before

    def test_direct_update_does_not_publish(self, context, recorder):
        """Test update_doctor_availability only writes the store."""
        availability = context.get_doctor_availability("D001", DATE)
        context.subscribe_to_availability_updates(recorder)

        context.update_doctor_availability(availability.with_slots(availability.time_slots[:1]))

        assert len(context.get_doctor_availability("D001", DATE).time_slots) == 1
        assert recorder.calls == []


class TestCreateAppointment:
    """Test validated booking from the booking view."""

    def test_create_snapshots_patient(self, context, state):
        """Test that a valid request books and copies patient name and number."""
        appointment = context.create_appointment("1", DATE, "10:00", notes="Follow-up")

        assert appointment.patient_name == "John Smith"
        assert appointment.patient_number == "P001"
        assert appointment.status == AppointmentStatus.SCHEDULED
        assert appointment.is_new_patient is False
        assert state.find_appointment(appointment.id) is appointment
        assert context.get_doctor_availability("D001", DATE).find_slot("10:00").appointment_id == appointment.id

    def test_create_for_new_patient(self, context):
        """Test that newly registered patients are flagged on the appointment."""
        patient = context.patients.register_patient(surname="Brown", name="Sarah", gender="Female", age=29)

        appointment = context.create_appointment(patient.id, DATE, "11:00")

        assert appointment.is_new_patient is True
        assert [a.id for a in context.schedule.appointments_on(DATE).new_patients] == [appointment.id]

    def test_double_booking_rejected(self, context):
        """Test that the second booking of a slot fails and changes nothing."""
        context.create_appointment("1", DATE, "10:00")

        with pytest.raises(BookingValidationError, match="already booked"):
            context.create_appointment("1", DATE, "10:00")
        assert len(context.appointments_for_day("D001", DATE)) == 1

    def test_blocked_slot_rejected(self, context):
        """Test that blocked slots cannot be booked."""
        context.block_time_slot("D001", DATE, "12:00", "13:00")

        with pytest.raises(BookingValidationError, match="blocked"):
            context.create_appointment("1", DATE, "12:30")

    def test_past_time_today_rejected(self, context):
        """Test that earlier slots of today cannot be booked but later ones can."""
        with pytest.raises(BookingValidationError, match="already passed"):
            context.create_appointment("1", "2026-01-08", "10:00")

        assert context.create_appointment("1", "2026-01-08", "10:30").time == "10:30"
        assert context.get_bookable_time_slots("D001", "2026-01-08")[0].start_time == "11:00"

    def test_unknown_patient_rejected(self, context):
        """Test that booking requires a registered patient."""
        with pytest.raises(BookingValidationError, match="Patient not found"):
            context.create_appointment("999", DATE, "10:00")

    def test_unknown_doctor_rejected(self, context):
        """Test that booking requires a known doctor."""
        with pytest.raises(BookingValidationError, match="Doctor not found"):
            context.create_appointment("1", DATE, "10:00", doctor_id="D999")

    def test_reschedule_through_update(self, context):
        """Test moving an appointment frees the old slot."""
        appointment = context.create_appointment("1", DATE, "10:00")

        context.update_appointment(appointment.model_copy(update={"time": "15:00"}))

        availability = context.get_doctor_availability("D001", DATE)
        assert availability.find_slot("10:00").is_available
        assert availability.find_slot("15:00").appointment_id == appointment.id


class TestSeededClinic:
    """Test the mock clinic data."""

    def test_seeded_day(self, seeded_context):
        """Test the seeded appointments occupy their slots."""
        availability = seeded_context.get_doctor_availability("D001", DATE)

        booked = {s.start_time: s.appointment_id for s in availability.time_slots if s.is_booked}
        assert booked == {"09:00": "1", "10:30": "2", "14:00": "3"}
        assert len(seeded_context.get_available_time_slots("D001", DATE)) == 13
        assert seeded_context.dates_with_appointments("D001") == [DATE]

    def test_search_seeded_patients(self, seeded_context):
        """Test search across the seeded patients."""
        assert [p.patient_number for p in seeded_context.search_patients("emily")] == ["P002"]

    def test_upcoming_dates_from_clock(self, seeded_context):
        """Test the quick date picker starts at the clock's day."""
        entries = seeded_context.upcoming_dates(3)

        assert [e.date_str for e in entries] == ["2026-01-08", "2026-01-09", "2026-01-10"]
        assert entries[1].label == "Tomorrow"

    def test_todays_appointments_empty(self, seeded_context):
        """Test that nothing is scheduled on the clock's day."""
        assert seeded_context.todays_appointments().all == []

    def test_reset_restores_seed_and_keeps_subscribers(self, seeded_context, recorder):
        """Test reset discards changes, clears the cache and keeps subscriptions."""
        seeded_context.subscribe_to_availability_updates(recorder)
        seeded_context.delete_appointment("1")
        seeded_context.block_time_slot("D001", DATE, "12:00", "13:00")
        seeded_context.refresh_availability()

        seeded_context.reset()

        assert len(seeded_context.state.appointments) == 3
        assert len(seeded_context.availability) == 0
        assert seeded_context.state.availability_revision == 0
        availability = seeded_context.get_doctor_availability("D001", DATE)
        assert availability.find_slot("09:00").appointment_id == "1"
        assert not any(s.is_blocked for s in availability.time_slots)

        seeded_context.broadcast_availability_update("D001", DATE)
        assert recorder.calls[-1] == ("D001", DATE)


class TestSession:
    """Test login and logout through the context."""

    def test_login_and_logout(self, context):
        """Test that logout clears the session but keeps clinic data by default."""
        assert context.login("doctor", "doctor123") == UserRole.DOCTOR
        assert context.current_role == UserRole.DOCTOR
        context.create_appointment("1", DATE, "10:00")

        context.logout()

        assert context.current_role == UserRole.RECEPTIONIST
        assert context.session.is_authenticated is False
        assert len(context.state.appointments) == 1

    def test_logout_with_reset(self, seeded_context):
        """Test that logout can also restore the seed data."""
        seeded_context.login("receptionist", "receptionist123")
        seeded_context.delete_appointment("2")

        seeded_context.logout(reset_state=True)

        assert len(seeded_context.state.appointments) == 3

    def test_set_current_role(self, context):
        """Test role switching without logging in."""
        context.set_current_role(UserRole.DOCTOR)

        assert context.current_role == UserRole.DOCTOR
        assert context.session.is_authenticated is False

    def test_failed_login(self, context):
        """Test that wrong credentials return None."""
        assert context.login("receptionist", "nope") is None
