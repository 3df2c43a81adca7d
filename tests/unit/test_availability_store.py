"""
Unit tests for the availability store.
"""

from services.availability_store import AvailabilityStore


class TestAvailabilityStoreGet:
    """Test get-or-create behavior."""

    def test_get_creates_and_caches(self, store, state):
        """Test that the first get materializes an entry and later gets return it."""
        first = store.get("D001", "2026-01-09")

        assert first is not None
        assert first.id == "D001_2026-01-09"
        assert first.doctor_id == "D001"
        assert first.date == "2026-01-09"
        assert len(first.time_slots) == 16
        assert state.availability["D001_2026-01-09"] is first
        assert store.get("D001", "2026-01-09") is first
        assert len(store) == 1

    def test_get_unknown_doctor_returns_none(self, store):
        """Test that an unknown doctor yields no entry and caches nothing."""
        assert store.get("D999", "2026-01-09") is None
        assert len(store) == 0

    def test_get_reflects_existing_appointments(self, state, store, make_appointment):
        """Test that appointments present before the first read are booked."""
        state.appointments.append(make_appointment("A1", "10:00"))

        availability = store.get("D001", "2026-01-09")

        slot = availability.find_slot("10:00")
        assert slot.is_booked is True
        assert slot.appointment_id == "A1"

    def test_get_if_exists_never_creates(self, store):
        """Test that get_if_exists only returns cached entries."""
        assert store.get_if_exists("D001", "2026-01-09") is None
        assert len(store) == 0

        created = store.get("D001", "2026-01-09")
        assert store.get_if_exists("D001", "2026-01-09") is created

    def test_entries_are_per_doctor_and_date(self, store):
        """Test distinct dates produce distinct entries."""
        first = store.get("D001", "2026-01-09")
        second = store.get("D001", "2026-01-10")

        assert len(store) == 2
        assert second.id == "D001_2026-01-10"
        assert second is not first


class TestAvailabilityStoreUpdate:
    """Test replace-by-id updates."""

    def test_update_replaces_cached_entry(self, store):
        """Test that update stores the new record under the same id."""
        availability = store.get("D001", "2026-01-09")
        updated = availability.with_slots(
            slot.blocked("Lunch") if slot.start_time == "12:00" else slot
            for slot in availability.time_slots
        )

        store.update(updated)

        cached = store.get("D001", "2026-01-09")
        assert cached is updated
        assert cached.find_slot("12:00").is_blocked is True

    def test_update_leaves_previous_snapshot_untouched(self, store):
        """Test that a record read before an update keeps its old values."""
        before = store.get("D001", "2026-01-09")
        store.update(before.with_slots(slot.blocked(None) for slot in before.time_slots))

        assert not any(slot.is_blocked for slot in before.time_slots)

    def test_update_of_uncached_id_is_ignored(self, store, state):
        """Test that updating an entry that was never created is a no-op."""
        availability = AvailabilityStore(state).get("D001", "2026-01-09")
        store.clear()

        store.update(availability)

        assert len(store) == 0


class TestAvailabilityStoreRegenerate:
    """Test regeneration of cached entries."""

    def test_regenerate_keeps_blocks_and_recomputes_bookings(self, state, store, make_appointment):
        """Test blocks survive while bookings follow the appointment list."""
        availability = store.get("D001", "2026-01-09")
        store.update(availability.with_slots(
            slot.blocked("Surgery") if slot.start_time == "15:00" else slot
            for slot in availability.time_slots
        ))
        state.appointments.append(make_appointment("A1", "09:30"))

        regenerated = store.regenerate("D001", "2026-01-09")

        assert regenerated.id == "D001_2026-01-09"
        assert regenerated.find_slot("15:00").block_reason == "Surgery"
        assert regenerated.find_slot("09:30").appointment_id == "A1"
        assert store.get("D001", "2026-01-09") is regenerated

    def test_regenerate_creates_missing_entry(self, store):
        """Test regenerating a day never read before caches it."""
        regenerated = store.regenerate("D001", "2026-01-12")

        assert regenerated is not None
        assert store.get_if_exists("D001", "2026-01-12") is regenerated

    def test_regenerate_unknown_doctor(self, store):
        """Test regenerate returns None for an unknown doctor."""
        assert store.regenerate("D999", "2026-01-09") is None

    def test_clear_empties_cache(self, store):
        """Test clear drops every entry."""
        store.get("D001", "2026-01-09")
        store.clear()

        assert len(store) == 0
        assert store.get_if_exists("D001", "2026-01-09") is None
