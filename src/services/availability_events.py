"""
Availability change notifications.

Views that display a doctor's slots subscribe here and are told which
(doctor, date) changed, so they can re-query the availability store instead of
polling. Delivery is synchronous and in-process only: there is no persistence
and no replay for subscribers that register after a publish.
"""

import logging
from typing import Callable, List, Set

logger = logging.getLogger(__name__)

AvailabilityCallback = Callable[[str, str], None]
Unsubscribe = Callable[[], None]


class AvailabilityChangeBus:
    """
    Observer registry for availability changes.

    Publishers call ``publish`` only after the store update is committed, so a
    callback re-reading the store always sees the new state.
    """

    def __init__(self):
        self._subscribers: Set[AvailabilityCallback] = set()

    def subscribe(self, callback: AvailabilityCallback) -> Unsubscribe:
        """
        Register a callback invoked with (doctor_id, date) on every change.

        Args:
            callback: Function taking doctor_id and date strings

        Returns:
            Function removing exactly this callback; calling it again is a no-op
        """
        self._subscribers.add(callback)

        def unsubscribe() -> None:
            self._subscribers.discard(callback)

        return unsubscribe

    def publish(self, doctor_id: str, date: str) -> None:
        """
        Notify every current subscriber that (doctor_id, date) changed.

        A subscriber raising an exception is logged and skipped; the remaining
        subscribers still run and the publisher never sees the error.
        """
        # Snapshot so callbacks may (un)subscribe while being notified
        subscribers: List[AvailabilityCallback] = list(self._subscribers)
        for callback in subscribers:
            try:
                callback(doctor_id, date)
            except Exception as e:
                logger.exception(f"Error in availability update callback for {doctor_id} on {date}: {e}")

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)
