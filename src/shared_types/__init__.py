"""
Shared type definitions for the clinic front desk.

This module contains dataclasses and types that are used across multiple services.
"""

from shared_types.availability import DoctorAvailability, TimeSlot

__all__ = ["DoctorAvailability", "TimeSlot"]
