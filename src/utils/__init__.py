"""
Utility modules for the clinic front desk application.

This package contains shared helper functions used across the application,
including datetime utilities, id helpers and patient field validators.
"""

from utils.id_utils import availability_id, slot_id

__all__ = ['availability_id', 'slot_id']
