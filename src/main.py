"""
Clinic Front Desk

In-memory scheduling back end for a clinic front desk:
- Patient registration and search
- Appointment booking, rescheduling and cancellation
- Per-doctor daily slots with doctor-imposed blocks
- Live availability change notifications for open views
"""

import logging
from typing import Optional

from core.config import LOG_LEVEL
from services.clinic_context import ClinicContext

logger = logging.getLogger(__name__)


def configure_logging(level: Optional[str] = None) -> None:
    """Configure root logging once for scripts and embedding applications."""
    logging.basicConfig(
        level=getattr(logging, (level or LOG_LEVEL).upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler()],
    )


def create_context() -> ClinicContext:
    """Build a seeded clinic context with the configured session store."""
    context = ClinicContext()
    logger.info(
        f"🏥 Clinic front desk ready: {len(context.state.doctors)} doctors, "
        f"{len(context.state.patients)} patients, {len(context.state.appointments)} appointments"
    )
    return context
