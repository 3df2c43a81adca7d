"""
Application configuration using python-dotenv.

This module loads environment variables from .env file into os.environ
for use throughout the application.
"""

import os
import pathlib
from dotenv import load_dotenv


# Don't load .env file during testing to ensure predictable test behavior
is_testing = os.getenv("PYTEST_VERSION") is not None

if not is_testing:
    possible_paths = [
        pathlib.Path(__file__).parent.parent.parent / ".env",  # repository root
        pathlib.Path.cwd() / ".env",
    ]

    for env_path in possible_paths:
        if env_path.exists():
            load_dotenv(env_path)
            break


LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# Empty means the session flags live in memory only
SESSION_STORE_PATH = os.getenv("SESSION_STORE_PATH", "")

# Doctor used by booking views when none is chosen explicitly
DEFAULT_DOCTOR_ID = os.getenv("DEFAULT_DOCTOR_ID", "D001")

# Number of days offered by the quick date picker
QUICK_DATE_RANGE_DAYS = int(os.getenv("QUICK_DATE_RANGE_DAYS", "7"))
