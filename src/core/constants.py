"""Application constants and configuration values."""

# Date and time string formats used by every record
DATE_FORMAT = "%Y-%m-%d"
TIME_FORMAT = "%H:%M"

# Session keys, mirroring what the front end keeps in local storage
SESSION_ROLE_KEY = "currentRole"
SESSION_AUTH_KEY = "isAuthenticated"
SESSION_AUTH_VALUE = "true"

DEFAULT_ROLE = "receptionist"

# Mock credentials for the demo login screen (not a security boundary)
MOCK_USERS = {
    "receptionist": {"username": "receptionist", "password": "receptionist123", "role": "receptionist"},
    "doctor": {"username": "doctor", "password": "doctor123", "role": "doctor"},
}

# Patient numbers look like P001, P002, ...
PATIENT_NUMBER_PREFIX = "P"
PATIENT_NUMBER_WIDTH = 3

# Separator for derived ids such as "D001_2026-01-09" and "2026-01-09_09:00"
ID_SEPARATOR = "_"
