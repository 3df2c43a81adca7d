"""
Session service for the mock front desk login.

Only two flags survive a restart, the current role and whether someone is
logged in. They are stored as plain strings in a key/value store under
"currentRole" and "isAuthenticated". Credentials are compared in plain text;
this is a demo gate, not authentication.
"""

import logging
from typing import Optional

from core.constants import (
    DEFAULT_ROLE,
    MOCK_USERS,
    SESSION_AUTH_KEY,
    SESSION_AUTH_VALUE,
    SESSION_ROLE_KEY,
)
from core.session_store import KeyValueStore
from models import UserRole

logger = logging.getLogger(__name__)


class SessionService:
    """Service class for role selection and the mock login."""

    def __init__(self, store: KeyValueStore):
        self.store = store

    @staticmethod
    def authenticate(username: str, password: str) -> Optional[UserRole]:
        """
        Check credentials against the mock users.

        Returns:
            The user's role, or None if the credentials do not match
        """
        for user in MOCK_USERS.values():
            if user["username"] == username and user["password"] == password:
                return UserRole(user["role"])
        logger.info(f"Rejected login for {username!r}")
        return None

    @property
    def current_role(self) -> UserRole:
        """Persisted role, falling back to receptionist when unset or unknown."""
        saved = self.store.get_item(SESSION_ROLE_KEY)
        try:
            return UserRole(saved) if saved else UserRole(DEFAULT_ROLE)
        except ValueError:
            logger.warning(f"Ignoring unknown persisted role {saved!r}")
            return UserRole(DEFAULT_ROLE)

    @property
    def is_authenticated(self) -> bool:
        return self.store.get_item(SESSION_AUTH_KEY) == SESSION_AUTH_VALUE

    def select_role(self, role: UserRole) -> None:
        """Switch role without touching the authenticated flag."""
        self.store.set_item(SESSION_ROLE_KEY, role.value)

    def login(self, role: UserRole) -> None:
        self.select_role(role)
        self.store.set_item(SESSION_AUTH_KEY, SESSION_AUTH_VALUE)
        logger.info(f"Logged in as {role.value}")

    def login_with_credentials(self, username: str, password: str) -> Optional[UserRole]:
        """Authenticate and log in; returns the role or None on failure."""
        role = self.authenticate(username, password)
        if role:
            self.login(role)
        return role

    def logout(self) -> None:
        """Remove both persisted flags; the role reverts to receptionist."""
        self.store.remove_item(SESSION_ROLE_KEY)
        self.store.remove_item(SESSION_AUTH_KEY)
        logger.info("Logged out")
