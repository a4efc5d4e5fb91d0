from __future__ import annotations

import logging
from typing import MutableMapping

from werkzeug.security import check_password_hash, generate_password_hash

from ..core.constants import AUTH_SESSION_KEY
from ..core.exceptions import AuthenticationError

logger = logging.getLogger(__name__)


class AuthSession:
    """Logged-in state for one client.

    Wraps the mapping the flag is persisted in (Flask's ``session`` in the web
    layer, a plain dict in tests) so nothing global holds auth state.
    """

    def __init__(self, store: MutableMapping):
        self._store = store
        self._authenticated = False

    def load(self) -> "AuthSession":
        """Restore the persisted flag."""

        self._authenticated = self._store.get(AUTH_SESSION_KEY) is True
        return self

    @property
    def is_authenticated(self) -> bool:
        return self._authenticated

    def start(self) -> None:
        self._store[AUTH_SESSION_KEY] = True
        self._authenticated = True

    def clear(self) -> None:
        self._store.pop(AUTH_SESSION_KEY, None)
        self._authenticated = False


class AuthService:
    """Use case: unlock the app with the shared numeric PIN."""

    def __init__(self, pin_hash: str):
        self._pin_hash = pin_hash

    @classmethod
    def from_pin(cls, pin: str) -> "AuthService":
        return cls(generate_password_hash(str(pin)))

    def login(self, pin: str, session: AuthSession) -> None:
        pin = (pin or "").strip()
        if not pin.isdigit():
            raise AuthenticationError("Invalid PIN")

        try:
            ok = check_password_hash(self._pin_hash, pin)
        except ValueError:
            # e.g. a placeholder or corrupted hash in configuration
            logger.error("Configured PIN hash is not a valid werkzeug hash")
            ok = False

        if not ok:
            raise AuthenticationError("Invalid PIN")
        session.start()
        logger.info("Login successful")

    def logout(self, session: AuthSession) -> None:
        session.clear()
