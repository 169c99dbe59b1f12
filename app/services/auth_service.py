"""
Placeholder login.

The credential check is a fixed username/password pair and grants no real
security boundary. It sits behind the CredentialVerifier protocol so a real
identity provider can replace it without touching the login contract.
"""

import secrets
import logging
from typing import Protocol

from app.exceptions import BadRequest, Unauthorized
from app.models import LoginResponse, UserInfo

logger = logging.getLogger(__name__)


class CredentialVerifier(Protocol):
    """Port interface for checking a username/password pair."""

    def verify(self, username: str, password: str) -> bool:
        """Return True if the pair is accepted."""
        ...


class StaticCredentialVerifier:
    """Accepts exactly one hardcoded username/password pair."""

    def __init__(self, username: str = "admin", password: str = "admin"):
        self._username = username
        self._password = password

    def verify(self, username: str, password: str) -> bool:
        username_ok = secrets.compare_digest(username.encode(), self._username.encode())
        password_ok = secrets.compare_digest(password.encode(), self._password.encode())
        return username_ok and password_ok


class AuthService:
    def __init__(self, verifier: CredentialVerifier):
        self._verifier = verifier

    def login(self, username: str | None, password: str | None) -> LoginResponse:
        if not username or not password:
            raise BadRequest("Username and password are required")

        if not self._verifier.verify(username, password):
            logger.info("Rejected login for user %r", username)
            raise Unauthorized("Invalid username or password")

        return LoginResponse(
            success=True,
            message="Login successful",
            user=UserInfo(username=username),
        )
