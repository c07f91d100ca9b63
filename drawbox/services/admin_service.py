"""Admin credentials and bearer sessions."""

from __future__ import annotations

import hmac
import logging
import secrets
import time
from collections.abc import Callable

from drawbox.errors import CollaboratorUnavailable, UnauthorizedError
from drawbox.repositories.admin_session_repository import AdminSessionRepository

logger = logging.getLogger(__name__)

DEFAULT_SESSION_TTL = 24 * 60 * 60


class AdminService:
    """Issue, check and revoke admin tokens.

    The rest of the service only ever asks ``is_admin``; token format and
    transport stay here.
    """

    def __init__(
        self,
        repository: AdminSessionRepository,
        username: str,
        password: str,
        ttl_seconds: int = DEFAULT_SESSION_TTL,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._repo = repository
        self._username = username
        self._password = password
        self._ttl = int(ttl_seconds)
        self._clock = clock

    def login(self, username: str, password: str) -> str:
        if not self._password:
            raise UnauthorizedError(message="Admin login is disabled")

        user_ok = hmac.compare_digest(str(username).encode(), self._username.encode())
        pass_ok = hmac.compare_digest(str(password).encode(), self._password.encode())
        if not (user_ok and pass_ok):
            logger.info("Rejected admin login for %r", username)
            raise UnauthorizedError(message="Invalid credentials")

        token = secrets.token_urlsafe(32)
        now = self._clock()
        try:
            self._repo.purge_expired(now)
            self._repo.create(token, self._username, now + self._ttl)
        except CollaboratorUnavailable as exc:
            logger.warning("Admin session store unavailable", exc_info=True)
            raise UnauthorizedError(message="Admin sessions unavailable") from exc

        logger.info("Admin %s logged in", self._username)
        return token

    def logout(self, token: str | None) -> None:
        if not token:
            return
        try:
            self._repo.delete(token)
        except CollaboratorUnavailable:
            logger.warning("Could not revoke admin session", exc_info=True)
            return
        logger.info("Admin session revoked")

    def is_admin(self, token: str | None) -> bool:
        """True for a known, unexpired token; anything else is cleared."""

        if not token:
            return False
        try:
            record = self._repo.get(token)
            if record is not None and record.expires_at > self._clock():
                return True
            if record is not None:
                self._repo.delete(token)
        except CollaboratorUnavailable:
            logger.warning("Admin session check failed; treating caller as user", exc_info=True)
        return False

    def require_admin(self, token: str | None) -> None:
        if not self.is_admin(token):
            raise UnauthorizedError()
