"""
Authenticated session entity.

Token state lives on an explicit object handed to each request instead
of ambient client storage. Refresh-token rotation is a small state
machine: VALID -> EXPIRING -> REFRESHING -> VALID, with INVALID as the
terminal state.
"""

from datetime import datetime, timedelta
from enum import Enum

from pydantic import BaseModel, Field

from hqledger.core.exceptions import AuthenticationError


class SessionState(str, Enum):
    """Lifecycle state of an authenticated session."""

    VALID = "valid"
    EXPIRING = "expiring"
    REFRESHING = "refreshing"
    INVALID = "invalid"


class AuthSession(BaseModel):
    """
    Access/refresh token pair with rotation bookkeeping.

    The stored ``state`` only records REFRESHING and INVALID; VALID vs
    EXPIRING is derived from the clock in ``status_at``.
    """

    user_id: str
    access_token: str
    refresh_token: str
    expires_at: datetime
    refresh_window: timedelta = timedelta(minutes=5)
    state: SessionState = SessionState.VALID
    used_refresh_tokens: set[str] = Field(default_factory=set)
    rotations: int = 0

    def status_at(self, now: datetime) -> SessionState:
        """Current state, promoting VALID to EXPIRING or INVALID by time."""
        if self.state in {SessionState.INVALID, SessionState.REFRESHING}:
            return self.state
        if now >= self.expires_at:
            return SessionState.INVALID
        if now >= self.expires_at - self.refresh_window:
            return SessionState.EXPIRING
        return SessionState.VALID

    def is_usable(self, now: datetime) -> bool:
        return self.status_at(now) in {SessionState.VALID, SessionState.EXPIRING}

    def begin_refresh(self, now: datetime) -> str:
        """Enter REFRESHING and hand out the refresh token to present."""
        current = self.status_at(now)
        if current == SessionState.REFRESHING:
            raise AuthenticationError("refresh already in progress", current.value)
        if current == SessionState.INVALID:
            raise AuthenticationError("session is no longer valid", current.value)
        self.state = SessionState.REFRESHING
        return self.refresh_token

    def complete_refresh(
        self,
        access_token: str,
        refresh_token: str,
        expires_at: datetime,
    ) -> None:
        """Rotate tokens; a refresh token may never be reused."""
        if self.state != SessionState.REFRESHING:
            raise AuthenticationError("no refresh in progress", self.state.value)
        if refresh_token == self.refresh_token or refresh_token in self.used_refresh_tokens:
            self.invalidate()
            raise AuthenticationError("refresh token reuse detected", SessionState.INVALID.value)
        self.used_refresh_tokens.add(self.refresh_token)
        self.access_token = access_token
        self.refresh_token = refresh_token
        self.expires_at = expires_at
        self.rotations += 1
        self.state = SessionState.VALID

    def fail_refresh(self) -> None:
        """A rejected refresh ends the session."""
        if self.state != SessionState.REFRESHING:
            raise AuthenticationError("no refresh in progress", self.state.value)
        self.invalidate()

    def invalidate(self) -> None:
        self.state = SessionState.INVALID
