"""
Per-request context handed explicitly to use cases.

Carries what a request needs beyond its payload: an id for log
correlation, the reference date for anything time-relative, the default
currency and the caller's session when one is attached.
"""

import uuid
from dataclasses import dataclass, field
from datetime import date, datetime

from hqledger.core.entities.session import AuthSession
from hqledger.core.exceptions import AuthenticationError


@dataclass
class RequestContext:
    """Explicit request-scoped state; never stored globally."""

    request_id: str = field(default_factory=lambda: str(uuid.uuid4()))
    today: date = field(default_factory=date.today)
    currency: str = "INR"
    session: AuthSession | None = None

    def require_session(self, now: datetime | None = None) -> AuthSession:
        """Return the attached session if it can still authorize a call."""
        if self.session is None:
            raise AuthenticationError("no session attached")
        now = now or datetime.now(self.session.expires_at.tzinfo)
        if not self.session.is_usable(now):
            raise AuthenticationError("session is not usable", self.session.status_at(now).value)
        return self.session

    def log_fields(self) -> dict[str, str]:
        fields = {"request_id": self.request_id}
        if self.session is not None:
            fields["user_id"] = self.session.user_id
        return fields
