"""Tests for the AuthSession refresh state machine."""

from datetime import datetime, timedelta, timezone

import pytest

from hqledger.application.context import RequestContext
from hqledger.core.entities.session import AuthSession, SessionState
from hqledger.core.exceptions import AuthenticationError

NOW = datetime(2024, 4, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def session() -> AuthSession:
    return AuthSession(
        user_id="u1",
        access_token="access-1",
        refresh_token="refresh-1",
        expires_at=NOW + timedelta(minutes=30),
    )


class TestStatus:
    """VALID and EXPIRING are derived from the clock."""

    def test_valid_before_window(self, session: AuthSession):
        assert session.status_at(NOW) == SessionState.VALID
        assert session.is_usable(NOW)

    def test_expiring_inside_window(self, session: AuthSession):
        assert session.status_at(NOW + timedelta(minutes=26)) == SessionState.EXPIRING
        assert session.is_usable(NOW + timedelta(minutes=26))

    def test_invalid_after_expiry(self, session: AuthSession):
        assert session.status_at(NOW + timedelta(minutes=30)) == SessionState.INVALID
        assert not session.is_usable(NOW + timedelta(hours=1))


class TestRefresh:
    """Tests for token rotation."""

    def test_rotation(self, session: AuthSession):
        presented = session.begin_refresh(NOW)
        assert presented == "refresh-1"
        assert session.status_at(NOW) == SessionState.REFRESHING
        assert not session.is_usable(NOW)

        session.complete_refresh("access-2", "refresh-2", NOW + timedelta(hours=1))
        assert session.state == SessionState.VALID
        assert session.access_token == "access-2"
        assert session.rotations == 1
        assert "refresh-1" in session.used_refresh_tokens

    def test_concurrent_refresh_rejected(self, session: AuthSession):
        session.begin_refresh(NOW)
        with pytest.raises(AuthenticationError) as exc_info:
            session.begin_refresh(NOW)
        assert exc_info.value.details["state"] == "refreshing"

    def test_expired_session_cannot_refresh(self, session: AuthSession):
        with pytest.raises(AuthenticationError):
            session.begin_refresh(NOW + timedelta(hours=2))

    def test_reused_refresh_token_invalidates(self, session: AuthSession):
        session.begin_refresh(NOW)
        session.complete_refresh("access-2", "refresh-2", NOW + timedelta(hours=1))
        session.begin_refresh(NOW)
        with pytest.raises(AuthenticationError):
            session.complete_refresh("access-3", "refresh-1", NOW + timedelta(hours=2))
        assert session.state == SessionState.INVALID

    def test_complete_without_begin(self, session: AuthSession):
        with pytest.raises(AuthenticationError):
            session.complete_refresh("a", "b", NOW)

    def test_failed_refresh_ends_session(self, session: AuthSession):
        session.begin_refresh(NOW)
        session.fail_refresh()
        assert session.status_at(NOW) == SessionState.INVALID
        with pytest.raises(AuthenticationError):
            session.fail_refresh()


class TestRequestContext:
    def test_require_session_missing(self):
        with pytest.raises(AuthenticationError):
            RequestContext().require_session(NOW)

    def test_require_session_usable(self, session: AuthSession):
        context = RequestContext(session=session)
        assert context.require_session(NOW) is session
        assert context.log_fields()["user_id"] == "u1"

    def test_require_session_expired(self, session: AuthSession):
        context = RequestContext(session=session)
        with pytest.raises(AuthenticationError) as exc_info:
            context.require_session(NOW + timedelta(hours=1))
        assert exc_info.value.details["state"] == "invalid"

    def test_request_ids_are_unique(self):
        assert RequestContext().request_id != RequestContext().request_id
