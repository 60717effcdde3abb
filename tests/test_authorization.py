"""Tests for the authorization gate and session tokens."""

import jwt as pyjwt
import pytest

from backlog.application.catalog.authorization import (
    ReadAccess,
    require_owner_or_admin,
    require_read_access,
    require_role,
    require_session,
)
from backlog.domain.catalog.entities import Role, Session
from backlog.domain.catalog.errors import ForbiddenError, UnauthorizedError
from backlog.shared.security.tokens import decode_session, encode_session

SECRET = "unit-test-secret-long-enough-for-hs256"


class TestGate:
    """Tests for the require_* helpers."""

    def test_no_session_is_unauthorized(self) -> None:
        with pytest.raises(UnauthorizedError):
            require_session(None)

    def test_user_is_forbidden_from_admin_role(self, user) -> None:
        with pytest.raises(ForbiddenError):
            require_role(user, Role.ADMIN)

    def test_admin_passes_role_check(self, admin) -> None:
        assert require_role(admin, Role.ADMIN) is admin

    def test_anonymous_role_check_is_unauthorized_not_forbidden(self) -> None:
        with pytest.raises(UnauthorizedError):
            require_role(None, Role.ADMIN)

    def test_public_read_allows_anonymous(self) -> None:
        assert require_read_access(None, ReadAccess.PUBLIC) is None

    def test_authenticated_read_rejects_anonymous(self) -> None:
        with pytest.raises(UnauthorizedError):
            require_read_access(None, ReadAccess.AUTHENTICATED)

    def test_owner_or_admin(self, admin, user, other_user) -> None:
        assert require_owner_or_admin(user, user.user_id) is user
        assert require_owner_or_admin(admin, user.user_id) is admin
        with pytest.raises(ForbiddenError):
            require_owner_or_admin(other_user, user.user_id)

    def test_errors_carry_messages(self) -> None:
        assert UnauthorizedError().message
        assert ForbiddenError("custom").message == "custom"


class TestSessionTokens:
    """Tests for JWT session decoding."""

    def test_round_trip_keeps_role(self) -> None:
        session = Session(user_id="u-9", role=Role.ADMIN)

        assert decode_session(encode_session(session, SECRET), SECRET) == session

    def test_role_defaults_to_user(self) -> None:
        token = pyjwt.encode({"sub": "u-1", "exp": 4102444800}, SECRET, algorithm="HS256")

        assert decode_session(token, SECRET).role is Role.USER

    def test_expired_token_rejected(self) -> None:
        token = encode_session(Session("u-1"), SECRET, ttl_seconds=-60)

        with pytest.raises(pyjwt.ExpiredSignatureError):
            decode_session(token, SECRET)

    def test_wrong_secret_rejected(self) -> None:
        token = encode_session(Session("u-1"), SECRET)

        with pytest.raises(pyjwt.InvalidSignatureError):
            decode_session(token, "another-secret-that-is-long-enough-too")

    def test_missing_subject_rejected(self) -> None:
        token = pyjwt.encode({"exp": 4102444800}, SECRET, algorithm="HS256")

        with pytest.raises(pyjwt.MissingRequiredClaimError):
            decode_session(token, SECRET)

    def test_unknown_role_rejected(self) -> None:
        token = pyjwt.encode({"sub": "u-1", "role": "Root", "exp": 4102444800}, SECRET, algorithm="HS256")

        with pytest.raises(ValueError):
            decode_session(token, SECRET)

    def test_audience_checked_when_configured(self) -> None:
        token = encode_session(Session("u-1"), SECRET, audience="backlog")

        assert decode_session(token, SECRET, audience="backlog").user_id == "u-1"
        with pytest.raises(pyjwt.InvalidAudienceError):
            decode_session(token, SECRET, audience="other")
