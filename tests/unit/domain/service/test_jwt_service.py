"""Unit tests for JWTService."""

from uuid import uuid4

import jwt
import pytest

from leaderboard.config import AuthSettings
from leaderboard.domain.service import JWTService
from leaderboard.util.jwt import JWTError


@pytest.fixture
def jwt_service():
    return JWTService(auth_settings=AuthSettings(jwt_secret="test-secret"))


class TestTokenRoundTrip:
    def test_actor_is_resolved_from_valid_token(self, jwt_service):
        """A freshly issued token resolves to the same actor."""
        user_id = uuid4()
        token = jwt_service.create_token(str(user_id), "Alice")

        actor = jwt_service.get_actor_from_token(token)

        assert actor is not None
        assert actor.id == user_id
        assert actor.name == "Alice"

    def test_verify_returns_payload(self, jwt_service):
        token = jwt_service.create_token("abc", "Alice")

        payload = jwt_service.verify_token(token)

        assert payload.user_id == "abc"
        assert payload.name == "Alice"


class TestUnauthenticated:
    @pytest.mark.parametrize("token", [None, "", "not-a-jwt"])
    def test_missing_or_garbage_token_yields_no_actor(self, jwt_service, token):
        assert jwt_service.get_actor_from_token(token) is None

    def test_token_signed_with_other_secret_is_rejected(self, jwt_service):
        foreign = JWTService(auth_settings=AuthSettings(jwt_secret="other-secret"))
        token = foreign.create_token(str(uuid4()), "Mallory")

        with pytest.raises(JWTError):
            jwt_service.verify_token(token)
        assert jwt_service.get_actor_from_token(token) is None

    def test_expired_token_is_rejected(self, jwt_service):
        token = jwt.encode(
            {"user_id": str(uuid4()), "name": "Alice", "exp": 0},
            "test-secret",
            algorithm="HS256",
        )

        with pytest.raises(JWTError, match="expired"):
            jwt_service.verify_token(token)

    def test_token_with_non_uuid_subject_yields_no_actor(self, jwt_service):
        """A validly signed token must still carry a UUID user ID."""
        token = jwt_service.create_token("not-a-uuid", "Alice")

        assert jwt_service.get_actor_from_token(token) is None
