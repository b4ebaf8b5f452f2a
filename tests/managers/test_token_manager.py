"""Tests for the JWT access token manager."""

from datetime import UTC, datetime, timedelta
from uuid import uuid4

from jose import jwt

from bloglist.configs import settings
from bloglist.managers.token_manager import create_access_token, decode_access_token


class TestCreateAccessToken:
    """Test cases for create_access_token function."""

    def test_token_contains_correct_claims(self) -> None:
        """Test that access token round-trips its identity claims."""
        user_id = uuid4()

        token_data = decode_access_token(create_access_token(user_id=user_id, username="root"))

        assert token_data is not None
        assert token_data.username == "root"
        assert token_data.user_id == user_id
        assert token_data.token_type == "access"
        assert token_data.jti

    def test_each_token_has_unique_jti(self) -> None:
        user_id = uuid4()
        first = decode_access_token(create_access_token(user_id=user_id, username="root"))
        second = decode_access_token(create_access_token(user_id=user_id, username="root"))

        assert first is not None
        assert second is not None
        assert first.jti != second.jti

    def test_issuer_and_audience_are_set(self) -> None:
        token = create_access_token(user_id=uuid4(), username="root")
        claims = jwt.get_unverified_claims(token)

        assert claims["iss"] == settings.JWT_ISSUER
        assert claims["aud"] == settings.JWT_AUDIENCE


def sign(secret: str = settings.SECRET_KEY, **overrides: object) -> str:
    now = datetime.now(UTC)
    claims = {
        "sub": "root",
        "user_id": str(uuid4()),
        "jti": "x",
        "type": "access",
        "iat": now,
        "exp": now + timedelta(minutes=5),
        "iss": settings.JWT_ISSUER,
        "aud": settings.JWT_AUDIENCE,
        **overrides,
    }
    return jwt.encode(claims, secret, algorithm=settings.ALGORITHM)


class TestDecodeAccessToken:
    """Test cases for decode_access_token function."""

    def test_hand_signed_token_is_accepted(self) -> None:
        assert decode_access_token(sign()) is not None

    def test_expired_token_is_rejected(self) -> None:
        token = create_access_token(
            user_id=uuid4(),
            username="root",
            expires_delta=timedelta(seconds=-1),
        )
        assert decode_access_token(token) is None

    def test_garbage_is_rejected(self) -> None:
        assert decode_access_token("invalid.token.here") is None

    def test_wrong_signature_is_rejected(self) -> None:
        assert decode_access_token(sign(secret="another-secret")) is None

    def test_wrong_token_type_is_rejected(self) -> None:
        assert decode_access_token(sign(type="refresh")) is None

    def test_malformed_user_id_is_rejected(self) -> None:
        assert decode_access_token(sign(user_id="not-a-uuid")) is None

    def test_wrong_audience_is_rejected(self) -> None:
        assert decode_access_token(sign(aud="someone-else")) is None
