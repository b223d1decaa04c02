"""JwtCredentialIssuer 단위 테스트."""

import uuid

import pytest
from jose import jwt

from apps.social_auth.application.token.exceptions import (
    BadCredentialSignatureError,
    CredentialExpiredError,
    InvalidCredentialError,
)
from apps.social_auth.infrastructure.security import JwtCredentialIssuer

SECRET = "test-secret-key-for-testing-only"


class TestJwtCredentialIssuer:
    """JwtCredentialIssuer 테스트."""

    @pytest.fixture
    def issuer(self) -> JwtCredentialIssuer:
        return JwtCredentialIssuer(secret_key=SECRET, expire_minutes=60)

    def test_issue_and_validate(self, issuer: JwtCredentialIssuer) -> None:
        """발급한 자격 증명은 검증 통과."""
        # Arrange
        identity_id = uuid.uuid4()

        # Act
        credential = issuer.issue(identity_id, "alice", "alice@example.com")
        claims = issuer.validate(credential.token)

        # Assert
        assert claims.identity_id == identity_id
        assert claims.display_name == "alice"
        assert claims.email == "alice@example.com"
        assert claims.expires_at == credential.expires_at
        assert claims.expires_at - claims.issued_at == 3600

    def test_payload_contains_standard_claims(self, issuer: JwtCredentialIssuer) -> None:
        credential = issuer.issue(uuid.uuid4(), "alice", "alice@example.com")

        payload = jwt.get_unverified_claims(credential.token)

        assert payload["iss"] == "social-auth-api"
        assert {"sub", "jti", "exp", "iat", "nbf"} <= set(payload)

    def test_each_credential_has_unique_jti(self, issuer: JwtCredentialIssuer) -> None:
        identity_id = uuid.uuid4()

        first = jwt.get_unverified_claims(issuer.issue(identity_id, "a", "a@b.c").token)
        second = jwt.get_unverified_claims(issuer.issue(identity_id, "a", "a@b.c").token)

        assert first["jti"] != second["jti"]

    def test_expired_credential(self) -> None:
        issuer = JwtCredentialIssuer(secret_key=SECRET, expire_minutes=-1)
        credential = issuer.issue(uuid.uuid4(), "alice", "alice@example.com")

        with pytest.raises(CredentialExpiredError):
            issuer.validate(credential.token)

    def test_bad_signature(self, issuer: JwtCredentialIssuer) -> None:
        """다른 키로 서명된 자격 증명 거부."""
        other = JwtCredentialIssuer(secret_key="another-secret")
        credential = other.issue(uuid.uuid4(), "alice", "alice@example.com")

        with pytest.raises(BadCredentialSignatureError):
            issuer.validate(credential.token)

    def test_wrong_issuer(self, issuer: JwtCredentialIssuer) -> None:
        other = JwtCredentialIssuer(secret_key=SECRET, issuer="someone-else")
        credential = other.issue(uuid.uuid4(), "alice", "alice@example.com")

        with pytest.raises(InvalidCredentialError):
            issuer.validate(credential.token)

    def test_malformed_token(self, issuer: JwtCredentialIssuer) -> None:
        with pytest.raises(InvalidCredentialError):
            issuer.validate("not-a-jwt")

    def test_missing_claims(self, issuer: JwtCredentialIssuer) -> None:
        """서명은 유효하지만 필수 클레임이 없는 경우."""
        token = jwt.encode({"sub": "not-a-uuid", "iss": "social-auth-api"}, SECRET)

        with pytest.raises(InvalidCredentialError):
            issuer.validate(token)

    def test_empty_secret_rejected(self) -> None:
        with pytest.raises(ValueError):
            JwtCredentialIssuer(secret_key="")
