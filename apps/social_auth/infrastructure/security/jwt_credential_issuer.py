"""JWT Credential Issuer.

CredentialIssuer 포트의 구현체입니다.
"""

from __future__ import annotations

import time
import uuid
from datetime import timedelta
from typing import Any

from jose import ExpiredSignatureError, JWTError, jwt
from jose.exceptions import JWTClaimsError

from apps.social_auth.application.token.exceptions import (
    BadCredentialSignatureError,
    CredentialExpiredError,
    InvalidCredentialError,
)
from apps.social_auth.application.token.ports import CredentialClaims, IssuedCredential


class JwtCredentialIssuer:
    """JWT 자격 증명 발급자.

    CredentialIssuer 구현체.
    """

    def __init__(
        self,
        *,
        secret_key: str,
        algorithm: str = "HS256",
        issuer: str = "social-auth-api",
        expire_minutes: int = 60 * 24,
    ) -> None:
        if not secret_key:
            raise ValueError("Credential secret key must not be empty")
        self._secret_key = secret_key
        self._algorithm = algorithm
        self._issuer = issuer
        self._expire = timedelta(minutes=expire_minutes)

    def _now_timestamp(self) -> int:
        """현재 UTC Unix timestamp 반환."""
        return int(time.time())

    def issue(self, identity_id: uuid.UUID, display_name: str, email: str) -> IssuedCredential:
        """자격 증명 발급."""
        now = self._now_timestamp()
        expires_at = now + int(self._expire.total_seconds())

        payload: dict[str, Any] = {
            "sub": str(identity_id),
            "jti": str(uuid.uuid4()),
            "display_name": display_name,
            "email": email,
            "exp": expires_at,
            "iat": now,
            "nbf": now,
            "iss": self._issuer,
        }

        token = jwt.encode(payload, self._secret_key, algorithm=self._algorithm)
        return IssuedCredential(token=token, expires_at=expires_at)

    def validate(self, token: str) -> CredentialClaims:
        """자격 증명 검증."""
        try:
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self._algorithm],
                issuer=self._issuer,
            )
        except ExpiredSignatureError as e:
            raise CredentialExpiredError() from e
        except JWTClaimsError as e:
            raise InvalidCredentialError(str(e)) from e
        except JWTError as e:
            if "signature" in str(e).lower():
                raise BadCredentialSignatureError() from e
            raise InvalidCredentialError(str(e)) from e

        try:
            return CredentialClaims(
                identity_id=uuid.UUID(payload["sub"]),
                display_name=payload["display_name"],
                email=payload["email"],
                issued_at=int(payload["iat"]),
                expires_at=int(payload["exp"]),
            )
        except (KeyError, TypeError, ValueError) as e:
            raise InvalidCredentialError("Malformed credential claims") from e
