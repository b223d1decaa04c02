"""CredentialIssuer Port.

세션 자격 증명 발급/검증 인터페이스입니다.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol
from uuid import UUID


@dataclass(frozen=True)
class IssuedCredential:
    """발급된 자격 증명."""

    token: str
    expires_at: int


@dataclass(frozen=True)
class CredentialClaims:
    """검증된 자격 증명 클레임."""

    identity_id: UUID
    display_name: str
    email: str
    issued_at: int
    expires_at: int


class CredentialIssuer(Protocol):
    """자격 증명 발급자.

    구현체:
        - JwtCredentialIssuer (infrastructure/security/)
    """

    def issue(self, identity_id: UUID, display_name: str, email: str) -> IssuedCredential:
        """서명된 시간 제한 자격 증명 발급."""
        ...

    def validate(self, token: str) -> CredentialClaims:
        """자격 증명 검증.

        Raises:
            CredentialExpiredError: 만료
            BadCredentialSignatureError: 서명 불일치
            InvalidCredentialError: 형식/클레임 오류
        """
        ...
