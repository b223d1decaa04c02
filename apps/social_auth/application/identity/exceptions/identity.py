"""Identity Linking Exceptions.

모두 종결 오류입니다 (4xx 상당).
"""

from __future__ import annotations

from uuid import UUID

from apps.social_auth.application.common.exceptions.base import ApplicationError


class IdentityLinkingError(ApplicationError):
    """계정 식별/연결 실패 베이스."""


class IdentityConflictError(IdentityLinkingError):
    """계정 데이터 불일치 (덮어쓰지 않고 실패)."""

    def __init__(self, reason: str = "Identity conflict") -> None:
        super().__init__(reason)


class IdentityMismatchError(IdentityLinkingError):
    """state에 묶인 계정과 연결 요청 계정이 다름."""

    def __init__(self) -> None:
        super().__init__("Identity performing connect does not match state subject")


class AlreadyLinkedElsewhereError(IdentityLinkingError):
    """프로바이더 계정이 이미 다른 계정에 연결됨."""

    def __init__(self, provider: str) -> None:
        self.provider = provider
        super().__init__(f"{provider} account is already connected to another identity")


class IdentityNotFoundError(IdentityLinkingError):
    """계정 없음."""

    def __init__(self, identity_id: UUID) -> None:
        self.identity_id = identity_id
        super().__init__(f"Identity not found: {identity_id}")


class MissingProfileEmailError(IdentityLinkingError):
    """프로바이더 프로필에 이메일이 없음."""

    def __init__(self, provider: str) -> None:
        self.provider = provider
        super().__init__(f"{provider} profile does not include an email address")
