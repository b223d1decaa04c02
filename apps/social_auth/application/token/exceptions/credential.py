"""Credential Exceptions."""

from apps.social_auth.application.common.exceptions.base import ApplicationError


class CredentialError(ApplicationError):
    """세션 자격 증명 검증 실패 베이스."""


class CredentialExpiredError(CredentialError):
    """만료된 자격 증명."""

    def __init__(self) -> None:
        super().__init__("Credential has expired")


class BadCredentialSignatureError(CredentialError):
    """서명 검증 실패."""

    def __init__(self) -> None:
        super().__init__("Credential signature verification failed")


class InvalidCredentialError(CredentialError):
    """형식/클레임 오류."""

    def __init__(self, reason: str = "Invalid credential") -> None:
        super().__init__(reason)
