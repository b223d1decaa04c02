"""Credential exceptions."""

from apps.social_auth.application.token.exceptions.credential import (
    BadCredentialSignatureError,
    CredentialError,
    CredentialExpiredError,
    InvalidCredentialError,
)

__all__ = [
    "CredentialError",
    "CredentialExpiredError",
    "BadCredentialSignatureError",
    "InvalidCredentialError",
]
