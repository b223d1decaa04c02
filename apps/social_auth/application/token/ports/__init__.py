"""Credential ports."""

from apps.social_auth.application.token.ports.credential_issuer import (
    CredentialClaims,
    CredentialIssuer,
    IssuedCredential,
)

__all__ = ["CredentialClaims", "CredentialIssuer", "IssuedCredential"]
