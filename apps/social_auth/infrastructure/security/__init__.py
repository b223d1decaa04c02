"""Security Infrastructure."""

from apps.social_auth.infrastructure.security.jwt_credential_issuer import JwtCredentialIssuer

__all__ = ["JwtCredentialIssuer"]
