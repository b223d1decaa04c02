"""Identity ports."""

from apps.social_auth.application.identity.ports.identity_store import IdentityStore

__all__ = ["IdentityStore"]
