"""Identity application services."""

from apps.social_auth.application.identity.services.linking_policy import IdentityLinkingPolicy

__all__ = ["IdentityLinkingPolicy"]
