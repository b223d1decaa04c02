"""Domain Enums."""

from apps.social_auth.domain.enums.oauth_action import OAuthAction

__all__ = ["OAuthAction"]
