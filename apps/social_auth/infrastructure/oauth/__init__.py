"""OAuth Provider Implementations."""

from apps.social_auth.infrastructure.oauth.providers import (
    GoogleOAuthAdapter,
    KakaoOAuthAdapter,
    OAuthProvider,
)
from apps.social_auth.infrastructure.oauth.registry import (
    ProviderRegistry,
    build_provider_registry,
)

__all__ = [
    "OAuthProvider",
    "GoogleOAuthAdapter",
    "KakaoOAuthAdapter",
    "ProviderRegistry",
    "build_provider_registry",
]
