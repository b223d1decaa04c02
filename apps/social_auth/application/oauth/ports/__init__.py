"""OAuth domain ports.

OAuth 인증 관련 포트입니다.
"""

from apps.social_auth.application.oauth.ports.provider_adapter import (
    NormalizedProfile,
    OAuthProviderAdapter,
    OAuthTokens,
)
from apps.social_auth.application.oauth.ports.provider_registry import (
    OAuthProviderRegistry,
)
from apps.social_auth.application.oauth.ports.state_store import (
    StateEntry,
    StateTokenStore,
)

__all__ = [
    "NormalizedProfile",
    "OAuthProviderAdapter",
    "OAuthTokens",
    "OAuthProviderRegistry",
    "StateEntry",
    "StateTokenStore",
]
