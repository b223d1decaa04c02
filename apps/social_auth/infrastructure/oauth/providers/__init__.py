"""OAuth Providers.

각 OAuth 프로바이더 구현체입니다.
"""

from apps.social_auth.infrastructure.oauth.providers.base import OAuthProvider
from apps.social_auth.infrastructure.oauth.providers.google import GoogleOAuthAdapter
from apps.social_auth.infrastructure.oauth.providers.kakao import KakaoOAuthAdapter

__all__ = [
    "OAuthProvider",
    "GoogleOAuthAdapter",
    "KakaoOAuthAdapter",
]
