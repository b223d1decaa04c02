"""Google OAuth Provider."""

from __future__ import annotations

from typing import Any

from apps.social_auth.application.oauth.ports import NormalizedProfile
from apps.social_auth.infrastructure.oauth.providers.base import OAuthProvider

GOOGLE_AUTH_URL = "https://accounts.google.com/o/oauth2/v2/auth"
GOOGLE_TOKEN_URL = "https://oauth2.googleapis.com/token"
GOOGLE_PROFILE_URL = "https://www.googleapis.com/oauth2/v2/userinfo"


class GoogleOAuthAdapter(OAuthProvider):
    """Google OAuth 프로바이더."""

    name = "google"
    authorization_endpoint = GOOGLE_AUTH_URL
    token_endpoint = GOOGLE_TOKEN_URL
    profile_endpoint = GOOGLE_PROFILE_URL

    @property
    def default_scopes(self) -> tuple[str, ...]:
        return ("openid", "email", "profile")

    def extra_authorization_params(self) -> dict[str, str]:
        return {
            "access_type": "offline",
            "include_granted_scopes": "true",
        }

    def parse_profile(self, payload: dict[str, Any]) -> NormalizedProfile:
        user_id = payload.get("id")
        return NormalizedProfile(
            provider_name=self.name,
            provider_user_id=str(user_id) if user_id is not None else "",
            email=payload.get("email"),
            first_name=payload.get("given_name"),
            last_name=payload.get("family_name"),
            display_name=payload.get("name"),
            avatar_url=payload.get("picture"),
        )
