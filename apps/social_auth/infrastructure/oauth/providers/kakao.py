"""Kakao OAuth Provider."""

from __future__ import annotations

from typing import Any

from apps.social_auth.application.oauth.ports import NormalizedProfile
from apps.social_auth.infrastructure.oauth.providers.base import OAuthProvider

KAKAO_AUTH_URL = "https://kauth.kakao.com/oauth/authorize"
KAKAO_TOKEN_URL = "https://kauth.kakao.com/oauth/token"
KAKAO_PROFILE_URL = "https://kapi.kakao.com/v2/user/me"


class KakaoOAuthAdapter(OAuthProvider):
    """Kakao OAuth 프로바이더.

    client_secret은 콘솔에서 활성화한 경우에만 사용합니다.
    """

    name = "kakao"
    authorization_endpoint = KAKAO_AUTH_URL
    token_endpoint = KAKAO_TOKEN_URL
    profile_endpoint = KAKAO_PROFILE_URL
    requires_client_secret = False

    @property
    def default_scopes(self) -> tuple[str, ...]:
        # 카카오는 scope를 사용하지 않고, 개발자 콘솔에서 동의항목을 설정
        return ()

    def parse_profile(self, payload: dict[str, Any]) -> NormalizedProfile:
        kakao_account = payload.get("kakao_account") or {}
        profile = kakao_account.get("profile") or {}
        user_id = payload.get("id")

        return NormalizedProfile(
            provider_name=self.name,
            provider_user_id=str(user_id) if user_id is not None else "",
            email=kakao_account.get("email"),
            display_name=profile.get("nickname"),
            avatar_url=profile.get("profile_image_url"),
        )
