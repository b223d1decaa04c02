"""OAuthProviderAdapter Port.

OAuth 프로바이더(Google, Kakao 등)와의 통신을 담당하는 Adapter 인터페이스입니다.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class NormalizedProfile:
    """프로바이더 공통 프로필 데이터."""

    provider_name: str
    provider_user_id: str
    email: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    display_name: str | None = None
    avatar_url: str | None = None


@dataclass(frozen=True)
class OAuthTokens:
    """OAuth 토큰 데이터."""

    access_token: str
    token_type: str = "Bearer"
    expires_in: int | None = None
    refresh_token: str | None = None
    scope: str | None = None


class OAuthProviderAdapter(Protocol):
    """OAuth 프로바이더 Adapter 인터페이스.

    구현체:
        - GoogleOAuthAdapter (infrastructure/oauth/providers/)
        - KakaoOAuthAdapter (infrastructure/oauth/providers/)
    """

    name: str

    def validate_configuration(self) -> None:
        """정적 설정 검증.

        Raises:
            ProviderMisconfiguredError: client id/secret/redirect URL 누락
        """
        ...

    def build_authorization_url(self, state: str) -> str:
        """인증 URL 생성.

        Args:
            state: CSRF 방지용 상태 값

        Returns:
            모든 파라미터가 URL 인코딩된 인증 URL
        """
        ...

    async def exchange_authorization_code(self, code: str) -> OAuthTokens:
        """인증 코드로 토큰 교환.

        Raises:
            ExchangeFailedError: 비정상 응답 또는 전송 오류
            OAuthTimeoutError: 제한 시간 초과
        """
        ...

    async def fetch_identity_profile(self, access_token: str) -> NormalizedProfile:
        """사용자 프로필 조회.

        Raises:
            ProfileFetchFailedError: 비정상 응답 또는 전송 오류
            OAuthTimeoutError: 제한 시간 초과
        """
        ...
