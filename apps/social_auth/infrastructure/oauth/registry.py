"""OAuth Provider Registry.

OAuthProviderRegistry 포트의 구현체입니다.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import httpx

from apps.social_auth.application.oauth.exceptions import ProviderNotFoundError
from apps.social_auth.infrastructure.oauth.providers import (
    GoogleOAuthAdapter,
    KakaoOAuthAdapter,
    OAuthProvider,
)

if TYPE_CHECKING:
    from apps.social_auth.setup.config import Settings


class ProviderRegistry:
    """이름 → 프로바이더 매핑."""

    def __init__(self, providers: list[OAuthProvider] | None = None) -> None:
        self._providers: dict[str, OAuthProvider] = {}
        for provider in providers or []:
            self.register(provider)

    def register(self, provider: OAuthProvider) -> None:
        self._providers[provider.name] = provider

    def get(self, provider: str) -> OAuthProvider:
        try:
            return self._providers[provider]
        except KeyError as e:
            raise ProviderNotFoundError(provider) from e

    def supported_providers(self) -> list[str]:
        return sorted(self._providers)


def build_provider_registry(
    settings: "Settings",
    transport: httpx.AsyncBaseTransport | None = None,
) -> ProviderRegistry:
    """설정에서 client_id가 지정된 프로바이더만 등록합니다.

    secret/redirect 누락은 등록 후 validate_configuration에서 보고합니다.
    """
    registry = ProviderRegistry()
    timeout = settings.oauth_http_timeout_seconds

    if settings.google_client_id:
        registry.register(
            GoogleOAuthAdapter(
                client_id=settings.google_client_id,
                client_secret=settings.google_client_secret,
                redirect_uri=settings.redirect_uri_for("google"),
                scopes=settings.google_scopes,
                timeout_seconds=timeout,
                transport=transport,
            )
        )
    if settings.kakao_client_id:
        registry.register(
            KakaoOAuthAdapter(
                client_id=settings.kakao_client_id,
                client_secret=settings.kakao_client_secret,
                redirect_uri=settings.redirect_uri_for("kakao"),
                scopes=settings.kakao_scopes,
                timeout_seconds=timeout,
                transport=transport,
            )
        )
    return registry
