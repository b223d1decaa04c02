"""OAuthProviderRegistry Port."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from apps.social_auth.application.oauth.ports.provider_adapter import (
        OAuthProviderAdapter,
    )


class OAuthProviderRegistry(Protocol):
    """프로바이더 이름 → Adapter 조회 인터페이스.

    구현체:
        - ProviderRegistry (infrastructure/oauth/)
    """

    def get(self, provider: str) -> "OAuthProviderAdapter":
        """Adapter 조회.

        Raises:
            ProviderNotFoundError: 등록되지 않은 프로바이더
        """
        ...

    def supported_providers(self) -> list[str]:
        """등록된 프로바이더 이름 목록."""
        ...
