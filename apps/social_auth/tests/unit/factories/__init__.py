"""Test Factories.

테스트용 객체 생성 팩토리 및 Fake 프로바이더.
"""

from __future__ import annotations

import asyncio
import uuid
from datetime import datetime, timezone
from urllib.parse import urlencode

from apps.social_auth.application.oauth.dto import CallbackResult
from apps.social_auth.application.oauth.exceptions import ProviderMisconfiguredError
from apps.social_auth.application.oauth.ports import NormalizedProfile, OAuthTokens
from apps.social_auth.domain.entities import Identity, ProviderLink
from apps.social_auth.domain.enums import OAuthAction


def create_profile(
    *,
    provider: str = "google",
    provider_user_id: str = "google-user-1",
    email: str | None = "alice@example.com",
    display_name: str | None = "Alice",
    first_name: str | None = None,
    last_name: str | None = None,
    avatar_url: str | None = None,
) -> NormalizedProfile:
    """테스트용 NormalizedProfile 생성."""
    return NormalizedProfile(
        provider_name=provider,
        provider_user_id=provider_user_id,
        email=email,
        first_name=first_name,
        last_name=last_name,
        display_name=display_name,
        avatar_url=avatar_url,
    )


def create_callback_result(
    *,
    profile: NormalizedProfile | None = None,
    action: OAuthAction = OAuthAction.LOGIN,
    subject_id: uuid.UUID | None = None,
    provider: str | None = None,
) -> CallbackResult:
    """테스트용 CallbackResult 생성 (provider 기본값은 프로필의 provider_name)."""
    profile = profile or create_profile()
    return CallbackResult(
        provider=provider or profile.provider_name,
        action=action,
        profile=profile,
        tokens=OAuthTokens(access_token="provider-access-token"),
        subject_id=subject_id,
    )


def create_identity(
    *,
    identity_id: uuid.UUID | None = None,
    display_name: str = "alice",
    email: str = "alice@example.com",
    links: dict[str, str] | None = None,
    verified: bool = False,
) -> Identity:
    """테스트용 Identity 생성.

    Args:
        links: {provider: provider_user_id}
    """
    now = datetime.now(timezone.utc)
    return Identity(
        id=identity_id or uuid.uuid4(),
        display_name=display_name,
        email=email,
        created_at=now,
        updated_at=now,
        provider_links={
            provider: ProviderLink(
                provider=provider,
                provider_user_id=provider_user_id,
                linked_at=now,
            )
            for provider, provider_user_id in (links or {}).items()
        },
        verified=verified,
    )


class FakeProviderAdapter:
    """네트워크 없이 동작하는 OAuthProviderAdapter."""

    def __init__(
        self,
        name: str = "google",
        *,
        profile: NormalizedProfile | None = None,
        misconfigured: bool = False,
        delay_seconds: float = 0.0,
        profile_delay_seconds: float = 0.0,
    ) -> None:
        self.name = name
        self.profile = profile or create_profile(provider=name)
        self.misconfigured = misconfigured
        self.delay_seconds = delay_seconds
        self.profile_delay_seconds = profile_delay_seconds
        self.exchange_error: Exception | None = None
        self.profile_error: Exception | None = None
        self.exchanged_codes: list[str] = []

    def validate_configuration(self) -> None:
        if self.misconfigured:
            raise ProviderMisconfiguredError(self.name, ["client_secret"])

    def build_authorization_url(self, state: str) -> str:
        return f"https://{self.name}.example.com/authorize?{urlencode({'state': state})}"

    async def exchange_authorization_code(self, code: str) -> OAuthTokens:
        self.exchanged_codes.append(code)
        if self.delay_seconds:
            await asyncio.sleep(self.delay_seconds)
        if self.exchange_error is not None:
            raise self.exchange_error
        return OAuthTokens(access_token=f"access-{code}", expires_in=3600)

    async def fetch_identity_profile(self, access_token: str) -> NormalizedProfile:
        if self.profile_delay_seconds:
            await asyncio.sleep(self.profile_delay_seconds)
        if self.profile_error is not None:
            raise self.profile_error
        return self.profile
