"""OAuth DTOs."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from apps.social_auth.application.oauth.ports.provider_adapter import (
    NormalizedProfile,
    OAuthTokens,
)
from apps.social_auth.domain.enums import OAuthAction


@dataclass(frozen=True, slots=True)
class CallbackResult:
    """검증된 콜백 결과.

    action/subject_id는 항상 서버에 저장된 StateEntry에서 가져옵니다.
    """

    provider: str
    action: OAuthAction
    profile: NormalizedProfile
    tokens: OAuthTokens
    subject_id: UUID | None = None


@dataclass(frozen=True, slots=True)
class OAuthAuthorizeRequest:
    """OAuth 인증 요청."""

    provider: str
    action: OAuthAction = OAuthAction.LOGIN
    subject_id: UUID | None = None


@dataclass(frozen=True, slots=True)
class OAuthAuthorizeResponse:
    """OAuth 인증 응답."""

    provider: str
    action: OAuthAction
    authorization_url: str
    expires_at: datetime


@dataclass(frozen=True, slots=True)
class OAuthCallbackRequest:
    """OAuth 콜백 요청."""

    provider: str
    code: str | None
    state: str | None
    error: str | None = None
    error_description: str | None = None
    acting_subject_id: UUID | None = None  # 쿠키/헤더 자격 증명에서


@dataclass(frozen=True, slots=True)
class OAuthCallbackResponse:
    """OAuth 콜백 응답.

    credential은 LOGIN일 때만 존재합니다.
    """

    action: OAuthAction
    provider: str
    identity_id: UUID
    display_name: str
    is_new_user: bool = False
    credential: str | None = None
    credential_expires_at: int | None = None
