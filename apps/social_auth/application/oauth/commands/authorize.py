"""OAuthAuthorize Command.

OAuth 인증 URL 생성 Use Case입니다.

Architecture:
    - UseCase(지휘자): OAuthAuthorizeInteractor
    - Services(연주자): OAuthOrchestrator
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import TYPE_CHECKING

from apps.social_auth.application.oauth.dto import (
    OAuthAuthorizeRequest,
    OAuthAuthorizeResponse,
)

if TYPE_CHECKING:
    from apps.social_auth.application.oauth.services import OAuthOrchestrator


class OAuthAuthorizeInteractor:
    """OAuth 인증 URL 생성 Interactor (지휘자).

    Workflow:
        1. state 발급 + 인증 URL 생성 (OAuthOrchestrator)
        2. state 만료 시각과 함께 응답

    Dependencies:
        Services (연주자):
            - orchestrator: state 발급 및 URL 생성
    """

    def __init__(
        self,
        orchestrator: "OAuthOrchestrator",
        state_ttl_seconds: int = 600,
    ) -> None:
        self._orchestrator = orchestrator
        self._state_ttl_seconds = state_ttl_seconds

    async def execute(self, request: OAuthAuthorizeRequest) -> OAuthAuthorizeResponse:
        """OAuth 인증 URL을 생성합니다.

        Args:
            request: 인증 요청 DTO

        Returns:
            인증 URL과 만료 시각을 담은 응답 DTO

        Raises:
            ProviderNotFoundError: 등록되지 않은 프로바이더
            ProviderMisconfiguredError: 프로바이더 설정 누락
            InvalidOAuthActionError: action/subject 조합 오류
        """
        authorization_url = await self._orchestrator.initiate(
            request.provider,
            request.action,
            request.subject_id,
        )
        expires_at = datetime.now(timezone.utc) + timedelta(seconds=self._state_ttl_seconds)

        return OAuthAuthorizeResponse(
            provider=request.provider,
            action=request.action,
            authorization_url=authorization_url,
            expires_at=expires_at,
        )
