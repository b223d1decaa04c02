"""OAuthCallback Command.

OAuth 콜백 처리 Use Case입니다.

Architecture:
    - UseCase(지휘자): OAuthCallbackInteractor
    - Services(연주자): OAuthOrchestrator, IdentityLinkingPolicy
    - Ports(인프라): CredentialIssuer
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from apps.social_auth.application.oauth.dto import (
    OAuthCallbackRequest,
    OAuthCallbackResponse,
)
from apps.social_auth.domain.enums import OAuthAction

if TYPE_CHECKING:
    # Services (연주자)
    from apps.social_auth.application.identity.services import IdentityLinkingPolicy
    from apps.social_auth.application.oauth.dto import CallbackResult
    from apps.social_auth.application.oauth.services import OAuthOrchestrator

    # Ports (인프라)
    from apps.social_auth.application.token.ports import CredentialIssuer

logger = logging.getLogger(__name__)


class OAuthCallbackInteractor:
    """OAuth 콜백 Interactor (지휘자).

    Workflow:
        1. 콜백 검증 + 프로필 조회 (OAuthOrchestrator)
        2-a. login: 계정 식별/생성 (IdentityLinkingPolicy) → 자격 증명 발급 (CredentialIssuer)
        2-b. connect: 현재 계정에 프로바이더 연결 (IdentityLinkingPolicy)

    action은 요청이 아닌 서버에 저장된 state에서 결정됩니다.

    Dependencies:
        Services (연주자):
            - orchestrator: OAuth 핸드셰이크
            - linking_policy: 계정 식별/연결

        Ports (인프라):
            - credential_issuer: 세션 자격 증명 발급
    """

    def __init__(
        self,
        # Services (연주자)
        orchestrator: "OAuthOrchestrator",
        linking_policy: "IdentityLinkingPolicy",
        # Ports (인프라)
        credential_issuer: "CredentialIssuer",
    ) -> None:
        self._orchestrator = orchestrator
        self._linking_policy = linking_policy
        self._credential_issuer = credential_issuer

    async def execute(self, request: OAuthCallbackRequest) -> OAuthCallbackResponse:
        """OAuth 콜백을 처리합니다.

        Args:
            request: 콜백 요청 DTO

        Returns:
            login이면 자격 증명 포함, connect이면 연결된 계정 정보

        Raises:
            OAuthError: 핸드셰이크 실패 (state, 거부, 교환, 프로필, 타임아웃)
            IdentityLinkingError: 계정 식별/연결 실패
        """
        # 1. OAuth 핸드셰이크 (Service에 위임)
        result = await self._orchestrator.handle_callback(
            request.provider,
            request.code,
            request.state,
            request.error,
            request.error_description,
        )

        # 2. action 분기 (저장된 state 기준)
        if result.action is OAuthAction.CONNECT:
            return await self._connect(result, request)
        return await self._login(result)

    async def _login(self, result: "CallbackResult") -> OAuthCallbackResponse:
        resolution = await self._linking_policy.resolve_login(result)
        identity = resolution.identity

        credential = self._credential_issuer.issue(
            identity.id,
            identity.display_name,
            identity.email,
        )

        logger.info(
            "OAuth login successful",
            extra={
                "identity_id": str(identity.id),
                "provider": result.provider,
                "is_new_user": resolution.is_new_user,
                "linked": resolution.linked,
            },
        )

        return OAuthCallbackResponse(
            action=OAuthAction.LOGIN,
            provider=result.provider,
            identity_id=identity.id,
            display_name=identity.display_name,
            is_new_user=resolution.is_new_user,
            credential=credential.token,
            credential_expires_at=credential.expires_at,
        )

    async def _connect(
        self,
        result: "CallbackResult",
        request: OAuthCallbackRequest,
    ) -> OAuthCallbackResponse:
        identity = await self._linking_policy.link_for_subject(
            result, request.acting_subject_id
        )

        return OAuthCallbackResponse(
            action=OAuthAction.CONNECT,
            provider=result.provider,
            identity_id=identity.id,
            display_name=identity.display_name,
        )
