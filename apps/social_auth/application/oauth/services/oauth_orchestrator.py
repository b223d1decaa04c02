"""OAuthOrchestrator - OAuth 핸드셰이크 서비스.

"연주자" 역할: state 발급/소비, 인증 코드 교환, 프로필 조회를 담당합니다.
계정 식별/생성은 하지 않으며 검증된 CallbackResult만 반환합니다.
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING
from uuid import UUID

from apps.social_auth.application.oauth.dto import CallbackResult
from apps.social_auth.application.oauth.exceptions import (
    InvalidOAuthActionError,
    InvalidStateError,
    MissingAuthorizationCodeError,
    OAuthTimeoutError,
    ProviderDeniedError,
    StateTokenError,
)
from apps.social_auth.domain.enums import OAuthAction

if TYPE_CHECKING:
    from apps.social_auth.application.oauth.ports import (
        NormalizedProfile,
        OAuthProviderAdapter,
        OAuthProviderRegistry,
        OAuthTokens,
        StateEntry,
        StateTokenStore,
    )

logger = logging.getLogger(__name__)


class OAuthOrchestrator:
    """OAuth 핸드셰이크 오케스트레이터.

    Responsibilities:
        - 인증 URL 생성 (state 발급 포함)
        - 콜백 검증: state 소비 → 코드 교환 → 프로필 조회
        - 재시도 없음 (모든 실패는 호출자에게 종결 오류로 전달)

    Collaborators:
        - StateTokenStore: 일회용 state 저장/소비
        - OAuthProviderRegistry: 프로바이더 어댑터 조회
    """

    def __init__(
        self,
        state_store: "StateTokenStore",
        registry: "OAuthProviderRegistry",
        *,
        callback_timeout_seconds: float | None = 30.0,
    ) -> None:
        self._state_store = state_store
        self._registry = registry
        self._callback_timeout = callback_timeout_seconds

    def supported_providers(self) -> list[str]:
        """등록된 프로바이더 이름 목록."""
        return self._registry.supported_providers()

    async def initiate(
        self,
        provider: str,
        action: OAuthAction = OAuthAction.LOGIN,
        subject_id: UUID | None = None,
    ) -> str:
        """OAuth 인증 URL을 생성합니다.

        Args:
            provider: OAuth 프로바이더
            action: login | connect
            subject_id: connect 시 현재 로그인한 계정 ID

        Returns:
            프로바이더 인증 URL

        Raises:
            ProviderNotFoundError: 등록되지 않은 프로바이더
            ProviderMisconfiguredError: 프로바이더 설정 누락
            InvalidOAuthActionError: action/subject 조합 오류
        """
        action = OAuthAction(action)
        if action is OAuthAction.CONNECT and subject_id is None:
            raise InvalidOAuthActionError("connect requires an authenticated subject")
        if action is OAuthAction.LOGIN and subject_id is not None:
            raise InvalidOAuthActionError("login must not carry a subject")

        adapter = self._registry.get(provider)
        adapter.validate_configuration()

        state = await self._state_store.issue(provider, action, subject_id)
        url = adapter.build_authorization_url(state)

        logger.info(
            "OAuth authorization initiated",
            extra={"provider": provider, "action": action.value, "state": state[:8]},
        )
        return url

    async def handle_callback(
        self,
        provider: str,
        code: str | None,
        state: str | None,
        error: str | None = None,
        error_description: str | None = None,
        *,
        expected_action: OAuthAction | None = None,
        timeout_seconds: float | None = None,
    ) -> CallbackResult:
        """OAuth 콜백을 검증하고 프로필을 조회합니다.

        Args:
            provider: 콜백 경로의 프로바이더
            code: 인증 코드
            state: state 토큰
            error: 프로바이더 오류 코드 (사용자 거부 등)
            error_description: 프로바이더 오류 설명
            expected_action: 호출자가 기대하는 action (None이면 저장된 값 사용)
            timeout_seconds: 네트워크 호출 제한 시간 (None이면 기본값)

        Returns:
            CallbackResult: 저장된 action/subject_id + 정규화된 프로필

        Raises:
            ProviderDeniedError: 프로바이더가 거부 응답
            InvalidStateError: state 없음/만료/불일치
            MissingAuthorizationCodeError: 코드 없음
            ExchangeFailedError: 코드 교환 실패
            ProfileFetchFailedError: 프로필 조회 실패
            OAuthTimeoutError: 제한 시간 초과
        """
        # 1. 프로바이더 거부 (state는 건드리지 않음)
        if error:
            logger.info(
                "OAuth provider returned error",
                extra={"provider": provider, "error": error},
            )
            raise ProviderDeniedError(provider, error, error_description)

        adapter = self._registry.get(provider)

        # 2. State 소비 (일회용, 하위 오류는 로그에만 남김)
        entry = await self._consume_state(provider, state, expected_action)

        # 3. 코드 확인 (state 소비 후)
        if not code:
            logger.warning(
                "OAuth callback without authorization code",
                extra={"provider": provider},
            )
            raise MissingAuthorizationCodeError(provider)

        # 4. 코드 교환 → 프로필 조회 (하나의 제한 시간 공유)
        timeout = timeout_seconds if timeout_seconds is not None else self._callback_timeout
        tokens, profile = await self._exchange_and_fetch(adapter, code, timeout)

        logger.info(
            "OAuth profile fetched successfully",
            extra={
                "provider": provider,
                "action": entry.action.value,
                "provider_user_id": profile.provider_user_id,
            },
        )

        return CallbackResult(
            provider=provider,
            action=entry.action,
            profile=profile,
            tokens=tokens,
            subject_id=entry.subject_id,
        )

    async def _consume_state(
        self,
        provider: str,
        state: str | None,
        expected_action: OAuthAction | None,
    ) -> "StateEntry":
        if not state:
            logger.warning("OAuth callback without state", extra={"provider": provider})
            raise InvalidStateError()
        try:
            return await self._state_store.consume(
                state, provider=provider, action=expected_action
            )
        except StateTokenError as e:
            logger.warning(
                "OAuth state rejected",
                extra={"provider": provider, "reason": e.reason, "state": state[:8]},
            )
            raise InvalidStateError() from e

    @staticmethod
    async def _exchange_and_fetch(
        adapter: "OAuthProviderAdapter",
        code: str,
        timeout: float | None,
    ) -> tuple["OAuthTokens", "NormalizedProfile"]:
        """코드 교환과 프로필 조회를 하나의 제한 시간 안에서 수행합니다."""
        operation = "code exchange"

        async def _run() -> tuple["OAuthTokens", "NormalizedProfile"]:
            nonlocal operation
            tokens = await adapter.exchange_authorization_code(code)
            operation = "profile fetch"
            profile = await adapter.fetch_identity_profile(tokens.access_token)
            return tokens, profile

        try:
            return await asyncio.wait_for(_run(), timeout=timeout)
        except asyncio.TimeoutError as e:
            logger.warning(
                "OAuth provider call timed out",
                extra={"provider": adapter.name, "operation": operation, "timeout": timeout},
            )
            raise OAuthTimeoutError(adapter.name, operation) from e
