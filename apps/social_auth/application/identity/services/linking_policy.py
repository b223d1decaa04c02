"""IdentityLinkingPolicy - 계정 식별/연결 서비스.

"연주자" 역할: 검증된 CallbackResult를 로컬 계정으로 해석합니다.
유일성 검사는 check-then-act이며, 저장소가 쓰기 시점에 보고하는 충돌은
IdentityConflictError로 변환합니다 (덮어쓰지 않음).
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from uuid import UUID

from apps.social_auth.application.identity.dto import LoginResolution
from apps.social_auth.application.identity.exceptions import (
    AlreadyLinkedElsewhereError,
    IdentityConflictError,
    IdentityMismatchError,
    IdentityNotFoundError,
    IdentityStoreConflictError,
    MissingProfileEmailError,
)
from apps.social_auth.domain.entities import Identity
from apps.social_auth.domain.enums import OAuthAction
from apps.social_auth.domain.exceptions import ProviderAlreadyLinkedError
from apps.social_auth.domain.services import DisplayNameGenerator

if TYPE_CHECKING:
    from apps.social_auth.application.identity.ports import IdentityStore
    from apps.social_auth.application.oauth.dto import CallbackResult
    from apps.social_auth.application.oauth.ports import NormalizedProfile

logger = logging.getLogger(__name__)


class IdentityLinkingPolicy:
    """계정 식별/연결 정책.

    Responsibilities:
        - 로그인: provider ID → 이메일 → 신규 생성 순으로 계정 결정
        - 연결: state에 묶인 계정에만 프로바이더 연결

    Collaborators:
        - IdentityStore: 계정 조회/저장
        - DisplayNameGenerator: 표시 이름 후보 생성 (도메인 서비스)
    """

    def __init__(
        self,
        identity_store: "IdentityStore",
        display_names: DisplayNameGenerator | None = None,
    ) -> None:
        self._store = identity_store
        self._display_names = display_names or DisplayNameGenerator()

    async def resolve_login(self, result: "CallbackResult") -> LoginResolution:
        """로그인 콜백 결과를 계정으로 해석합니다.

        Args:
            result: 검증된 콜백 결과

        Returns:
            LoginResolution: 계정, 신규 여부, 이메일 연결 여부

        Raises:
            MissingProfileEmailError: 프로필에 이메일 없음 (신규/이메일 연결 불가)
            IdentityConflictError: 이메일 계정이 이 프로바이더의 다른 ID에 연결됨
        """
        profile = result.profile
        provider = result.provider

        # 1. provider ID로 조회 (fast path)
        existing = await self._store.find_by_provider_id(provider, profile.provider_user_id)
        if existing is not None:
            logger.info(
                "OAuth login resolved by provider id",
                extra={"identity_id": str(existing.id), "provider": provider},
            )
            return LoginResolution(identity=existing)

        email = _normalize_email(profile.email)
        if email is None:
            raise MissingProfileEmailError(provider)

        # 2. 이메일로 조회 → 프로바이더 연결
        by_email = await self._store.find_by_email(email)
        if by_email is not None:
            identity = await self._link(by_email, provider, profile)
            logger.info(
                "OAuth login linked provider by email",
                extra={"identity_id": str(identity.id), "provider": provider},
            )
            return LoginResolution(identity=identity, linked=True)

        # 3. 신규 계정 생성
        identity = await self._create(provider, profile, email)
        logger.info(
            "OAuth login created identity",
            extra={
                "identity_id": str(identity.id),
                "provider": provider,
                "display_name": identity.display_name,
            },
        )
        return LoginResolution(identity=identity, is_new_user=True)

    async def link_for_subject(
        self,
        result: "CallbackResult",
        acting_subject_id: UUID | None,
    ) -> Identity:
        """connect 콜백 결과를 현재 계정에 연결합니다.

        Args:
            result: 검증된 콜백 결과 (action=connect)
            acting_subject_id: 요청을 보낸 인증된 계정 ID

        Returns:
            프로바이더가 연결된 계정

        Raises:
            IdentityMismatchError: state의 계정과 요청 계정이 다름 (쓰기 없음)
            AlreadyLinkedElsewhereError: 프로바이더 계정이 다른 계정에 연결됨
            IdentityNotFoundError: 계정 없음
            IdentityConflictError: 이 프로바이더에 다른 ID가 이미 연결됨
        """
        subject_id = result.subject_id
        if (
            result.action is not OAuthAction.CONNECT
            or subject_id is None
            or subject_id != acting_subject_id
        ):
            logger.warning(
                "OAuth connect subject mismatch",
                extra={
                    "provider": result.provider,
                    "state_subject_id": str(subject_id),
                    "acting_subject_id": str(acting_subject_id),
                },
            )
            raise IdentityMismatchError()

        profile = result.profile
        owner = await self._store.find_by_provider_id(result.provider, profile.provider_user_id)
        if owner is not None:
            if owner.id != subject_id:
                logger.warning(
                    "OAuth connect target linked to another identity",
                    extra={"provider": result.provider, "identity_id": str(subject_id)},
                )
                raise AlreadyLinkedElsewhereError(result.provider)
            return owner

        identity = await self._store.find_by_id(subject_id)
        if identity is None:
            raise IdentityNotFoundError(subject_id)

        identity = await self._link(identity, result.provider, profile)
        logger.info(
            "OAuth provider connected",
            extra={"identity_id": str(identity.id), "provider": result.provider},
        )
        return identity

    async def _link(
        self,
        identity: Identity,
        provider: str,
        profile: "NormalizedProfile",
    ) -> Identity:
        try:
            identity.link_provider(
                provider=provider,
                provider_user_id=profile.provider_user_id,
                provider_email=profile.email,
            )
        except ProviderAlreadyLinkedError as e:
            raise IdentityConflictError(
                f"Identity is already linked to a different {provider} account"
            ) from e

        try:
            return await self._store.link_provider(
                identity.id,
                provider,
                profile.provider_user_id,
                profile.email,
            )
        except IdentityStoreConflictError as e:
            raise IdentityConflictError(e.message) from e

    async def _create(
        self,
        provider: str,
        profile: "NormalizedProfile",
        email: str,
    ) -> Identity:
        display_name = await self._pick_display_name(profile)
        identity = Identity.from_provider_profile(
            display_name=display_name,
            email=email,
            provider=provider,
            provider_user_id=profile.provider_user_id,
            provider_email=profile.email,
            avatar_url=profile.avatar_url,
        )
        try:
            return await self._store.create(identity)
        except IdentityStoreConflictError as e:
            raise IdentityConflictError(e.message) from e

    async def _pick_display_name(self, profile: "NormalizedProfile") -> str:
        base = self._display_names.base_name(
            display_name=profile.display_name,
            first_name=profile.first_name,
            last_name=profile.last_name,
        )
        for candidate in self._display_names.candidates(base):
            if not await self._store.exists_by_display_name(candidate):
                return candidate
        return self._display_names.fallback(base)


def _normalize_email(email: str | None) -> str | None:
    if email is None:
        return None
    email = email.strip().lower()
    return email or None
