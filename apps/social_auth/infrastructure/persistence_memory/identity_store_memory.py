"""In-Memory Identity Store.

IdentityStore 포트의 구현체입니다 (로컬 실행, 테스트용).
"""

from __future__ import annotations

import asyncio
import copy
from datetime import datetime, timezone
from uuid import UUID

from apps.social_auth.application.identity.exceptions import (
    IdentityStoreConflictError,
    IdentityStoreError,
)
from apps.social_auth.domain.entities import Identity, ProviderLink


class InMemoryIdentityStore:
    """메모리 기반 계정 저장소.

    IdentityStore 구현체.
    DB와 같은 유일성 제약을 쓰기 시점에 검사하고, 조회 결과는 복사본을 반환합니다.
    """

    def __init__(self) -> None:
        self._identities: dict[UUID, Identity] = {}
        self._by_email: dict[str, UUID] = {}
        self._by_display_name: dict[str, UUID] = {}
        self._by_provider: dict[tuple[str, str], UUID] = {}
        self._lock = asyncio.Lock()

    def __len__(self) -> int:
        return len(self._identities)

    async def find_by_provider_id(self, provider: str, provider_user_id: str) -> Identity | None:
        return self._get(self._by_provider.get((provider, provider_user_id)))

    async def find_by_email(self, email: str) -> Identity | None:
        return self._get(self._by_email.get(email))

    async def find_by_id(self, identity_id: UUID) -> Identity | None:
        return self._get(identity_id)

    async def exists_by_display_name(self, display_name: str) -> bool:
        return display_name in self._by_display_name

    async def create(self, identity: Identity) -> Identity:
        async with self._lock:
            if identity.id in self._identities:
                raise IdentityStoreConflictError("Identity id already exists")
            if identity.display_name in self._by_display_name:
                raise IdentityStoreConflictError("Display name already taken")
            if identity.email in self._by_email:
                raise IdentityStoreConflictError("Email already registered")
            for link in identity.provider_links.values():
                if (link.provider, link.provider_user_id) in self._by_provider:
                    raise IdentityStoreConflictError(
                        f"{link.provider} account already linked"
                    )

            stored = copy.deepcopy(identity)
            self._identities[stored.id] = stored
            self._by_email[stored.email] = stored.id
            self._by_display_name[stored.display_name] = stored.id
            for link in stored.provider_links.values():
                self._by_provider[(link.provider, link.provider_user_id)] = stored.id
            return copy.deepcopy(stored)

    async def link_provider(
        self,
        identity_id: UUID,
        provider: str,
        provider_user_id: str,
        provider_email: str | None = None,
    ) -> Identity:
        async with self._lock:
            stored = self._identities.get(identity_id)
            if stored is None:
                raise IdentityStoreError(f"Identity not found: {identity_id}")

            owner = self._by_provider.get((provider, provider_user_id))
            if owner is not None and owner != identity_id:
                raise IdentityStoreConflictError(f"{provider} account already linked")

            existing = stored.provider_links.get(provider)
            if existing is not None and existing.provider_user_id != provider_user_id:
                raise IdentityStoreConflictError(
                    f"Identity already linked to a different {provider} account"
                )

            if existing is None:
                now = datetime.now(timezone.utc)
                stored.provider_links[provider] = ProviderLink(
                    provider=provider,
                    provider_user_id=provider_user_id,
                    provider_email=provider_email,
                    linked_at=now,
                )
                stored.updated_at = now
                self._by_provider[(provider, provider_user_id)] = identity_id
            stored.verified = True
            return copy.deepcopy(stored)

    def _get(self, identity_id: UUID | None) -> Identity | None:
        if identity_id is None:
            return None
        stored = self._identities.get(identity_id)
        return copy.deepcopy(stored) if stored is not None else None
