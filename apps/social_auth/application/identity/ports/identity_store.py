"""IdentityStore Port.

로컬 계정 저장소 인터페이스입니다.
조회 결과 없음은 None, 저장소 오류는 IdentityStoreError로 구분합니다.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol
from uuid import UUID

if TYPE_CHECKING:
    from apps.social_auth.domain.entities import Identity


class IdentityStore(Protocol):
    """계정 저장소.

    구현체:
        - InMemoryIdentityStore (infrastructure/persistence_memory/)
        - SqlaIdentityStore (infrastructure/persistence_postgres/)
    """

    async def find_by_provider_id(
        self, provider: str, provider_user_id: str
    ) -> "Identity | None":
        """프로바이더 식별자로 계정 조회."""
        ...

    async def find_by_email(self, email: str) -> "Identity | None":
        """이메일로 계정 조회."""
        ...

    async def find_by_id(self, identity_id: UUID) -> "Identity | None":
        """ID로 계정 조회."""
        ...

    async def create(self, identity: "Identity") -> "Identity":
        """새 계정 저장.

        Raises:
            IdentityStoreConflictError: display_name/email/provider ID 중복
        """
        ...

    async def link_provider(
        self,
        identity_id: UUID,
        provider: str,
        provider_user_id: str,
        provider_email: str | None = None,
    ) -> "Identity":
        """계정에 프로바이더 연결 후 verified 처리.

        Raises:
            IdentityStoreConflictError: provider ID가 이미 다른 계정에 연결됨
        """
        ...

    async def exists_by_display_name(self, display_name: str) -> bool:
        """display_name 사용 여부."""
        ...
