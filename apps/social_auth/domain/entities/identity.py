"""Identity Entity.

ORM과 분리된 순수 도메인 엔티티입니다.
SQLAlchemy 매핑은 infrastructure/persistence_postgres/mappings/에서 정의합니다.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import UUID, uuid4

from apps.social_auth.domain.entities.provider_link import ProviderLink
from apps.social_auth.domain.exceptions.identity import ProviderAlreadyLinkedError


@dataclass
class Identity:
    """로컬 계정 엔티티.

    Attributes:
        id: 계정 고유 식별자
        display_name: 표시 이름 (유일)
        email: 이메일 (유일)
        provider_links: 프로바이더별 연결 정보
        avatar_url: 프로필 이미지 URL (선택)
        verified: 이메일 검증 여부
        active: 활성 여부
        created_at: 생성 시각
        updated_at: 수정 시각
    """

    id: UUID
    display_name: str
    email: str
    created_at: datetime
    updated_at: datetime
    provider_links: dict[str, ProviderLink] = field(default_factory=dict)
    avatar_url: str | None = None
    verified: bool = False
    active: bool = True

    @classmethod
    def from_provider_profile(
        cls,
        *,
        display_name: str,
        email: str,
        provider: str,
        provider_user_id: str,
        provider_email: str | None = None,
        avatar_url: str | None = None,
    ) -> "Identity":
        """프로바이더 인증 계정 생성.

        프로바이더가 이메일을 보증하므로 별도 검증 없이 verified로 생성합니다.
        """
        now = datetime.now(timezone.utc)
        link = ProviderLink(
            provider=provider,
            provider_user_id=provider_user_id,
            provider_email=provider_email,
            linked_at=now,
        )
        return cls(
            id=uuid4(),
            display_name=display_name,
            email=email,
            created_at=now,
            updated_at=now,
            provider_links={provider: link},
            avatar_url=avatar_url,
            verified=True,
            active=True,
        )

    def linked_provider_user_id(self, provider: str) -> str | None:
        """프로바이더에 연결된 사용자 ID (없으면 None)."""
        link = self.provider_links.get(provider)
        return link.provider_user_id if link else None

    def link_provider(
        self,
        *,
        provider: str,
        provider_user_id: str,
        provider_email: str | None = None,
    ) -> ProviderLink:
        """프로바이더 계정 연결.

        같은 프로바이더 ID로 재연결하면 기존 연결을 그대로 반환합니다.

        Raises:
            ProviderAlreadyLinkedError: 다른 프로바이더 ID가 이미 연결된 경우
        """
        existing = self.provider_links.get(provider)
        if existing is not None:
            if existing.provider_user_id != provider_user_id:
                raise ProviderAlreadyLinkedError(provider, existing.provider_user_id)
            return existing

        now = datetime.now(timezone.utc)
        link = ProviderLink(
            provider=provider,
            provider_user_id=provider_user_id,
            provider_email=provider_email,
            linked_at=now,
        )
        self.provider_links[provider] = link
        self.verified = True
        self.updated_at = now
        return link

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Identity):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return f"Identity(id={self.id}, display_name={self.display_name!r})"
