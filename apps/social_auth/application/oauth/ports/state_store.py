"""StateTokenStore Port.

OAuth 핸드셰이크의 state 토큰 관리를 위한 인터페이스입니다.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Protocol
from uuid import UUID

from apps.social_auth.domain.enums import OAuthAction


@dataclass(frozen=True)
class StateEntry:
    """진행 중인 핸드셰이크 하나의 상태.

    subject_id는 action == CONNECT일 때만 존재합니다.
    """

    token: str
    provider: str
    action: OAuthAction
    created_at: datetime
    expires_at: datetime
    subject_id: UUID | None = None

    def __post_init__(self) -> None:
        if (self.action == OAuthAction.CONNECT) != (self.subject_id is not None):
            raise ValueError("subject_id must be set if and only if action is 'connect'")

    def is_expired(self, now: datetime) -> bool:
        """now가 expires_at을 지났는지 여부 (경계값은 유효)."""
        return now > self.expires_at

    def mismatched_field(
        self,
        provider: str,
        action: OAuthAction | None = None,
        subject_id: UUID | None = None,
    ) -> str | None:
        """호출자가 지정한 값과 다른 첫 필드명 (None 인자는 비교하지 않음)."""
        if provider != self.provider:
            return "provider"
        if action is not None and OAuthAction(action) is not self.action:
            return "action"
        if subject_id is not None and subject_id != self.subject_id:
            return "subject_id"
        return None


class StateTokenStore(Protocol):
    """OAuth state 저장소 인터페이스.

    구현체:
        - InMemoryStateTokenStore (infrastructure/persistence_memory/)
        - RedisStateTokenStore (infrastructure/persistence_redis/)
    """

    async def issue(
        self,
        provider: str,
        action: OAuthAction,
        subject_id: UUID | None = None,
    ) -> str:
        """새 state 토큰 발급.

        Returns:
            추측 불가능한 일회용 토큰
        """
        ...

    async def consume(
        self,
        token: str,
        *,
        provider: str,
        action: OAuthAction | None = None,
        subject_id: UUID | None = None,
    ) -> StateEntry:
        """state 조회 및 삭제 (일회용).

        action/subject_id가 None이면 해당 항목은 비교하지 않습니다.

        Raises:
            StateNotFoundError: 없거나 이미 소비됨
            StateExpiredError: 만료됨 (항목은 삭제됨)
            StateMismatchError: provider/action/subject 불일치
        """
        ...

    async def sweep(self, now: datetime | None = None) -> int:
        """expires_at < now 인 항목 제거.

        Returns:
            제거된 항목 수
        """
        ...
