"""Redis State Store.

StateTokenStore 포트의 구현체입니다.
"""

from __future__ import annotations

import json
from collections.abc import Callable
from datetime import datetime, timedelta
from typing import TYPE_CHECKING
from uuid import UUID

from apps.social_auth.application.oauth.exceptions import (
    StateExpiredError,
    StateIssueError,
    StateMismatchError,
    StateNotFoundError,
)
from apps.social_auth.application.oauth.ports import StateEntry
from apps.social_auth.domain.enums import OAuthAction
from apps.social_auth.infrastructure.persistence_memory.state_store_memory import (
    generate_state_token,
    utc_now,
)
from apps.social_auth.infrastructure.persistence_redis.constants import (
    MAX_STATE_ISSUE_ATTEMPTS,
    STATE_EXPIRY_GRACE_SECONDS,
    STATE_KEY_PREFIX,
)

if TYPE_CHECKING:
    import redis.asyncio as aioredis


class RedisStateTokenStore:
    """Redis 기반 OAuth 상태 저장소.

    StateTokenStore 구현체.
    발급은 SET NX, 소비는 GETDEL로 원자적으로 처리합니다.
    """

    def __init__(
        self,
        redis: "aioredis.Redis",
        ttl_seconds: int = 600,
        *,
        grace_seconds: int = STATE_EXPIRY_GRACE_SECONDS,
        clock: Callable[[], datetime] = utc_now,
        token_factory: Callable[[], str] = generate_state_token,
    ) -> None:
        self._redis = redis
        self._ttl = timedelta(seconds=ttl_seconds)
        self._key_ttl_seconds = ttl_seconds + grace_seconds
        self._clock = clock
        self._token_factory = token_factory

    async def issue(
        self,
        provider: str,
        action: OAuthAction,
        subject_id: UUID | None = None,
    ) -> str:
        for _ in range(MAX_STATE_ISSUE_ATTEMPTS):
            now = self._clock()
            entry = StateEntry(
                token=self._token_factory(),
                provider=provider,
                action=OAuthAction(action),
                created_at=now,
                expires_at=now + self._ttl,
                subject_id=subject_id,
            )
            stored = await self._redis.set(
                f"{STATE_KEY_PREFIX}{entry.token}",
                _serialize(entry),
                ex=self._key_ttl_seconds,
                nx=True,
            )
            if stored:
                return entry.token
        raise StateIssueError(MAX_STATE_ISSUE_ATTEMPTS)

    async def consume(
        self,
        token: str,
        *,
        provider: str,
        action: OAuthAction | None = None,
        subject_id: UUID | None = None,
    ) -> StateEntry:
        value = await self._redis.getdel(f"{STATE_KEY_PREFIX}{token}")
        if value is None:
            raise StateNotFoundError()

        entry = _deserialize(token, value)
        if entry.is_expired(self._clock()):
            raise StateExpiredError()

        field = entry.mismatched_field(provider, action, subject_id)
        if field is not None:
            raise StateMismatchError(field)
        return entry

    async def sweep(self, now: datetime | None = None) -> int:
        """키 만료(EX)가 정리하므로 제거할 항목이 없습니다."""
        return 0


def _serialize(entry: StateEntry) -> str:
    return json.dumps(
        {
            "provider": entry.provider,
            "action": entry.action.value,
            "subject_id": str(entry.subject_id) if entry.subject_id else None,
            "created_at": entry.created_at.isoformat(),
            "expires_at": entry.expires_at.isoformat(),
        }
    )


def _deserialize(token: str, value: str | bytes) -> StateEntry:
    data = json.loads(value)
    subject_id = data.get("subject_id")
    return StateEntry(
        token=token,
        provider=data["provider"],
        action=OAuthAction(data["action"]),
        created_at=datetime.fromisoformat(data["created_at"]),
        expires_at=datetime.fromisoformat(data["expires_at"]),
        subject_id=UUID(subject_id) if subject_id else None,
    )
