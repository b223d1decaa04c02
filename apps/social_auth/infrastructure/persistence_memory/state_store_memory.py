"""In-Memory State Store.

StateTokenStore 포트의 단일 프로세스 구현체입니다.
"""

from __future__ import annotations

import asyncio
import logging
import secrets
from collections.abc import Callable
from datetime import datetime, timedelta, timezone
from uuid import UUID

from apps.social_auth.application.oauth.exceptions import (
    StateExpiredError,
    StateMismatchError,
    StateNotFoundError,
)
from apps.social_auth.application.oauth.ports import StateEntry
from apps.social_auth.domain.enums import OAuthAction

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def generate_state_token() -> str:
    """256비트 URL-safe 랜덤 토큰."""
    return secrets.token_urlsafe(32)


class InMemoryStateTokenStore:
    """메모리 기반 OAuth 상태 저장소.

    StateTokenStore 구현체. 모든 변경은 asyncio.Lock 안에서 수행합니다.
    """

    def __init__(
        self,
        ttl_seconds: int = 600,
        *,
        clock: Callable[[], datetime] = utc_now,
        token_factory: Callable[[], str] = generate_state_token,
    ) -> None:
        self._ttl = timedelta(seconds=ttl_seconds)
        self._clock = clock
        self._token_factory = token_factory
        self._entries: dict[str, StateEntry] = {}
        self._lock = asyncio.Lock()

    def __len__(self) -> int:
        return len(self._entries)

    async def issue(
        self,
        provider: str,
        action: OAuthAction,
        subject_id: UUID | None = None,
    ) -> str:
        async with self._lock:
            token = self._token_factory()
            while token in self._entries:
                token = self._token_factory()

            now = self._clock()
            self._entries[token] = StateEntry(
                token=token,
                provider=provider,
                action=OAuthAction(action),
                created_at=now,
                expires_at=now + self._ttl,
                subject_id=subject_id,
            )
        return token

    async def consume(
        self,
        token: str,
        *,
        provider: str,
        action: OAuthAction | None = None,
        subject_id: UUID | None = None,
    ) -> StateEntry:
        # 어떤 결과든 항목은 제거 (만료/불일치 토큰도 재사용 불가)
        async with self._lock:
            entry = self._entries.pop(token, None)

        if entry is None:
            raise StateNotFoundError()
        if entry.is_expired(self._clock()):
            raise StateExpiredError()

        field = entry.mismatched_field(provider, action, subject_id)
        if field is not None:
            raise StateMismatchError(field)
        return entry

    async def sweep(self, now: datetime | None = None) -> int:
        now = now or self._clock()

        async with self._lock:
            snapshot = list(self._entries.items())

        expired = [(token, entry) for token, entry in snapshot if entry.expires_at < now]
        if not expired:
            return 0

        removed = 0
        async with self._lock:
            for token, entry in expired:
                if self._entries.get(token) is entry:
                    del self._entries[token]
                    removed += 1

        logger.debug("Swept expired OAuth states", extra={"removed": removed})
        return removed
