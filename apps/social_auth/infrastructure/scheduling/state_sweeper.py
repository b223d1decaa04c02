"""OAuth State Sweeper.

만료된 state 항목을 주기적으로 제거하는 백그라운드 작업입니다.
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from apps.social_auth.application.oauth.ports import StateTokenStore

logger = logging.getLogger(__name__)


class StateSweeper:
    """만료 state 정리기.

    issue/consume과 동시에 실행되어도 안전합니다 (저장소가 직렬화).
    """

    def __init__(
        self,
        state_store: "StateTokenStore",
        interval_seconds: float = 300.0,
    ) -> None:
        self._state_store = state_store
        self._interval = interval_seconds
        self._shutdown = False
        self._task: asyncio.Task | None = None

    async def run_once(self) -> int:
        """한 번 정리하고 제거된 항목 수를 반환합니다."""
        removed = await self._state_store.sweep()
        if removed:
            logger.info("oauth_state_swept", extra={"removed": removed})
        return removed

    async def run(self) -> None:
        """Sweeper 메인 루프."""
        logger.info("state_sweeper_started", extra={"interval_seconds": self._interval})

        while not self._shutdown:
            try:
                await self.run_once()
                await asyncio.sleep(self._interval)
            except asyncio.CancelledError:
                logger.info("state_sweeper_cancelled")
                break
            except Exception as e:
                logger.error("state_sweeper_error", extra={"error": str(e)})
                await asyncio.sleep(self._interval)

        logger.info("state_sweeper_stopped")

    def start(self) -> asyncio.Task:
        """백그라운드 태스크로 시작."""
        self._shutdown = False
        self._task = asyncio.create_task(self.run())
        return self._task

    async def stop(self) -> None:
        """루프 종료 후 태스크 정리."""
        self._shutdown = True
        if self._task is None:
            return
        self._task.cancel()
        try:
            await self._task
        except asyncio.CancelledError:
            pass
        self._task = None
