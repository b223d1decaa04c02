"""StateSweeper 단위 테스트."""

import asyncio
from unittest.mock import AsyncMock

import pytest

from apps.social_auth.domain.enums import OAuthAction
from apps.social_auth.infrastructure.persistence_memory import InMemoryStateTokenStore
from apps.social_auth.infrastructure.scheduling import StateSweeper


class TestStateSweeper:
    """StateSweeper 테스트."""

    @pytest.mark.asyncio
    async def test_run_once_removes_expired(
        self, state_store: InMemoryStateTokenStore, clock
    ) -> None:
        # Arrange
        await state_store.issue("google", OAuthAction.LOGIN)
        clock.advance(601)
        await state_store.issue("google", OAuthAction.LOGIN)
        sweeper = StateSweeper(state_store, interval_seconds=60)

        # Act
        removed = await sweeper.run_once()

        # Assert
        assert removed == 1
        assert len(state_store) == 1

    @pytest.mark.asyncio
    async def test_loop_survives_errors(self) -> None:
        """sweep 실패 후에도 루프 유지."""
        # Arrange
        store = AsyncMock()
        store.sweep.side_effect = [RuntimeError("boom"), 0, 0, 0, 0, 0, 0, 0, 0, 0]
        sweeper = StateSweeper(store, interval_seconds=0.01)

        # Act
        sweeper.start()
        for _ in range(100):
            if store.sweep.await_count >= 2:
                break
            await asyncio.sleep(0.01)
        await sweeper.stop()

        # Assert
        assert store.sweep.await_count >= 2

    @pytest.mark.asyncio
    async def test_stop_cancels_task(self) -> None:
        store = AsyncMock()
        store.sweep.return_value = 0
        sweeper = StateSweeper(store, interval_seconds=3600)

        task = sweeper.start()
        await asyncio.sleep(0)
        await sweeper.stop()

        assert task.done()

    @pytest.mark.asyncio
    async def test_stop_without_start(self) -> None:
        await StateSweeper(AsyncMock()).stop()
