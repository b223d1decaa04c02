"""Redis Client Provider.

OAuth state 저장소 전용 클라이언트입니다.
GETDEL을 사용하므로 Redis 6.2 이상이 필요합니다.

일시적 장애(ConnectionError, TimeoutError)는 지수 백오프로 최대 3회 재시도하며,
그래도 실패하면 redis 예외가 그대로 전파됩니다.
"""

from __future__ import annotations

from functools import lru_cache
from typing import TYPE_CHECKING

from redis.asyncio.retry import Retry
from redis.backoff import ExponentialBackoff
from redis.exceptions import ConnectionError, TimeoutError

if TYPE_CHECKING:
    import redis.asyncio as aioredis

HEALTH_CHECK_INTERVAL = 30  # seconds
MAX_CONNECTIONS = 50
MAX_RETRIES = 3
DEFAULT_SOCKET_TIMEOUT = 5.0  # seconds


def build_async_client(
    redis_url: str,
    *,
    socket_timeout: float = DEFAULT_SOCKET_TIMEOUT,
    max_connections: int = MAX_CONNECTIONS,
) -> "aioredis.Redis":
    """비동기 Redis 클라이언트 생성.

    state 값은 JSON 문자열이므로 decode_responses=True로 받습니다.
    """
    import redis.asyncio as aioredis

    return aioredis.from_url(
        redis_url,
        encoding="utf-8",
        decode_responses=True,
        health_check_interval=HEALTH_CHECK_INTERVAL,
        socket_keepalive=True,
        socket_connect_timeout=socket_timeout,
        socket_timeout=socket_timeout,
        max_connections=max_connections,
        retry=Retry(ExponentialBackoff(), retries=MAX_RETRIES),
        retry_on_error=[ConnectionError, TimeoutError],
    )


@lru_cache
def get_oauth_state_redis() -> "aioredis.Redis":
    """OAuth 상태 저장용 Redis 클라이언트 (프로세스 단위 싱글톤).

    환경변수:
        - AUTH_REDIS_OAUTH_STATE_URL (default: redis://localhost:6379/3)
    """
    from apps.social_auth.setup.config import get_settings

    return build_async_client(get_settings().redis_oauth_state_url)


async def close_oauth_state_redis() -> None:
    """종료 시 연결 풀 정리 (생성된 적이 없으면 아무것도 하지 않음)."""
    if get_oauth_state_redis.cache_info().currsize == 0:
        return
    await get_oauth_state_redis().aclose()
    get_oauth_state_redis.cache_clear()
