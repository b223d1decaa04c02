"""Redis Persistence Layer."""

from apps.social_auth.infrastructure.persistence_redis.adapters import RedisStateTokenStore
from apps.social_auth.infrastructure.persistence_redis.client import (
    close_oauth_state_redis,
    get_oauth_state_redis,
)

__all__ = ["close_oauth_state_redis", "get_oauth_state_redis", "RedisStateTokenStore"]
