"""Redis Adapters."""

from apps.social_auth.infrastructure.persistence_redis.adapters.state_store_redis import (
    RedisStateTokenStore,
)

__all__ = ["RedisStateTokenStore"]
