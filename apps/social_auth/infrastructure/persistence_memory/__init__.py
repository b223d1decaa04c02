"""In-Memory Persistence Layer."""

from apps.social_auth.infrastructure.persistence_memory.identity_store_memory import (
    InMemoryIdentityStore,
)
from apps.social_auth.infrastructure.persistence_memory.state_store_memory import (
    InMemoryStateTokenStore,
)

__all__ = ["InMemoryIdentityStore", "InMemoryStateTokenStore"]
