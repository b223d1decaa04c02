"""PostgreSQL Adapters."""

from apps.social_auth.infrastructure.persistence_postgres.adapters.identity_store_sqla import (
    SqlaIdentityStore,
)

__all__ = ["SqlaIdentityStore"]
