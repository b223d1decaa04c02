"""Table Mappings."""

from apps.social_auth.infrastructure.persistence_postgres.mappings.identity import (
    SCHEMA,
    identities_table,
    identity_provider_links_table,
)

__all__ = ["SCHEMA", "identities_table", "identity_provider_links_table"]
