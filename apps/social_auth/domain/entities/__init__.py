"""Domain Entities."""

from apps.social_auth.domain.entities.identity import Identity
from apps.social_auth.domain.entities.provider_link import ProviderLink

__all__ = ["Identity", "ProviderLink"]
