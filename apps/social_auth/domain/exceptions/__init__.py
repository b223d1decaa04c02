"""Domain Exceptions."""

from apps.social_auth.domain.exceptions.base import DomainError
from apps.social_auth.domain.exceptions.identity import ProviderAlreadyLinkedError

__all__ = [
    "DomainError",
    "ProviderAlreadyLinkedError",
]
