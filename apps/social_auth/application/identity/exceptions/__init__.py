"""Identity domain exceptions."""

from apps.social_auth.application.identity.exceptions.gateway import (
    IdentityStoreConflictError,
    IdentityStoreError,
)
from apps.social_auth.application.identity.exceptions.identity import (
    AlreadyLinkedElsewhereError,
    IdentityConflictError,
    IdentityLinkingError,
    IdentityMismatchError,
    IdentityNotFoundError,
    MissingProfileEmailError,
)

__all__ = [
    "IdentityStoreError",
    "IdentityStoreConflictError",
    "IdentityLinkingError",
    "IdentityConflictError",
    "IdentityMismatchError",
    "AlreadyLinkedElsewhereError",
    "IdentityNotFoundError",
    "MissingProfileEmailError",
]
