"""HTTP Authentication."""

from apps.social_auth.presentation.http.auth.dependencies import (
    get_current_identity,
    get_optional_identity,
)

__all__ = ["get_current_identity", "get_optional_identity"]
