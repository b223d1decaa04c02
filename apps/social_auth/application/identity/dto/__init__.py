"""Identity DTOs."""

from apps.social_auth.application.identity.dto.identity import LoginResolution

__all__ = ["LoginResolution"]
