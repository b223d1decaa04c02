"""OAuth DTOs."""

from apps.social_auth.application.oauth.dto.oauth import (
    CallbackResult,
    OAuthAuthorizeRequest,
    OAuthAuthorizeResponse,
    OAuthCallbackRequest,
    OAuthCallbackResponse,
)

__all__ = [
    "CallbackResult",
    "OAuthAuthorizeRequest",
    "OAuthAuthorizeResponse",
    "OAuthCallbackRequest",
    "OAuthCallbackResponse",
]
