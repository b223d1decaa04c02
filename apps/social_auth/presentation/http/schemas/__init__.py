"""HTTP Schemas."""

from apps.social_auth.presentation.http.schemas.auth import (
    AuthorizationData,
    AuthorizationSuccessResponse,
    ErrorResponse,
    HealthResponse,
    ProvidersData,
    ProvidersSuccessResponse,
    SuccessResponse,
)

__all__ = [
    "SuccessResponse",
    "AuthorizationData",
    "AuthorizationSuccessResponse",
    "ProvidersData",
    "ProvidersSuccessResponse",
    "ErrorResponse",
    "HealthResponse",
]
