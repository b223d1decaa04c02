"""HTTP Utilities."""

from apps.social_auth.presentation.http.utils.redirect import (
    build_failure_url,
    build_frontend_redirect_response,
    build_success_url,
)

__all__ = ["build_failure_url", "build_frontend_redirect_response", "build_success_url"]
