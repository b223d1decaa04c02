"""HTTP Error Handling."""

from apps.social_auth.presentation.http.errors.handlers import register_exception_handlers
from apps.social_auth.presentation.http.errors.translators import (
    redirect_error_code,
    translate_error,
)

__all__ = ["register_exception_handlers", "redirect_error_code", "translate_error"]
