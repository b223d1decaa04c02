"""OAuth domain exceptions."""

from apps.social_auth.application.oauth.exceptions.oauth import (
    ExchangeFailedError,
    InvalidOAuthActionError,
    InvalidStateError,
    MissingAuthorizationCodeError,
    OAuthError,
    OAuthTimeoutError,
    ProfileFetchFailedError,
    ProviderDeniedError,
    ProviderMisconfiguredError,
    ProviderNotFoundError,
)
from apps.social_auth.application.oauth.exceptions.state import (
    StateExpiredError,
    StateIssueError,
    StateMismatchError,
    StateNotFoundError,
    StateTokenError,
)

__all__ = [
    "OAuthError",
    "ProviderNotFoundError",
    "ProviderMisconfiguredError",
    "InvalidOAuthActionError",
    "InvalidStateError",
    "ProviderDeniedError",
    "MissingAuthorizationCodeError",
    "ExchangeFailedError",
    "ProfileFetchFailedError",
    "OAuthTimeoutError",
    "StateTokenError",
    "StateNotFoundError",
    "StateExpiredError",
    "StateMismatchError",
    "StateIssueError",
]
