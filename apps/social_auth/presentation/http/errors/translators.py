"""Error Translators.

애플리케이션/도메인 예외를 (HTTP 상태 코드, 오류 코드)로 변환합니다.
응답에는 이 코드만 노출하고 내부 메시지는 로그에만 남깁니다.
"""

from __future__ import annotations

from apps.social_auth.application.common.exceptions import ApplicationError
from apps.social_auth.application.identity.exceptions import (
    AlreadyLinkedElsewhereError,
    IdentityConflictError,
    IdentityMismatchError,
    IdentityNotFoundError,
    IdentityStoreConflictError,
    IdentityStoreError,
    MissingProfileEmailError,
)
from apps.social_auth.application.oauth.exceptions import (
    ExchangeFailedError,
    InvalidOAuthActionError,
    InvalidStateError,
    MissingAuthorizationCodeError,
    OAuthTimeoutError,
    ProfileFetchFailedError,
    ProviderDeniedError,
    ProviderMisconfiguredError,
    ProviderNotFoundError,
    StateIssueError,
)
from apps.social_auth.application.token.exceptions import CredentialError
from apps.social_auth.domain.exceptions import DomainError

# 순서대로 검사 (하위 클래스가 먼저)
_ERROR_TABLE: list[tuple[type[Exception], int, str]] = [
    (ProviderNotFoundError, 404, "PROVIDER_NOT_FOUND"),
    (ProviderMisconfiguredError, 503, "PROVIDER_MISCONFIGURED"),
    (InvalidOAuthActionError, 400, "INVALID_ACTION"),
    (InvalidStateError, 400, "INVALID_STATE"),
    (StateIssueError, 503, "STATE_UNAVAILABLE"),
    (ProviderDeniedError, 400, "ACCESS_DENIED"),
    (MissingAuthorizationCodeError, 400, "NO_CODE"),
    (ExchangeFailedError, 502, "EXCHANGE_FAILED"),
    (ProfileFetchFailedError, 502, "PROFILE_FETCH_FAILED"),
    (OAuthTimeoutError, 504, "PROVIDER_TIMEOUT"),
    (MissingProfileEmailError, 422, "MISSING_EMAIL"),
    (IdentityMismatchError, 403, "IDENTITY_MISMATCH"),
    (AlreadyLinkedElsewhereError, 409, "ALREADY_LINKED"),
    (IdentityConflictError, 409, "IDENTITY_CONFLICT"),
    (IdentityNotFoundError, 404, "IDENTITY_NOT_FOUND"),
    (IdentityStoreConflictError, 409, "IDENTITY_CONFLICT"),
    (IdentityStoreError, 503, "IDENTITY_STORE_UNAVAILABLE"),
    (CredentialError, 401, "UNAUTHORIZED"),
    (DomainError, 400, "DOMAIN_ERROR"),
    (ApplicationError, 400, "APPLICATION_ERROR"),
]

INTERNAL_ERROR = (500, "SERVER_ERROR")


def translate_error(exc: Exception) -> tuple[int, str]:
    """예외를 (status_code, code) 튜플로 변환.

    Returns:
        (HTTP 상태 코드, 에러 코드)
    """
    for error_cls, status_code, code in _ERROR_TABLE:
        if isinstance(exc, error_cls):
            return status_code, code
    return INTERNAL_ERROR


def redirect_error_code(exc: Exception) -> str:
    """콜백 리다이렉트용 오류 코드 (예: invalid_state, no_code)."""
    return translate_error(exc)[1].lower()
