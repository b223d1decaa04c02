"""OAuth Exceptions."""

from __future__ import annotations

from apps.social_auth.application.common.exceptions.base import ApplicationError


class OAuthError(ApplicationError):
    """OAuth 핸드셰이크 오류 베이스."""


class ProviderNotFoundError(OAuthError):
    """등록되지 않은 프로바이더."""

    def __init__(self, provider: str) -> None:
        self.provider = provider
        super().__init__(f"OAuth provider '{provider}' not found")


class ProviderMisconfiguredError(OAuthError):
    """프로바이더 정적 설정 누락.

    설정을 고치기 전에는 재시도해도 같은 결과입니다.
    """

    def __init__(self, provider: str, missing: list[str]) -> None:
        self.provider = provider
        self.missing = missing
        super().__init__(
            f"OAuth provider '{provider}' is misconfigured: missing {', '.join(missing)}"
        )


class InvalidOAuthActionError(OAuthError):
    """action과 subject 조합이 잘못됨 (connect는 subject 필수, login은 subject 불가)."""


class InvalidStateError(OAuthError):
    """OAuth 상태 검증 실패.

    NotFound/Expired/Mismatch를 구분하지 않습니다.
    """

    def __init__(self, reason: str = "Invalid or expired state") -> None:
        super().__init__(reason)


class ProviderDeniedError(OAuthError):
    """사용자가 프로바이더 동의 화면에서 거부함."""

    def __init__(self, provider: str, error: str, description: str | None = None) -> None:
        self.provider = provider
        self.error = error
        self.description = description
        super().__init__(f"OAuth provider '{provider}' denied authorization: {error}")


class MissingAuthorizationCodeError(OAuthError):
    """콜백에 인증 코드가 없음."""

    def __init__(self, provider: str) -> None:
        self.provider = provider
        super().__init__(f"Missing authorization code from '{provider}'")


class ExchangeFailedError(OAuthError):
    """인증 코드 교환 실패.

    status_code/body는 로깅용이며 사용자에게 노출하지 않습니다.
    """

    def __init__(
        self,
        provider: str,
        reason: str,
        *,
        status_code: int | None = None,
        body: str | None = None,
    ) -> None:
        self.provider = provider
        self.status_code = status_code
        self.body = body
        super().__init__(f"OAuth code exchange failed ({provider}): {reason}")


class ProfileFetchFailedError(OAuthError):
    """프로필 조회 실패."""

    def __init__(
        self,
        provider: str,
        reason: str,
        *,
        status_code: int | None = None,
        body: str | None = None,
    ) -> None:
        self.provider = provider
        self.status_code = status_code
        self.body = body
        super().__init__(f"OAuth profile fetch failed ({provider}): {reason}")


class OAuthTimeoutError(OAuthError):
    """프로바이더 호출이 제한 시간을 넘김."""

    def __init__(self, provider: str, operation: str) -> None:
        self.provider = provider
        self.operation = operation
        super().__init__(f"OAuth provider '{provider}' timed out during {operation}")
