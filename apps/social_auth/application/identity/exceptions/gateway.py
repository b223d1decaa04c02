"""Identity Store Exceptions."""

from apps.social_auth.application.common.exceptions.base import ApplicationError


class IdentityStoreError(ApplicationError):
    """계정 저장소 통신/처리 실패."""

    def __init__(self, reason: str = "Identity store unavailable") -> None:
        super().__init__(reason)


class IdentityStoreConflictError(IdentityStoreError):
    """쓰기 시점의 유일성 제약 위반 (display_name, email, provider ID)."""

    def __init__(self, reason: str = "Identity uniqueness constraint violated") -> None:
        super().__init__(reason)
