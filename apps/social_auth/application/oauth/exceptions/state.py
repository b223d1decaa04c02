"""State Token Store Exceptions.

저장소 수준의 세부 실패 사유입니다.
호출자에게는 InvalidStateError 하나로 묶어서 노출합니다.
"""

from apps.social_auth.application.common.exceptions.base import ApplicationError


class StateTokenError(ApplicationError):
    """state 토큰 소비 실패."""

    reason = "invalid"


class StateNotFoundError(StateTokenError):
    """존재하지 않거나 이미 소비된 state."""

    reason = "not_found"

    def __init__(self) -> None:
        super().__init__("State token not found")


class StateExpiredError(StateTokenError):
    """만료된 state."""

    reason = "expired"

    def __init__(self) -> None:
        super().__init__("State token expired")


class StateMismatchError(StateTokenError):
    """저장된 provider/action/subject와 불일치."""

    reason = "mismatch"

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"State token {field} mismatch")


class StateIssueError(ApplicationError):
    """고유한 state 토큰을 할당하지 못함."""

    def __init__(self, attempts: int) -> None:
        self.attempts = attempts
        super().__init__(f"Could not allocate a unique state token in {attempts} attempts")
