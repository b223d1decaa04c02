"""Identity DTOs."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from apps.social_auth.domain.entities import Identity


@dataclass(frozen=True, slots=True)
class LoginResolution:
    """로그인 콜백의 계정 식별 결과.

    Attributes:
        identity: 로그인할 계정
        is_new_user: 이번 콜백에서 새로 생성되었는지
        linked: 이메일 일치로 기존 계정에 프로바이더가 연결되었는지
    """

    identity: "Identity"
    is_new_user: bool = False
    linked: bool = False
