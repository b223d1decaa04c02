"""ProviderLink Entity.

ORM과 분리된 순수 도메인 엔티티입니다.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class ProviderLink:
    """외부 프로바이더 계정 연결.

    Attributes:
        provider: OAuth 프로바이더 (google, kakao)
        provider_user_id: 프로바이더에서의 사용자 ID
        provider_email: 프로바이더 계정 이메일 (선택)
        linked_at: 연결 시각
    """

    provider: str
    provider_user_id: str
    linked_at: datetime
    provider_email: str | None = None
