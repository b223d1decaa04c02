"""Display Name Domain Service.

프로바이더 프로필로부터 표시 이름 후보를 만듭니다.
중복 여부 확인(저장소 조회)은 Application Layer에서 처리합니다.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterator
from uuid import uuid4

MIN_DISPLAY_NAME_LENGTH = 3
MAX_NUMERIC_SUFFIX = 999
RANDOM_SUFFIX_LENGTH = 6
DEFAULT_BASE_NAME = "user"

_DISALLOWED_CHARS = re.compile(r"[^a-z0-9]")


def random_suffix() -> str:
    """6자리 랜덤 hex 접미사."""
    return uuid4().hex[:RANDOM_SUFFIX_LENGTH]


class DisplayNameGenerator:
    """표시 이름 생성기.

    1. display_name → first+last → first → "user" 순으로 원본 선택
    2. 소문자 변환 후 [a-z0-9]만 남김
    3. 3자 미만이면 랜덤 접미사로 채움
    4. 후보: base, base1 ... base999 (이후 fallback은 랜덤 접미사)
    """

    def __init__(self, suffix_factory: Callable[[], str] = random_suffix) -> None:
        self._suffix_factory = suffix_factory

    def base_name(
        self,
        *,
        display_name: str | None = None,
        first_name: str | None = None,
        last_name: str | None = None,
    ) -> str:
        if display_name:
            source = display_name
        elif first_name and last_name:
            source = f"{first_name}{last_name}"
        elif first_name:
            source = first_name
        else:
            source = DEFAULT_BASE_NAME

        cleaned = _DISALLOWED_CHARS.sub("", source.lower())
        if len(cleaned) < MIN_DISPLAY_NAME_LENGTH:
            cleaned = f"{cleaned or DEFAULT_BASE_NAME}{self._suffix_factory()}"
        return cleaned

    def candidates(self, base: str) -> Iterator[str]:
        """충돌 확인 순서대로 후보를 생성합니다 (최대 1 + 999개)."""
        yield base
        for counter in range(1, MAX_NUMERIC_SUFFIX + 1):
            yield f"{base}{counter}"

    def fallback(self, base: str) -> str:
        """숫자 접미사를 모두 소진했을 때 사용할 이름."""
        return f"{base}{self._suffix_factory()}"
