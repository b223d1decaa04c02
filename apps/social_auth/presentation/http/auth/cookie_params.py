"""Cookie Parameters.

인증 쿠키 설정을 관리합니다.
"""

from __future__ import annotations

import time
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from fastapi import Response

    from apps.social_auth.setup.config import Settings

# Cookie names (프론트엔드와 일치해야 함)
ACCESS_COOKIE_NAME = "s_access"

# Cookie settings
COOKIE_PATH = "/"
COOKIE_SAMESITE = "lax"


def get_cookie_params(settings: "Settings") -> dict:
    """쿠키 공통 파라미터."""
    params = {
        "path": COOKIE_PATH,
        "httponly": True,
        "secure": settings.cookie_secure,
        "samesite": COOKIE_SAMESITE,
    }
    if settings.cookie_domain:
        params["domain"] = settings.cookie_domain
    return params


def set_credential_cookie(
    response: "Response",
    *,
    credential: str,
    expires_at: int,
    settings: "Settings",
) -> None:
    """자격 증명 쿠키 설정."""
    max_age = max(expires_at - int(time.time()), 1)
    response.set_cookie(
        key=ACCESS_COOKIE_NAME,
        value=credential,
        max_age=max_age,
        **get_cookie_params(settings),
    )
