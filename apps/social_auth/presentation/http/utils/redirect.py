"""Frontend Redirect Utilities.

OAuth 콜백 후 프론트엔드로 리다이렉트하기 위한 유틸리티 함수들입니다.
리다이렉트에는 상태 코드만 담고 자격 증명/내부 메시지는 넣지 않습니다.
"""

from __future__ import annotations

from urllib.parse import urlencode

from fastapi.responses import RedirectResponse

from apps.social_auth.domain.enums import OAuthAction

LOGIN_PAGE = "/login"
DASHBOARD_PAGE = "/dashboard"
SETTINGS_PAGE = "/settings"

STATUS_SUCCESS = "success"
STATUS_ERROR = "error"


def build_frontend_url(frontend_url: str, page: str, params: dict[str, str | None]) -> str:
    """프론트엔드 URL 생성 (None 파라미터는 제외).

    예시:
        build_frontend_url("https://app.example.com/", "/login", {"error": "no_code"})
        → "https://app.example.com/login?error=no_code"
    """
    base = frontend_url.rstrip("/")
    query = urlencode({key: value for key, value in params.items() if value is not None})
    return f"{base}{page}?{query}" if query else f"{base}{page}"


def build_success_url(frontend_url: str, *, provider: str, action: OAuthAction) -> str:
    """성공 리다이렉트 URL (login → dashboard, connect → settings)."""
    page = SETTINGS_PAGE if action is OAuthAction.CONNECT else DASHBOARD_PAGE
    return build_frontend_url(
        frontend_url,
        page,
        {"status": STATUS_SUCCESS, "provider": provider, "action": action.value},
    )


def build_failure_url(
    frontend_url: str,
    *,
    provider: str,
    error_code: str,
    action: OAuthAction | None = None,
) -> str:
    """실패 리다이렉트 URL (connect → settings, 그 외 → login)."""
    page = SETTINGS_PAGE if action is OAuthAction.CONNECT else LOGIN_PAGE
    return build_frontend_url(
        frontend_url,
        page,
        {
            "status": STATUS_ERROR,
            "error": error_code,
            "provider": provider,
            "action": action.value if action else None,
        },
    )


def build_frontend_redirect_response(redirect_url: str) -> RedirectResponse:
    """프론트엔드 리다이렉트 Response 생성 (302)."""
    return RedirectResponse(url=redirect_url, status_code=302)
