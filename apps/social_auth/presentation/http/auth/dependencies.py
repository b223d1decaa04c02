"""Auth Dependencies.

FastAPI Depends용 인증 의존성입니다.
Authorization: Bearer 헤더를 우선하고, 없으면 s_access 쿠키를 사용합니다.
"""

from __future__ import annotations

from fastapi import Cookie, Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from apps.social_auth.application.token.exceptions import CredentialError
from apps.social_auth.application.token.ports import CredentialClaims, CredentialIssuer
from apps.social_auth.presentation.http.auth.cookie_params import ACCESS_COOKIE_NAME
from apps.social_auth.setup.dependencies import get_credential_issuer

_bearer = HTTPBearer(auto_error=False)


def _extract_credential(
    authorization: HTTPAuthorizationCredentials | None,
    cookie_value: str | None,
) -> str | None:
    if authorization is not None and authorization.credentials:
        return authorization.credentials
    return cookie_value or None


async def get_current_identity(
    authorization: HTTPAuthorizationCredentials | None = Depends(_bearer),
    access_cookie: str | None = Cookie(None, alias=ACCESS_COOKIE_NAME),
    credential_issuer: CredentialIssuer = Depends(get_credential_issuer),
) -> CredentialClaims:
    """현재 인증된 계정 조회.

    Raises:
        HTTPException: 인증 실패 (401)
    """
    credential = _extract_credential(authorization, access_cookie)
    if not credential:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
        )

    try:
        return credential_issuer.validate(credential)
    except CredentialError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=e.message,
        ) from e


async def get_optional_identity(
    authorization: HTTPAuthorizationCredentials | None = Depends(_bearer),
    access_cookie: str | None = Cookie(None, alias=ACCESS_COOKIE_NAME),
    credential_issuer: CredentialIssuer = Depends(get_credential_issuer),
) -> CredentialClaims | None:
    """현재 계정 조회 (선택적).

    인증되지 않았거나 자격 증명이 유효하지 않으면 None 반환.
    """
    credential = _extract_credential(authorization, access_cookie)
    if not credential:
        return None

    try:
        return credential_issuer.validate(credential)
    except CredentialError:
        return None
