"""Callback Controller.

OAuth 콜백 처리 엔드포인트입니다.
성공/실패 모두 프론트엔드로 302 리다이렉트합니다.
"""

import logging

from fastapi import APIRouter, Depends, Query
from fastapi.responses import RedirectResponse

from apps.social_auth.application.common.exceptions import ApplicationError
from apps.social_auth.application.identity.exceptions import (
    AlreadyLinkedElsewhereError,
    IdentityMismatchError,
    IdentityNotFoundError,
)
from apps.social_auth.application.oauth.commands import OAuthCallbackInteractor
from apps.social_auth.application.oauth.dto import OAuthCallbackRequest
from apps.social_auth.application.token.ports import CredentialClaims
from apps.social_auth.domain.enums import OAuthAction
from apps.social_auth.presentation.http.auth import get_optional_identity
from apps.social_auth.presentation.http.auth.cookie_params import set_credential_cookie
from apps.social_auth.presentation.http.errors import redirect_error_code
from apps.social_auth.presentation.http.utils import (
    build_failure_url,
    build_frontend_redirect_response,
    build_success_url,
)
from apps.social_auth.setup.config import Settings, get_settings
from apps.social_auth.setup.dependencies import get_oauth_callback_interactor

logger = logging.getLogger(__name__)

router = APIRouter()

# connect 흐름에서만 발생하는 오류 (settings 페이지로 복귀)
_CONNECT_ONLY_ERRORS = (IdentityMismatchError, AlreadyLinkedElsewhereError, IdentityNotFoundError)


@router.get(
    "/{provider}/callback",
    response_class=RedirectResponse,
    status_code=302,
    summary="OAuth 콜백 처리",
)
async def callback(
    provider: str,
    code: str | None = Query(None, description="OAuth 인증 코드"),
    state: str | None = Query(None, description="상태 값"),
    error: str | None = Query(None, description="프로바이더 오류 코드"),
    error_description: str | None = Query(None, description="프로바이더 오류 설명"),
    identity: CredentialClaims | None = Depends(get_optional_identity),
    interactor: OAuthCallbackInteractor = Depends(get_oauth_callback_interactor),
    settings: Settings = Depends(get_settings),
) -> RedirectResponse:
    """OAuth 콜백을 처리합니다.

    1. state 검증 및 소비
    2. 인증 코드 교환 → 프로필 조회
    3-a. login: 계정 식별/생성 후 자격 증명 쿠키 설정 → dashboard
    3-b. connect: 현재 계정에 연결 → settings

    실패 시 오류 코드만 담아 login(connect 전용 오류는 settings)으로 리다이렉트합니다.
    """
    acting_subject_id = identity.identity_id if identity else None
    callback_request = OAuthCallbackRequest(
        provider=provider,
        code=code,
        state=state,
        error=error,
        error_description=error_description,
        acting_subject_id=acting_subject_id,
    )

    try:
        result = await interactor.execute(callback_request)
    except ApplicationError as e:
        error_code = redirect_error_code(e)
        logger.warning(
            "OAuth callback failed",
            extra={
                "provider": provider,
                "error": type(e).__name__,
                "error_code": error_code,
                "reason": e.message,
            },
        )
        failure_action = OAuthAction.CONNECT if isinstance(e, _CONNECT_ONLY_ERRORS) else None
        return _failure_redirect(settings, provider, error_code, failure_action)
    except Exception as e:
        logger.error(
            "OAuth callback failed unexpectedly",
            extra={"provider": provider, "error": type(e).__name__},
            exc_info=True,
        )
        return _failure_redirect(settings, provider, redirect_error_code(e), None)

    redirect_response = build_frontend_redirect_response(
        build_success_url(settings.frontend_url, provider=provider, action=result.action)
    )

    if result.credential is not None and result.credential_expires_at is not None:
        set_credential_cookie(
            redirect_response,
            credential=result.credential,
            expires_at=result.credential_expires_at,
            settings=settings,
        )

    logger.info(
        "OAuth callback success",
        extra={
            "provider": provider,
            "action": result.action.value,
            "identity_id": str(result.identity_id),
        },
    )
    return redirect_response


def _failure_redirect(
    settings: Settings,
    provider: str,
    error_code: str,
    action: OAuthAction | None,
) -> RedirectResponse:
    return build_frontend_redirect_response(
        build_failure_url(
            settings.frontend_url,
            provider=provider,
            error_code=error_code,
            action=action,
        )
    )
