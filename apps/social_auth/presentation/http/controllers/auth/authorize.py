"""Authorize Controller.

OAuth 로그인/연결 URL 생성 엔드포인트입니다.
"""

from fastapi import APIRouter, Depends

from apps.social_auth.application.oauth.commands import OAuthAuthorizeInteractor
from apps.social_auth.application.oauth.dto import (
    OAuthAuthorizeRequest,
    OAuthAuthorizeResponse,
)
from apps.social_auth.application.token.ports import CredentialClaims
from apps.social_auth.domain.enums import OAuthAction
from apps.social_auth.presentation.http.auth import get_current_identity
from apps.social_auth.presentation.http.schemas import (
    AuthorizationData,
    AuthorizationSuccessResponse,
    ErrorResponse,
)
from apps.social_auth.setup.dependencies import get_oauth_authorize_interactor

router = APIRouter()


def _to_response(result: OAuthAuthorizeResponse) -> AuthorizationSuccessResponse:
    return AuthorizationSuccessResponse(
        data=AuthorizationData(
            provider=result.provider,
            action=result.action.value,
            authorization_url=result.authorization_url,
            expires_at=result.expires_at,
        )
    )


@router.get(
    "/{provider}/login",
    response_model=AuthorizationSuccessResponse,
    responses={404: {"model": ErrorResponse}, 503: {"model": ErrorResponse}},
    summary="OAuth 로그인 URL 생성",
)
async def login(
    provider: str,
    interactor: OAuthAuthorizeInteractor = Depends(get_oauth_authorize_interactor),
) -> AuthorizationSuccessResponse:
    """OAuth 로그인 URL을 JSON으로 반환합니다.

    프론트엔드는 응답의 authorization_url로 직접 이동해야 합니다.
    """
    result = await interactor.execute(
        OAuthAuthorizeRequest(provider=provider, action=OAuthAction.LOGIN)
    )
    return _to_response(result)


@router.get(
    "/{provider}/connect",
    response_model=AuthorizationSuccessResponse,
    responses={
        401: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        503: {"model": ErrorResponse},
    },
    summary="OAuth 계정 연결 URL 생성",
)
async def connect(
    provider: str,
    identity: CredentialClaims = Depends(get_current_identity),
    interactor: OAuthAuthorizeInteractor = Depends(get_oauth_authorize_interactor),
) -> AuthorizationSuccessResponse:
    """현재 로그인한 계정에 프로바이더를 연결하기 위한 URL을 반환합니다.

    state에 현재 계정 ID가 묶이므로 콜백은 같은 계정에서만 완료됩니다.
    """
    result = await interactor.execute(
        OAuthAuthorizeRequest(
            provider=provider,
            action=OAuthAction.CONNECT,
            subject_id=identity.identity_id,
        )
    )
    return _to_response(result)
