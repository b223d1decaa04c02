"""Providers Controller."""

from fastapi import APIRouter, Depends

from apps.social_auth.application.oauth.services import OAuthOrchestrator
from apps.social_auth.presentation.http.schemas import ProvidersData, ProvidersSuccessResponse
from apps.social_auth.setup.dependencies import get_oauth_orchestrator

router = APIRouter()


@router.get(
    "/providers",
    response_model=ProvidersSuccessResponse,
    summary="지원 OAuth 프로바이더 목록",
)
async def providers(
    orchestrator: OAuthOrchestrator = Depends(get_oauth_orchestrator),
) -> ProvidersSuccessResponse:
    return ProvidersSuccessResponse(
        data=ProvidersData(providers=orchestrator.supported_providers())
    )
