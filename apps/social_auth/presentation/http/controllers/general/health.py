"""Health Controller."""

from fastapi import APIRouter

from apps.social_auth.presentation.http.schemas import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse, summary="Health check")
async def health() -> HealthResponse:
    return HealthResponse()
