"""Auth HTTP Schemas."""

from datetime import datetime
from typing import Generic, TypeVar

from pydantic import BaseModel, Field

DataT = TypeVar("DataT")


class SuccessResponse(BaseModel, Generic[DataT]):
    """성공 응답 래퍼."""

    success: bool = Field(default=True, description="성공 여부")
    data: DataT = Field(..., description="응답 데이터")


class AuthorizationData(BaseModel):
    """OAuth 인증 응답 데이터."""

    provider: str = Field(..., description="OAuth 프로바이더")
    action: str = Field(..., description="login | connect")
    authorization_url: str = Field(..., description="OAuth 인증 URL")
    expires_at: datetime = Field(..., description="state 만료 시간")


class AuthorizationSuccessResponse(SuccessResponse[AuthorizationData]):
    """OAuth 인증 응답."""

    pass


class ProvidersData(BaseModel):
    """지원 프로바이더 목록."""

    providers: list[str] = Field(default_factory=list, description="설정된 프로바이더")


class ProvidersSuccessResponse(SuccessResponse[ProvidersData]):
    """지원 프로바이더 응답."""

    pass


class ErrorResponse(BaseModel):
    """오류 응답."""

    detail: str = Field(..., description="오류 메시지")
    code: str = Field(..., description="오류 코드")


class HealthResponse(BaseModel):
    """Health check 응답."""

    status: str = "healthy"
    service: str = "social-auth-api"
