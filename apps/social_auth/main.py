"""Social Auth API Application Entry Point.

Clean Architecture 기반 소셜 로그인/계정 연결 서비스입니다.

분산 트레이싱 통합:
- FastAPI 자동 계측 (HTTP 요청/응답)
- HTTPX 자동 계측 (OAuth provider 호출)
- Redis 자동 계측 (OAuth state)
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from apps.social_auth.infrastructure.scheduling import StateSweeper
from apps.social_auth.presentation.http.controllers import root_router
from apps.social_auth.presentation.http.errors import register_exception_handlers
from apps.social_auth.setup.config import get_settings
from apps.social_auth.setup.dependencies import get_db_engine, get_state_store
from apps.social_auth.setup.logging import setup_logging
from apps.social_auth.setup.tracing import (
    configure_tracing,
    instrument_fastapi,
    instrument_httpx,
    instrument_redis,
    shutdown_tracing,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """애플리케이션 생명주기 관리."""
    settings = get_settings()

    # Startup
    logger.info(
        "Starting Social Auth API",
        extra={
            "state_backend": settings.oauth_state_backend,
            "identity_backend": settings.identity_store_backend,
        },
    )

    if settings.identity_store_backend == "postgres":
        from apps.social_auth.infrastructure.persistence_postgres.session import create_tables

        await create_tables(get_db_engine())
        logger.info("Identity tables ready")

    # 만료 state 정리 작업
    sweeper = StateSweeper(
        get_state_store(),
        interval_seconds=settings.oauth_state_sweep_interval_seconds,
    )
    sweeper.start()

    yield

    # Shutdown
    logger.info("Shutting down Social Auth API")
    await sweeper.stop()
    if settings.oauth_state_backend == "redis":
        from apps.social_auth.infrastructure.persistence_redis import close_oauth_state_redis

        await close_oauth_state_redis()
    if settings.identity_store_backend == "postgres":
        await get_db_engine().dispose()
    shutdown_tracing()


def create_app() -> FastAPI:
    """FastAPI 애플리케이션 팩토리."""
    settings = get_settings()

    # 로깅 설정
    setup_logging("DEBUG" if settings.environment == "local" else settings.log_level)

    # OpenTelemetry 분산 트레이싱 설정
    if configure_tracing(settings):
        instrument_httpx()
        instrument_redis()

    app = FastAPI(
        title=settings.app_name,
        description="소셜 로그인 / 계정 연결 서비스 (Clean Architecture)",
        version="1.0.0",
        lifespan=lifespan,
    )

    # CORS 설정
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # 예외 핸들러 등록
    register_exception_handlers(app)

    # OpenTelemetry FastAPI instrumentation
    instrument_fastapi(app)

    # 라우터 등록
    app.include_router(root_router)

    # Health check (루트)
    @app.get("/health")
    async def root_health():
        return {"status": "healthy", "service": settings.otel_service_name, "version": "1.0.0"}

    return app


# 애플리케이션 인스턴스
app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "apps.social_auth.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )
