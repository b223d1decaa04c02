"""Dependency Injection Setup.

FastAPI Depends를 사용한 의존성 주입 설정입니다.
저장소/레지스트리/발급자는 프로세스 단위 싱글톤(lru_cache)이고,
Service/Interactor는 요청마다 조립합니다.
"""

from __future__ import annotations

from functools import lru_cache
from typing import TYPE_CHECKING

from fastapi import Depends

from apps.social_auth.application.identity.ports import IdentityStore
from apps.social_auth.application.identity.services import IdentityLinkingPolicy
from apps.social_auth.application.oauth.commands import (
    OAuthAuthorizeInteractor,
    OAuthCallbackInteractor,
)
from apps.social_auth.application.oauth.ports import OAuthProviderRegistry, StateTokenStore
from apps.social_auth.application.oauth.services import OAuthOrchestrator
from apps.social_auth.application.token.ports import CredentialIssuer
from apps.social_auth.setup.config import Settings, get_settings

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncEngine


# ============================================================
# Infrastructure Dependencies (singletons)
# ============================================================


@lru_cache
def get_db_engine() -> "AsyncEngine":
    """PostgreSQL AsyncEngine 제공자."""
    from apps.social_auth.infrastructure.persistence_postgres.session import get_async_engine

    return get_async_engine(get_settings().database_url)


@lru_cache
def get_state_store() -> StateTokenStore:
    """StateTokenStore 제공자 (AUTH_OAUTH_STATE_BACKEND)."""
    settings = get_settings()
    if settings.oauth_state_backend == "redis":
        from apps.social_auth.infrastructure.persistence_redis import (
            RedisStateTokenStore,
            get_oauth_state_redis,
        )

        return RedisStateTokenStore(get_oauth_state_redis(), settings.oauth_state_ttl_seconds)

    from apps.social_auth.infrastructure.persistence_memory import InMemoryStateTokenStore

    return InMemoryStateTokenStore(settings.oauth_state_ttl_seconds)


@lru_cache
def get_identity_store() -> IdentityStore:
    """IdentityStore 제공자 (AUTH_IDENTITY_STORE_BACKEND)."""
    settings = get_settings()
    if settings.identity_store_backend == "postgres":
        from apps.social_auth.infrastructure.persistence_postgres.adapters import (
            SqlaIdentityStore,
        )
        from apps.social_auth.infrastructure.persistence_postgres.session import (
            build_session_factory,
        )

        return SqlaIdentityStore(build_session_factory(get_db_engine()))

    from apps.social_auth.infrastructure.persistence_memory import InMemoryIdentityStore

    return InMemoryIdentityStore()


@lru_cache
def get_provider_registry() -> OAuthProviderRegistry:
    """OAuth 프로바이더 레지스트리 제공자."""
    from apps.social_auth.infrastructure.oauth import build_provider_registry

    return build_provider_registry(get_settings())


@lru_cache
def get_credential_issuer() -> CredentialIssuer:
    """CredentialIssuer 제공자."""
    from apps.social_auth.infrastructure.security import JwtCredentialIssuer

    settings = get_settings()
    return JwtCredentialIssuer(
        secret_key=settings.credential_secret_key,
        algorithm=settings.credential_algorithm,
        issuer=settings.credential_issuer,
        expire_minutes=settings.credential_exp_minutes,
    )


# ============================================================
# Service Dependencies
# ============================================================


def get_oauth_orchestrator(
    state_store: StateTokenStore = Depends(get_state_store),
    registry: OAuthProviderRegistry = Depends(get_provider_registry),
    settings: Settings = Depends(get_settings),
) -> OAuthOrchestrator:
    """OAuthOrchestrator 제공자."""
    return OAuthOrchestrator(
        state_store,
        registry,
        callback_timeout_seconds=settings.oauth_callback_timeout_seconds,
    )


def get_linking_policy(
    identity_store: IdentityStore = Depends(get_identity_store),
) -> IdentityLinkingPolicy:
    """IdentityLinkingPolicy 제공자."""
    return IdentityLinkingPolicy(identity_store)


# ============================================================
# Use Case Dependencies
# ============================================================


def get_oauth_authorize_interactor(
    orchestrator: OAuthOrchestrator = Depends(get_oauth_orchestrator),
    settings: Settings = Depends(get_settings),
) -> OAuthAuthorizeInteractor:
    """OAuthAuthorizeInteractor 제공자."""
    return OAuthAuthorizeInteractor(orchestrator, settings.oauth_state_ttl_seconds)


def get_oauth_callback_interactor(
    orchestrator: OAuthOrchestrator = Depends(get_oauth_orchestrator),
    linking_policy: IdentityLinkingPolicy = Depends(get_linking_policy),
    credential_issuer: CredentialIssuer = Depends(get_credential_issuer),
) -> OAuthCallbackInteractor:
    """OAuthCallbackInteractor 제공자."""
    return OAuthCallbackInteractor(orchestrator, linking_policy, credential_issuer)
