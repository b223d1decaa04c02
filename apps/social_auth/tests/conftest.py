"""Test Configuration and Fixtures.

pytest 설정 및 공통 픽스처.
"""

from __future__ import annotations

import uuid
from datetime import datetime, timedelta, timezone

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from apps.social_auth.application.identity.services import IdentityLinkingPolicy
from apps.social_auth.application.oauth.services import OAuthOrchestrator
from apps.social_auth.infrastructure.oauth import ProviderRegistry
from apps.social_auth.infrastructure.persistence_memory import (
    InMemoryIdentityStore,
    InMemoryStateTokenStore,
)
from apps.social_auth.infrastructure.security import JwtCredentialIssuer
from apps.social_auth.main import create_app
from apps.social_auth.setup.config import Settings, get_settings
from apps.social_auth.setup.dependencies import (
    get_credential_issuer,
    get_identity_store,
    get_provider_registry,
    get_state_store,
)
from apps.social_auth.tests.unit.factories import FakeProviderAdapter

TEST_SECRET_KEY = "test-secret-key-for-testing-only"


class FakeClock:
    """수동으로 진행하는 시계."""

    def __init__(self, start: datetime) -> None:
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += timedelta(seconds=seconds)


# ============================================================
# Domain Fixtures
# ============================================================


@pytest.fixture
def identity_id() -> uuid.UUID:
    """테스트용 Identity ID."""
    return uuid.uuid4()


@pytest.fixture
def clock() -> FakeClock:
    """고정 시작 시각의 시계."""
    return FakeClock(datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc))


# ============================================================
# Store Fixtures
# ============================================================


@pytest.fixture
def state_store(clock: FakeClock) -> InMemoryStateTokenStore:
    """메모리 state 저장소 (TTL 600초)."""
    return InMemoryStateTokenStore(600, clock=clock)


@pytest.fixture
def identity_store() -> InMemoryIdentityStore:
    """메모리 계정 저장소."""
    return InMemoryIdentityStore()


# ============================================================
# Service Fixtures
# ============================================================


@pytest.fixture
def google_adapter() -> FakeProviderAdapter:
    return FakeProviderAdapter("google")


@pytest.fixture
def registry(google_adapter: FakeProviderAdapter) -> ProviderRegistry:
    return ProviderRegistry([google_adapter])


@pytest.fixture
def orchestrator(
    state_store: InMemoryStateTokenStore,
    registry: ProviderRegistry,
) -> OAuthOrchestrator:
    return OAuthOrchestrator(state_store, registry, callback_timeout_seconds=5.0)


@pytest.fixture
def linking_policy(identity_store: InMemoryIdentityStore) -> IdentityLinkingPolicy:
    return IdentityLinkingPolicy(identity_store)


@pytest.fixture
def credential_issuer() -> JwtCredentialIssuer:
    return JwtCredentialIssuer(secret_key=TEST_SECRET_KEY, expire_minutes=60)


# ============================================================
# HTTP Fixtures
# ============================================================

FRONTEND_URL = "https://app.example.com"


@pytest.fixture
def settings() -> Settings:
    return Settings(
        frontend_url=FRONTEND_URL,
        credential_secret_key=TEST_SECRET_KEY,
        cookie_secure=False,
    )


@pytest.fixture
def app(
    settings: Settings,
    state_store: InMemoryStateTokenStore,
    identity_store: InMemoryIdentityStore,
    registry: ProviderRegistry,
    credential_issuer: JwtCredentialIssuer,
) -> FastAPI:
    """저장소/프로바이더를 테스트 객체로 교체한 앱."""
    application = create_app()
    application.dependency_overrides[get_settings] = lambda: settings
    application.dependency_overrides[get_state_store] = lambda: state_store
    application.dependency_overrides[get_identity_store] = lambda: identity_store
    application.dependency_overrides[get_provider_registry] = lambda: registry
    application.dependency_overrides[get_credential_issuer] = lambda: credential_issuer
    return application


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    """lifespan 없이 동작하는 테스트 클라이언트."""
    return TestClient(app)
