"""IdentityLinkingPolicy 단위 테스트."""

import uuid
from unittest.mock import AsyncMock, create_autospec

import pytest

from apps.social_auth.application.identity.exceptions import (
    AlreadyLinkedElsewhereError,
    IdentityConflictError,
    IdentityMismatchError,
    IdentityNotFoundError,
    IdentityStoreConflictError,
    MissingProfileEmailError,
)
from apps.social_auth.application.identity.ports import IdentityStore
from apps.social_auth.application.identity.services import IdentityLinkingPolicy
from apps.social_auth.domain.enums import OAuthAction
from apps.social_auth.domain.services import DisplayNameGenerator
from apps.social_auth.domain.services.display_name import MAX_NUMERIC_SUFFIX
from apps.social_auth.infrastructure.persistence_memory import InMemoryIdentityStore
from apps.social_auth.tests.unit.factories import (
    create_callback_result,
    create_identity,
    create_profile,
)


class TestResolveLogin:
    """로그인 계정 해석 테스트."""

    @pytest.mark.asyncio
    async def test_fast_path_by_provider_id(
        self,
        linking_policy: IdentityLinkingPolicy,
        identity_store: InMemoryIdentityStore,
    ) -> None:
        """이미 연결된 프로바이더 ID면 기존 계정."""
        # Arrange
        existing = create_identity(links={"google": "google-user-1"}, email="old@example.com")
        await identity_store.create(existing)

        # Act
        resolution = await linking_policy.resolve_login(create_callback_result())

        # Assert
        assert resolution.identity.id == existing.id
        assert resolution.is_new_user is False
        assert resolution.linked is False
        assert len(identity_store) == 1

    @pytest.mark.asyncio
    async def test_links_by_email(
        self,
        linking_policy: IdentityLinkingPolicy,
        identity_store: InMemoryIdentityStore,
    ) -> None:
        """같은 이메일 계정에 프로바이더 연결 후 verified."""
        # Arrange
        existing = create_identity(links={"kakao": "k-1"}, verified=False)
        await identity_store.create(existing)
        profile = create_profile(email="  Alice@Example.COM ")

        # Act
        resolution = await linking_policy.resolve_login(create_callback_result(profile=profile))

        # Assert
        assert resolution.identity.id == existing.id
        assert resolution.linked is True
        assert resolution.identity.verified is True
        stored = await identity_store.find_by_provider_id("google", "google-user-1")
        assert stored.id == existing.id
        assert stored.linked_provider_user_id("kakao") == "k-1"

    @pytest.mark.asyncio
    async def test_email_account_linked_to_other_provider_id(
        self,
        linking_policy: IdentityLinkingPolicy,
        identity_store: InMemoryIdentityStore,
    ) -> None:
        """이메일 계정이 같은 프로바이더의 다른 ID에 연결되어 있으면 실패."""
        await identity_store.create(create_identity(links={"google": "google-user-other"}))

        with pytest.raises(IdentityConflictError):
            await linking_policy.resolve_login(create_callback_result())
        assert await identity_store.find_by_provider_id("google", "google-user-1") is None

    @pytest.mark.asyncio
    async def test_creates_new_identity(
        self,
        linking_policy: IdentityLinkingPolicy,
        identity_store: InMemoryIdentityStore,
    ) -> None:
        # Arrange
        profile = create_profile(display_name="Alice Smith", avatar_url="https://img/a.png")

        # Act
        resolution = await linking_policy.resolve_login(create_callback_result(profile=profile))

        # Assert
        identity = resolution.identity
        assert resolution.is_new_user is True
        assert identity.display_name == "alicesmith"
        assert identity.email == "alice@example.com"
        assert identity.avatar_url == "https://img/a.png"
        assert identity.verified is True
        assert identity.linked_provider_user_id("google") == "google-user-1"
        assert len(identity_store) == 1

    @pytest.mark.asyncio
    async def test_display_name_collision_appends_counter(
        self,
        linking_policy: IdentityLinkingPolicy,
        identity_store: InMemoryIdentityStore,
    ) -> None:
        """alice, alice1 사용 중이면 alice2."""
        await identity_store.create(create_identity(display_name="alice", email="a@x.com"))
        await identity_store.create(create_identity(display_name="alice1", email="b@x.com"))
        profile = create_profile(display_name="Alice", email="new@example.com")

        resolution = await linking_policy.resolve_login(create_callback_result(profile=profile))

        assert resolution.identity.display_name == "alice2"

    @pytest.mark.asyncio
    async def test_display_name_falls_back_to_random_suffix(self) -> None:
        """숫자 후보가 모두 사용 중이면 랜덤 접미사."""
        # Arrange
        store = create_autospec(IdentityStore, instance=True)
        store.find_by_provider_id.return_value = None
        store.find_by_email.return_value = None
        store.exists_by_display_name.return_value = True
        store.create.side_effect = lambda identity: identity
        policy = IdentityLinkingPolicy(
            store, DisplayNameGenerator(suffix_factory=lambda: "f00bar")
        )

        # Act
        resolution = await policy.resolve_login(create_callback_result())

        # Assert
        assert resolution.identity.display_name == "alicef00bar"
        assert store.exists_by_display_name.await_count == MAX_NUMERIC_SUFFIX + 1

    @pytest.mark.asyncio
    @pytest.mark.parametrize("email", [None, "", "   "])
    async def test_missing_email(
        self,
        linking_policy: IdentityLinkingPolicy,
        identity_store: InMemoryIdentityStore,
        email: str | None,
    ) -> None:
        profile = create_profile(email=email)

        with pytest.raises(MissingProfileEmailError):
            await linking_policy.resolve_login(create_callback_result(profile=profile))
        assert len(identity_store) == 0

    @pytest.mark.asyncio
    async def test_missing_email_allowed_for_linked_provider(
        self,
        linking_policy: IdentityLinkingPolicy,
        identity_store: InMemoryIdentityStore,
    ) -> None:
        """이미 연결된 계정은 이메일 없이도 로그인."""
        existing = create_identity(links={"google": "google-user-1"})
        await identity_store.create(existing)

        resolution = await linking_policy.resolve_login(
            create_callback_result(profile=create_profile(email=None))
        )

        assert resolution.identity.id == existing.id

    @pytest.mark.asyncio
    async def test_create_conflict_is_translated(self) -> None:
        """저장 시점 충돌은 덮어쓰지 않고 실패."""
        store = create_autospec(IdentityStore, instance=True)
        store.find_by_provider_id.return_value = None
        store.find_by_email.return_value = None
        store.exists_by_display_name.return_value = False
        store.create.side_effect = IdentityStoreConflictError("Email already registered")

        with pytest.raises(IdentityConflictError):
            await IdentityLinkingPolicy(store).resolve_login(create_callback_result())

    @pytest.mark.asyncio
    async def test_links_are_keyed_by_callback_provider(
        self,
        linking_policy: IdentityLinkingPolicy,
        identity_store: InMemoryIdentityStore,
    ) -> None:
        """프로필의 provider_name이 달라도 콜백 provider 기준으로 연결."""
        # Arrange
        profile = create_profile(provider="google-oidc")
        result = create_callback_result(profile=profile, provider="google")

        # Act
        first = await linking_policy.resolve_login(result)
        second = await linking_policy.resolve_login(result)

        # Assert
        assert first.identity.linked_provider_user_id("google") == "google-user-1"
        assert second.identity.id == first.identity.id
        assert second.is_new_user is False
        assert await identity_store.find_by_provider_id("google-oidc", "google-user-1") is None


class TestLinkForSubject:
    """connect 연결 테스트."""

    @pytest.mark.asyncio
    async def test_connects_provider(
        self,
        linking_policy: IdentityLinkingPolicy,
        identity_store: InMemoryIdentityStore,
    ) -> None:
        # Arrange
        identity = create_identity(email="me@example.com")
        await identity_store.create(identity)
        result = create_callback_result(
            profile=create_profile(provider="kakao", provider_user_id="k-1"),
            action=OAuthAction.CONNECT,
            subject_id=identity.id,
        )

        # Act
        linked = await linking_policy.link_for_subject(result, identity.id)

        # Assert
        assert linked.id == identity.id
        assert linked.linked_provider_user_id("kakao") == "k-1"
        assert (await identity_store.find_by_provider_id("kakao", "k-1")).id == identity.id

    @pytest.mark.asyncio
    async def test_connect_is_keyed_by_callback_provider(
        self,
        linking_policy: IdentityLinkingPolicy,
        identity_store: InMemoryIdentityStore,
    ) -> None:
        # Arrange
        identity = create_identity(email="me@example.com")
        await identity_store.create(identity)
        result = create_callback_result(
            profile=create_profile(provider="kakao-legacy", provider_user_id="k-1"),
            action=OAuthAction.CONNECT,
            subject_id=identity.id,
            provider="kakao",
        )

        # Act
        linked = await linking_policy.link_for_subject(result, identity.id)

        # Assert
        assert linked.linked_provider_user_id("kakao") == "k-1"
        assert (await identity_store.find_by_provider_id("kakao", "k-1")).id == identity.id

    @pytest.mark.asyncio
    async def test_mismatched_subject_writes_nothing(self) -> None:
        """요청 계정이 state 계정과 다르면 저장소를 건드리지 않음."""
        # Arrange
        store = create_autospec(IdentityStore, instance=True)
        policy = IdentityLinkingPolicy(store)
        result = create_callback_result(action=OAuthAction.CONNECT, subject_id=uuid.uuid4())

        # Act & Assert
        with pytest.raises(IdentityMismatchError):
            await policy.link_for_subject(result, uuid.uuid4())
        store.link_provider.assert_not_awaited()
        store.find_by_provider_id.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_login_result_is_rejected(self, linking_policy: IdentityLinkingPolicy) -> None:
        with pytest.raises(IdentityMismatchError):
            await linking_policy.link_for_subject(create_callback_result(), uuid.uuid4())

    @pytest.mark.asyncio
    async def test_unauthenticated_caller(self, linking_policy: IdentityLinkingPolicy) -> None:
        result = create_callback_result(action=OAuthAction.CONNECT, subject_id=uuid.uuid4())

        with pytest.raises(IdentityMismatchError):
            await linking_policy.link_for_subject(result, None)

    @pytest.mark.asyncio
    async def test_already_linked_elsewhere(
        self,
        linking_policy: IdentityLinkingPolicy,
        identity_store: InMemoryIdentityStore,
    ) -> None:
        # Arrange
        await identity_store.create(create_identity(links={"google": "google-user-1"}))
        me = create_identity(display_name="me", email="me@example.com")
        await identity_store.create(me)
        result = create_callback_result(action=OAuthAction.CONNECT, subject_id=me.id)

        # Act & Assert
        with pytest.raises(AlreadyLinkedElsewhereError):
            await linking_policy.link_for_subject(result, me.id)
        assert (await identity_store.find_by_id(me.id)).provider_links == {}

    @pytest.mark.asyncio
    async def test_already_linked_to_self_is_idempotent(
        self,
        linking_policy: IdentityLinkingPolicy,
        identity_store: InMemoryIdentityStore,
    ) -> None:
        me = create_identity(links={"google": "google-user-1"})
        await identity_store.create(me)
        result = create_callback_result(action=OAuthAction.CONNECT, subject_id=me.id)

        linked = await linking_policy.link_for_subject(result, me.id)

        assert linked.id == me.id

    @pytest.mark.asyncio
    async def test_subject_not_found(self, linking_policy: IdentityLinkingPolicy) -> None:
        subject_id = uuid.uuid4()
        result = create_callback_result(action=OAuthAction.CONNECT, subject_id=subject_id)

        with pytest.raises(IdentityNotFoundError):
            await linking_policy.link_for_subject(result, subject_id)

    @pytest.mark.asyncio
    async def test_provider_already_linked_with_other_id(
        self,
        linking_policy: IdentityLinkingPolicy,
        identity_store: InMemoryIdentityStore,
    ) -> None:
        """같은 프로바이더에 다른 ID가 연결되어 있으면 덮어쓰지 않음."""
        me = create_identity(links={"google": "google-user-old"})
        await identity_store.create(me)
        result = create_callback_result(action=OAuthAction.CONNECT, subject_id=me.id)

        with pytest.raises(IdentityConflictError):
            await linking_policy.link_for_subject(result, me.id)

    @pytest.mark.asyncio
    async def test_store_conflict_is_translated(self) -> None:
        """동시 연결로 저장 시점에 충돌하는 경우."""
        # Arrange
        me = create_identity()
        store = create_autospec(IdentityStore, instance=True)
        store.find_by_provider_id.return_value = None
        store.find_by_id.return_value = me
        store.link_provider = AsyncMock(side_effect=IdentityStoreConflictError())
        result = create_callback_result(action=OAuthAction.CONNECT, subject_id=me.id)

        # Act & Assert
        with pytest.raises(IdentityConflictError):
            await IdentityLinkingPolicy(store).link_for_subject(result, me.id)
