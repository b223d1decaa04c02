"""Identity 엔티티 단위 테스트."""

import pytest

from apps.social_auth.domain.entities import Identity
from apps.social_auth.domain.exceptions import ProviderAlreadyLinkedError
from apps.social_auth.tests.unit.factories import create_identity


class TestIdentity:
    """Identity 엔티티 테스트."""

    def test_from_provider_profile_is_verified_and_linked(self) -> None:
        """프로바이더 프로필로 생성한 계정은 검증/활성 상태."""
        # Act
        identity = Identity.from_provider_profile(
            display_name="alice",
            email="alice@example.com",
            provider="google",
            provider_user_id="g-1",
            avatar_url="https://img.example.com/a.png",
        )

        # Assert
        assert identity.verified is True
        assert identity.active is True
        assert identity.avatar_url == "https://img.example.com/a.png"
        assert identity.linked_provider_user_id("google") == "g-1"
        assert identity.created_at == identity.updated_at

    def test_link_provider_marks_verified(self) -> None:
        """새 프로바이더 연결 시 verified 처리."""
        # Arrange
        identity = create_identity(verified=False)

        # Act
        link = identity.link_provider(provider="kakao", provider_user_id="k-1")

        # Assert
        assert link.provider_user_id == "k-1"
        assert identity.verified is True
        assert identity.linked_provider_user_id("kakao") == "k-1"

    def test_link_same_provider_id_is_idempotent(self) -> None:
        """같은 프로바이더 ID 재연결은 기존 연결 반환."""
        # Arrange
        identity = create_identity(links={"google": "g-1"})
        existing = identity.provider_links["google"]

        # Act
        link = identity.link_provider(provider="google", provider_user_id="g-1")

        # Assert
        assert link is existing

    def test_link_different_provider_id_raises(self) -> None:
        """이미 다른 ID가 연결된 프로바이더는 덮어쓰지 않음."""
        # Arrange
        identity = create_identity(links={"google": "g-1"})

        # Act & Assert
        with pytest.raises(ProviderAlreadyLinkedError):
            identity.link_provider(provider="google", provider_user_id="g-2")
        assert identity.linked_provider_user_id("google") == "g-1"

    def test_equality_by_id(self) -> None:
        """ID 기반 동등성."""
        identity = create_identity()
        other = create_identity(identity_id=identity.id, display_name="bob")

        assert identity == other
        assert hash(identity) == hash(other)
        assert identity != create_identity()
