"""Identity Domain Exceptions."""

from apps.social_auth.domain.exceptions.base import DomainError


class ProviderAlreadyLinkedError(DomainError):
    """동일 프로바이더에 다른 계정이 이미 연결됨."""

    def __init__(self, provider: str, existing_provider_user_id: str) -> None:
        self.provider = provider
        self.existing_provider_user_id = existing_provider_user_id
        super().__init__(f"Identity already linked to a different {provider} account")
