"""OAuth Provider Base Class.

OAuthProviderAdapter 포트의 공통 구현입니다.
프로바이더별 차이(엔드포인트, 파라미터, 프로필 필드)만 하위 클래스에서 정의합니다.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Any
from urllib.parse import urlencode

import httpx

from apps.social_auth.application.oauth.exceptions import (
    ExchangeFailedError,
    OAuthTimeoutError,
    ProfileFetchFailedError,
    ProviderMisconfiguredError,
)
from apps.social_auth.application.oauth.ports import NormalizedProfile, OAuthTokens

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 30.0
_MAX_LOGGED_BODY = 512


class OAuthProvider(ABC):
    """OAuth 프로바이더 추상 클래스.

    요청마다 httpx.AsyncClient를 만들고, transport는 테스트에서 주입합니다.
    """

    name: str
    authorization_endpoint: str
    token_endpoint: str
    profile_endpoint: str
    requires_client_secret: bool = True

    def __init__(
        self,
        *,
        client_id: str,
        client_secret: str | None,
        redirect_uri: str | None,
        scopes: Sequence[str] | None = None,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.client_id = client_id
        self.client_secret = client_secret
        self.redirect_uri = redirect_uri
        self.scopes = tuple(scopes) if scopes is not None else self.default_scopes
        self._timeout = timeout_seconds
        self._transport = transport

    @property
    def default_scopes(self) -> tuple[str, ...]:
        """기본 스코프."""
        return ()

    def validate_configuration(self) -> None:
        missing = []
        if not self.client_id:
            missing.append("client_id")
        if self.requires_client_secret and not self.client_secret:
            missing.append("client_secret")
        if not self.redirect_uri:
            missing.append("redirect_uri")
        if missing:
            raise ProviderMisconfiguredError(self.name, missing)

    def build_authorization_url(self, state: str) -> str:
        params = {
            "client_id": self.client_id,
            "redirect_uri": self.redirect_uri,
            "response_type": "code",
            "state": state,
        }
        if self.scopes:
            params["scope"] = " ".join(self.scopes)
        params.update(self.extra_authorization_params())
        return f"{self.authorization_endpoint}?{urlencode(params)}"

    def extra_authorization_params(self) -> dict[str, str]:
        """프로바이더별 추가 인증 파라미터."""
        return {}

    async def exchange_authorization_code(self, code: str) -> OAuthTokens:
        data = {
            "grant_type": "authorization_code",
            "client_id": self.client_id,
            "redirect_uri": self.redirect_uri,
            "code": code,
        }
        if self.client_secret:
            data["client_secret"] = self.client_secret

        try:
            async with self._client() as client:
                response = await client.post(
                    self.token_endpoint,
                    data=data,
                    headers={"Accept": "application/json"},
                )
        except httpx.TimeoutException as e:
            raise OAuthTimeoutError(self.name, "code exchange") from e
        except httpx.HTTPError as e:
            logger.warning(
                "OAuth token request failed",
                extra={"provider": self.name, "error": str(e)},
            )
            raise ExchangeFailedError(self.name, "transport error") from e

        if not response.is_success:
            body = response.text[:_MAX_LOGGED_BODY]
            logger.warning(
                "OAuth token endpoint returned error",
                extra={"provider": self.name, "status_code": response.status_code, "body": body},
            )
            raise ExchangeFailedError(
                self.name,
                f"status {response.status_code}",
                status_code=response.status_code,
                body=body,
            )

        payload = self._json(response, ExchangeFailedError)
        access_token = payload.get("access_token")
        if not access_token:
            raise ExchangeFailedError(
                self.name, "missing access token", status_code=response.status_code
            )

        expires_in = payload.get("expires_in")
        if expires_in is not None:
            try:
                expires_in = int(expires_in)
            except (TypeError, ValueError) as e:
                raise ExchangeFailedError(
                    self.name, "malformed response", status_code=response.status_code
                ) from e

        return OAuthTokens(
            access_token=access_token,
            token_type=payload.get("token_type") or "Bearer",
            expires_in=expires_in,
            refresh_token=payload.get("refresh_token"),
            scope=payload.get("scope"),
        )

    async def fetch_identity_profile(self, access_token: str) -> NormalizedProfile:
        headers = {"Authorization": f"Bearer {access_token}"}
        try:
            async with self._client() as client:
                response = await client.get(self.profile_endpoint, headers=headers)
        except httpx.TimeoutException as e:
            raise OAuthTimeoutError(self.name, "profile fetch") from e
        except httpx.HTTPError as e:
            logger.warning(
                "OAuth profile request failed",
                extra={"provider": self.name, "error": str(e)},
            )
            raise ProfileFetchFailedError(self.name, "transport error") from e

        if not response.is_success:
            body = response.text[:_MAX_LOGGED_BODY]
            logger.warning(
                "OAuth profile endpoint returned error",
                extra={"provider": self.name, "status_code": response.status_code, "body": body},
            )
            raise ProfileFetchFailedError(
                self.name,
                f"status {response.status_code}",
                status_code=response.status_code,
                body=body,
            )

        payload = self._json(response, ProfileFetchFailedError)
        profile = self.parse_profile(payload)
        if not profile.provider_user_id:
            raise ProfileFetchFailedError(
                self.name, "missing user id", status_code=response.status_code
            )
        return profile

    @abstractmethod
    def parse_profile(self, payload: dict[str, Any]) -> NormalizedProfile:
        """프로바이더 응답을 공통 프로필로 변환."""
        raise NotImplementedError

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(timeout=self._timeout, transport=self._transport)

    def _json(
        self,
        response: httpx.Response,
        error_cls: type[ExchangeFailedError] | type[ProfileFetchFailedError],
    ) -> dict[str, Any]:
        try:
            payload = response.json()
        except ValueError as e:
            raise error_cls(
                self.name, "malformed response", status_code=response.status_code
            ) from e
        if not isinstance(payload, dict):
            raise error_cls(self.name, "malformed response", status_code=response.status_code)
        return payload
