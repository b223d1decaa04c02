"""SQLAlchemy Identity Store.

IdentityStore 포트의 구현체입니다.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any
from uuid import UUID

from sqlalchemy import insert, select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from apps.social_auth.application.identity.exceptions import (
    IdentityStoreConflictError,
    IdentityStoreError,
)
from apps.social_auth.domain.entities import Identity, ProviderLink
from apps.social_auth.infrastructure.persistence_postgres.mappings import (
    identities_table,
    identity_provider_links_table,
)

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

identities = identities_table.c
links = identity_provider_links_table.c


class SqlaIdentityStore:
    """SQLAlchemy 기반 계정 저장소.

    IdentityStore 구현체. 호출마다 세션을 열고, 쓰기는 하나의 트랜잭션으로 처리합니다.
    유일성 위반(IntegrityError)은 IdentityStoreConflictError로 변환합니다.
    """

    def __init__(self, session_factory: "async_sessionmaker[AsyncSession]") -> None:
        self._session_factory = session_factory

    async def find_by_provider_id(self, provider: str, provider_user_id: str) -> Identity | None:
        stmt = select(links.identity_id).where(
            links.provider == provider,
            links.provider_user_id == provider_user_id,
        )
        async with self._session() as session:
            identity_id = (await session.execute(stmt)).scalar_one_or_none()
            if identity_id is None:
                return None
            return await self._load(session, identity_id)

    async def find_by_email(self, email: str) -> Identity | None:
        stmt = select(identities.id).where(identities.email == email)
        async with self._session() as session:
            identity_id = (await session.execute(stmt)).scalar_one_or_none()
            if identity_id is None:
                return None
            return await self._load(session, identity_id)

    async def find_by_id(self, identity_id: UUID) -> Identity | None:
        async with self._session() as session:
            return await self._load(session, identity_id)

    async def exists_by_display_name(self, display_name: str) -> bool:
        stmt = select(identities.id).where(identities.display_name == display_name).limit(1)
        async with self._session() as session:
            return (await session.execute(stmt)).first() is not None

    async def create(self, identity: Identity) -> Identity:
        async with self._session() as session:
            async with session.begin():
                await session.execute(
                    insert(identities_table).values(
                        id=identity.id,
                        display_name=identity.display_name,
                        email=identity.email,
                        avatar_url=identity.avatar_url,
                        verified=identity.verified,
                        active=identity.active,
                        created_at=identity.created_at,
                        updated_at=identity.updated_at,
                    )
                )
                for link in identity.provider_links.values():
                    await session.execute(
                        insert(identity_provider_links_table).values(
                            identity_id=identity.id, **_link_values(link)
                        )
                    )
            return await self._load(session, identity.id)

    async def link_provider(
        self,
        identity_id: UUID,
        provider: str,
        provider_user_id: str,
        provider_email: str | None = None,
    ) -> Identity:
        now = datetime.now(timezone.utc)
        async with self._session() as session:
            async with session.begin():
                row = (
                    await session.execute(
                        select(identities.id)
                        .where(identities.id == identity_id)
                        .with_for_update()
                    )
                ).first()
                if row is None:
                    raise IdentityStoreError(f"Identity not found: {identity_id}")

                existing = (
                    await session.execute(
                        select(links.provider_user_id).where(
                            links.identity_id == identity_id,
                            links.provider == provider,
                        )
                    )
                ).scalar_one_or_none()
                if existing is not None and existing != provider_user_id:
                    raise IdentityStoreConflictError(
                        f"Identity already linked to a different {provider} account"
                    )
                if existing is None:
                    await session.execute(
                        insert(identity_provider_links_table).values(
                            identity_id=identity_id,
                            provider=provider,
                            provider_user_id=provider_user_id,
                            provider_email=provider_email,
                            linked_at=now,
                        )
                    )
                await session.execute(
                    update(identities_table)
                    .where(identities.id == identity_id)
                    .values(verified=True, updated_at=now)
                )
            return await self._load(session, identity_id)

    @asynccontextmanager
    async def _session(self) -> AsyncIterator["AsyncSession"]:
        try:
            async with self._session_factory() as session:
                yield session
        except IntegrityError as e:
            raise IdentityStoreConflictError("Identity uniqueness constraint violated") from e
        except SQLAlchemyError as e:
            raise IdentityStoreError("Identity store unavailable") from e

    async def _load(self, session: "AsyncSession", identity_id: UUID) -> Identity | None:
        row = (
            await session.execute(select(identities_table).where(identities.id == identity_id))
        ).mappings().first()
        if row is None:
            return None
        link_rows = (
            await session.execute(
                select(identity_provider_links_table).where(links.identity_id == identity_id)
            )
        ).mappings().all()
        return _to_entity(row, link_rows)


def _link_values(link: ProviderLink) -> dict[str, Any]:
    return {
        "provider": link.provider,
        "provider_user_id": link.provider_user_id,
        "provider_email": link.provider_email,
        "linked_at": link.linked_at,
    }


def _to_entity(row: Any, link_rows: Any) -> Identity:
    return Identity(
        id=row["id"],
        display_name=row["display_name"],
        email=row["email"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
        provider_links={
            link["provider"]: ProviderLink(
                provider=link["provider"],
                provider_user_id=link["provider_user_id"],
                provider_email=link["provider_email"],
                linked_at=link["linked_at"],
            )
            for link in link_rows
        },
        avatar_url=row["avatar_url"],
        verified=row["verified"],
        active=row["active"],
    )
