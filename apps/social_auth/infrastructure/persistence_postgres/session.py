"""PostgreSQL Session Management."""

from __future__ import annotations

import os

from sqlalchemy import text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from apps.social_auth.infrastructure.persistence_postgres.mappings import SCHEMA
from apps.social_auth.infrastructure.persistence_postgres.registry import mapper_registry


def get_async_engine(database_url: str) -> AsyncEngine:
    """AsyncEngine 생성.

    환경변수:
        - DB_POOL_SIZE: 풀 크기 (기본: 5)
        - DB_MAX_OVERFLOW: 최대 오버플로우 (기본: 10)
    """
    pool_size = int(os.getenv("DB_POOL_SIZE", "5"))
    max_overflow = int(os.getenv("DB_MAX_OVERFLOW", "10"))
    pool_recycle = int(os.getenv("DB_POOL_RECYCLE", "1800"))

    return create_async_engine(
        database_url,
        pool_size=pool_size,
        max_overflow=max_overflow,
        pool_recycle=pool_recycle,
        pool_pre_ping=True,
        echo=os.getenv("DB_ECHO", "false").lower() == "true",
    )


def build_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """세션 팩토리 생성."""
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


async def create_tables(engine: AsyncEngine) -> None:
    """스키마/테이블이 없으면 생성합니다."""
    async with engine.begin() as conn:
        await conn.execute(text(f"CREATE SCHEMA IF NOT EXISTS {SCHEMA}"))
        await conn.run_sync(mapper_registry.metadata.create_all)
