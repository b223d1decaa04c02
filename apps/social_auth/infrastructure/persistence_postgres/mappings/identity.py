"""Identity Table Mapping.

Identity 도메인 엔티티와 DB 테이블의 매핑입니다.
ProviderLink가 불변 값 객체이므로 ORM 계측 없이 테이블 정의만 두고,
행 ↔ 엔티티 변환은 Adapter에서 처리합니다.

타입 규칙 (Unbounded String 기본 전략):
    - TEXT: 기본 문자열 타입
    - VARCHAR: 표준 규격이 명확한 경우만 사용
        - email: VARCHAR(320) - RFC 5321 표준
"""

from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    ForeignKey,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.sql import func

from apps.social_auth.infrastructure.persistence_postgres.registry import mapper_registry

SCHEMA = "auth"

identities_table = Table(
    "identities",
    mapper_registry.metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("display_name", Text, nullable=False),
    Column("email", String(320), nullable=False),  # RFC 5321
    Column("avatar_url", Text),
    Column("verified", Boolean, nullable=False, default=False),
    Column("active", Boolean, nullable=False, default=True),
    Column("created_at", DateTime(timezone=True), nullable=False, server_default=func.now()),
    Column("updated_at", DateTime(timezone=True), nullable=False, server_default=func.now()),
    UniqueConstraint("display_name", name="uq_identities_display_name"),
    UniqueConstraint("email", name="uq_identities_email"),
    schema=SCHEMA,
)

identity_provider_links_table = Table(
    "identity_provider_links",
    mapper_registry.metadata,
    Column(
        "identity_id",
        UUID(as_uuid=True),
        ForeignKey(f"{SCHEMA}.identities.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column("provider", Text, primary_key=True),
    Column("provider_user_id", Text, nullable=False),
    Column("provider_email", String(320)),  # RFC 5321
    Column("linked_at", DateTime(timezone=True), nullable=False, server_default=func.now()),
    UniqueConstraint("provider", "provider_user_id", name="uq_identity_provider_links_identity"),
    schema=SCHEMA,
)
