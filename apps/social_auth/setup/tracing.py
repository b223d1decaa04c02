"""OpenTelemetry Distributed Tracing Configuration.

Architecture:
  Social Auth API (OTel SDK) → OTLP/HTTP (4318) → Collector

AUTH_OTEL_ENABLED(OTEL_ENABLED)가 꺼져 있으면 아무것도 하지 않습니다.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from fastapi import FastAPI

    from apps.social_auth.setup.config import Settings

logger = logging.getLogger(__name__)

SERVICE_VERSION = "1.0.0"

_tracer_provider = None


def configure_tracing(settings: "Settings") -> bool:
    """OpenTelemetry 트레이싱 설정.

    Returns:
        bool: 설정 여부
    """
    global _tracer_provider

    if not settings.otel_enabled:
        logger.info("OpenTelemetry tracing disabled (OTEL_ENABLED=false)")
        return False

    from opentelemetry import trace
    from opentelemetry.exporter.otlp.proto.http.trace_exporter import OTLPSpanExporter
    from opentelemetry.sdk.resources import Resource
    from opentelemetry.sdk.trace import TracerProvider
    from opentelemetry.sdk.trace.export import BatchSpanProcessor

    resource = Resource.create(
        {
            "service.name": settings.otel_service_name,
            "service.version": SERVICE_VERSION,
            "deployment.environment": settings.environment,
        }
    )
    _tracer_provider = TracerProvider(resource=resource)

    exporter_kwargs = {}
    if settings.otel_exporter_endpoint:
        exporter_kwargs["endpoint"] = f"{settings.otel_exporter_endpoint}/v1/traces"
    _tracer_provider.add_span_processor(BatchSpanProcessor(OTLPSpanExporter(**exporter_kwargs)))

    trace.set_tracer_provider(_tracer_provider)
    logger.info(
        "OpenTelemetry tracing configured",
        extra={
            "service": settings.otel_service_name,
            "endpoint": settings.otel_exporter_endpoint,
        },
    )
    return True


def instrument_fastapi(app: "FastAPI") -> None:
    """FastAPI 자동 계측 (health 제외)."""
    if _tracer_provider is None:
        return

    from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor

    FastAPIInstrumentor.instrument_app(app, excluded_urls="health")
    logger.info("FastAPI instrumentation enabled")


def instrument_httpx() -> None:
    """HTTPX 자동 계측 (OAuth provider 호출)."""
    if _tracer_provider is None:
        return

    from opentelemetry.instrumentation.httpx import HTTPXClientInstrumentor

    HTTPXClientInstrumentor().instrument()
    logger.info("HTTPX instrumentation enabled")


def instrument_redis() -> None:
    """Redis 자동 계측 (OAuth state)."""
    if _tracer_provider is None:
        return

    from opentelemetry.instrumentation.redis import RedisInstrumentor

    RedisInstrumentor().instrument()
    logger.info("Redis instrumentation enabled")


def shutdown_tracing() -> None:
    """트레이싱 종료 (graceful shutdown)."""
    global _tracer_provider

    if _tracer_provider is not None:
        _tracer_provider.shutdown()
        _tracer_provider = None
        logger.info("OpenTelemetry tracing shutdown complete")
