from __future__ import annotations

import logging
import os
from importlib.metadata import PackageNotFoundError, version

from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.sdk.resources import SERVICE_NAME, SERVICE_VERSION, Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor

DEFAULT_SERVICE_NAME = "fdash"

_OTEL_CONFIGURED = False
logger = logging.getLogger(__name__)


def _service_version() -> str:
    try:
        return version("fdash")
    except PackageNotFoundError:
        return "unknown"


def build_tracer_provider(service_name: str, endpoint: str | None = None) -> TracerProvider:
    """Provider for the dashboard process; spans are only exported when an endpoint is given."""
    provider = TracerProvider(
        resource=Resource.create(
            {SERVICE_NAME: service_name, SERVICE_VERSION: _service_version()}
        )
    )
    if not endpoint:
        return provider

    try:
        exporter = OTLPSpanExporter(endpoint=endpoint, insecure=endpoint.startswith("http://"))
    except Exception:
        # tracing stays local, the dashboard keeps running
        logger.exception("otel_exporter_setup_failed")
        return provider

    provider.add_span_processor(BatchSpanProcessor(exporter))
    return provider


def configure_otel() -> None:
    global _OTEL_CONFIGURED
    if _OTEL_CONFIGURED:
        return

    trace.set_tracer_provider(
        build_tracer_provider(
            os.getenv("OTEL_SERVICE_NAME", DEFAULT_SERVICE_NAME),
            os.getenv("OTEL_EXPORTER_OTLP_ENDPOINT") or None,
        )
    )
    _OTEL_CONFIGURED = True
