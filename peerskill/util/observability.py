"""Logfire setup.

Application code logs and traces through logfire directly:

    logfire.info("Rating applied", target=email, new_points=points)

    with logfire.span("reputation_service.apply_rating", target=email):
        ...
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from peerskill.config import Settings

SERVICE_NAME = "peerskill-backend"
SERVICE_VERSION = "0.1.0"

# Attribute names logfire redacts on top of its defaults
SCRUBBED_FIELDS = ["password_hash", "jwt_secret", "token"]


def should_send(settings: Settings) -> bool:
    """Explicit setting wins, otherwise send only when a token is configured."""
    if settings.observability.send_to_logfire is not None:
        return settings.observability.send_to_logfire
    return bool(settings.observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure logfire once per process, before the app is created.

    Args:
        settings: Application settings
    """
    send_to_logfire = should_send(settings)

    logfire.configure(
        service_name=SERVICE_NAME,
        service_version=SERVICE_VERSION,
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
        token=settings.observability.logfire_token,
        scrubbing=logfire.ScrubbingOptions(extra_patterns=SCRUBBED_FIELDS),
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    )

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
    )


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every HTTP request except health probes.

    Headers are not captured, so bearer tokens never reach a span.
    """

    def _request_attributes(request, attributes):
        return {**attributes, "method": request.method, "path": request.url.path}

    logfire.instrument_fastapi(
        app,
        capture_headers=False,
        excluded_urls="/health",
        request_attributes_mapper=_request_attributes,
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace every statement run through the engine."""
    logfire.instrument_sqlalchemy(engine=engine.sync_engine)
