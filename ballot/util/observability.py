"""Logfire setup and instrumentation.

Services emit spans and structured events directly:

    with logfire.span("vote_service.cast_vote", poll_id=str(poll_id)):
        logfire.info("Vote cast", poll_id=str(poll_id), option_id=str(option_id))
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from ballot.config import Settings

SERVICE_NAME = "ballot-api"
SERVICE_VERSION = "0.1.0"

# Attribute names redacted from spans on top of logfire's defaults
SCRUBBED_ATTRIBUTES = ["operator_token", "operatorToken", "auth_token"]


def configure_logfire(settings: Settings) -> None:
    """Configure logfire for the process.

    Cloud export is on when ``OBSERVABILITY__SEND_TO_LOGFIRE`` says so, or,
    when that is unset, whenever ``OBSERVABILITY__LOGFIRE_TOKEN`` is present.

    Args:
        settings: Application settings
    """
    observability = settings.observability
    send_to_logfire = (
        observability.send_to_logfire
        if observability.send_to_logfire is not None
        else bool(observability.logfire_token)
    )

    logfire.configure(
        service_name=SERVICE_NAME,
        service_version=(
            SERVICE_VERSION
            if settings.git_sha == "unknown"
            else f"{SERVICE_VERSION}+{settings.git_sha[:12]}"
        ),
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
        token=observability.logfire_token,
        scrubbing=logfire.ScrubbingOptions(extra_patterns=SCRUBBED_ATTRIBUTES),
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
        git_sha=settings.git_sha,
    )


def _request_attributes(request, attributes):
    """Tag request spans with the route and whether a credential was sent."""
    result = {**attributes}

    if hasattr(request, "method"):
        result["method"] = request.method
    if hasattr(request, "url"):
        result["path"] = request.url.path

    headers = getattr(request, "headers", {})
    cookies = getattr(request, "cookies", {})
    result["authenticated"] = bool(
        headers.get("authorization") or cookies.get("auth_token")
    )
    return result


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every HTTP request handled by the API."""
    logfire.instrument_fastapi(
        app,
        capture_headers=False,  # Authorization carries the session token
        request_attributes_mapper=_request_attributes,
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace SQL statements issued by the engine.

    Args:
        engine: Async engine; its sync core is what gets instrumented
    """
    logfire.instrument_sqlalchemy(engine=engine.sync_engine, enable_commenter=True)
    logfire.info("SQLAlchemy instrumented", dialect=engine.dialect.name)
