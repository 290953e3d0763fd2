"""Observability configuration using Logfire.

Usage:
    import logfire

    # Structured logging (never pass tokens)
    logfire.info("Catalog fetched", provider="steam", count=len(games))

    # Manual spans for the login choreography
    with logfire.span("steam.handle_callback", steam_id=steam_id):
        ...
"""

import logfire
from fastapi import FastAPI

from hub.config import Settings


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire for observability.

    Sends to the Logfire cloud only when explicitly enabled or when a
    token is present; otherwise logs stay on the console.

    Args:
        settings: Application settings
    """
    if settings.observability.send_to_logfire is not None:
        send_to_logfire = settings.observability.send_to_logfire
    else:
        send_to_logfire = bool(settings.observability.logfire_token)

    config_kwargs = {
        "service_name": "game-library-hub",
        "service_version": "0.1.0",
        "environment": settings.environment,
        "send_to_logfire": send_to_logfire,
        "console": logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    }

    if settings.observability.logfire_token:
        config_kwargs["token"] = settings.observability.logfire_token

    logfire.configure(**config_kwargs)

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        debug=settings.debug,
        send_to_logfire=send_to_logfire,
    )


def instrument_fastapi(app: FastAPI) -> None:
    """Instrument FastAPI application with Logfire.

    Request headers are not captured: they carry session and ledger
    cookies.
    """
    logfire.instrument_fastapi(app, capture_headers=False)


def instrument_httpx() -> None:
    """Instrument outbound httpx calls to Steam and Epic."""
    logfire.instrument_httpx()
