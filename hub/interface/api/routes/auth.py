"""Provider login routes.

Each provider gets the same three steps:

    GET  /api/{provider}/login     -> 302 to the provider
    GET  /api/{provider}/callback  -> verify, link, 302 to {frontend}/{provider}-signin
    POST /api/{provider}/session   -> mint the session from the transient credential

Every failure in the first two steps becomes a 302 to the frontend with
an ``error`` code in the query string.
"""

import logging
from urllib.parse import urlencode

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, Request, Response, status
from fastapi.responses import RedirectResponse

from hub.application.usecase.auth import BeginLoginUseCase, HandleCallbackUseCase
from hub.application.usecase.auth.begin_login import BeginLoginRequest
from hub.application.usecase.auth.handle_callback import HandleCallbackRequest
from hub.application.usecase.session import CompleteSessionUseCase
from hub.application.usecase.session.complete_session import (
    CompleteSessionRequest,
    CompleteSessionResponse,
)
from hub.config import Settings
from hub.domain.error import DomainError
from hub.domain.value import GameProvider
from hub.persistence.cookie import CookieJar

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["authentication"], route_class=DishkaRoute)


def parse_provider(name: str) -> GameProvider:
    """Resolve a provider path segment.

    Raises:
        HTTPException: 404 for unknown providers
    """
    try:
        return GameProvider(name)
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail=f"Unknown provider: {name}"
        )


def error_redirect(settings: Settings, code: str) -> RedirectResponse:
    """Redirect to the frontend's single error surface."""
    return RedirectResponse(
        url=f"{settings.api.frontend_url}/?{urlencode({'error': code})}",
        status_code=status.HTTP_302_FOUND,
    )


@router.get("/{provider}/login")
async def login(
    provider: str,
    begin_login_use_case: FromDishka[BeginLoginUseCase],
    jar: FromDishka[CookieJar],
    settings: FromDishka[Settings],
):
    """Start a provider login.

    Steam gets no state cookie: OpenID 2.0 has no field to carry it.
    Epic gets an ``epic-oauth-state`` cookie valid for ten minutes.

    Example:
        GET /api/epic/login

        Redirects to: https://launcher.epicgames.com/oauth/authorize?...
        Sets cookie: epic-oauth-state
    """
    game_provider = parse_provider(provider)

    try:
        result = await begin_login_use_case.execute(
            BeginLoginRequest(provider=game_provider)
        )
    except DomainError as e:
        logger.error(f"{provider} login could not start: {e} (code={e.code})")
        return jar.apply(error_redirect(settings, e.code))

    return jar.apply(
        RedirectResponse(url=result.redirect_url, status_code=status.HTTP_302_FOUND)
    )


@router.get("/{provider}/callback")
async def callback(
    provider: str,
    request: Request,
    handle_callback_use_case: FromDishka[HandleCallbackUseCase],
    jar: FromDishka[CookieJar],
    settings: FromDishka[Settings],
):
    """Handle the provider's redirect back to us.

    On success the identity is upserted into the ``linked-accounts``
    ledger and left in the ``<provider>-user`` cookie for sixty seconds;
    the browser is sent to the frontend page that completes sign-in.

    Example:
        GET /api/steam/callback?openid.mode=id_res&openid.claimed_id=...

        Redirects to: http://localhost:3000/steam-signin
        Sets cookies: steam-user, linked-accounts
    """
    game_provider = parse_provider(provider)
    params = dict(request.query_params)

    logger.info(f"Callback received: provider={provider}, params={sorted(params)}")

    try:
        result = await handle_callback_use_case.execute(
            HandleCallbackRequest(provider=game_provider, params=params)
        )
    except DomainError as e:
        logger.warning(f"{provider} callback rejected: {e} (code={e.code})")
        return jar.apply(error_redirect(settings, e.code))
    except Exception as e:
        logger.exception(f"Unexpected error during {provider} callback: {e}")
        return jar.apply(error_redirect(settings, "unexpected"))

    logger.info(f"{provider} callback verified for {result.provider_id}")
    return jar.apply(
        RedirectResponse(
            url=f"{settings.api.frontend_url}/{provider}-signin",
            status_code=status.HTTP_302_FOUND,
        )
    )


@router.post("/{provider}/session", response_model=CompleteSessionResponse)
async def complete_session(
    provider: str,
    response: Response,
    complete_session_use_case: FromDishka[CompleteSessionUseCase],
    jar: FromDishka[CookieJar],
) -> CompleteSessionResponse:
    """Complete sign-in from the transient credential cookie.

    Called by the frontend's ``/<provider>-signin`` page on load. Safe to
    call when nothing is waiting: it answers ``authenticated: false``.
    The credential cookie is erased either way.

    Example:
        POST /api/steam/session

        {
            "authenticated": true,
            "linking": false,
            "redirectUrl": "http://localhost:3000/dashboard"
        }
    """
    game_provider = parse_provider(provider)

    result = await complete_session_use_case.execute(
        CompleteSessionRequest(provider=game_provider)
    )
    jar.apply(response)
    return result
