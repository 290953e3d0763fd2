"""Session routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Response
from pydantic import BaseModel

from hub.application.usecase.session import GetSessionUseCase, SignOutUseCase
from hub.application.usecase.session.get_session import GetSessionResponse
from hub.persistence.cookie import CookieJar

router = APIRouter(prefix="/api/session", tags=["session"], route_class=DishkaRoute)


class SignOutResponse(BaseModel):
    """Sign out response."""

    success: bool


@router.get("", response_model=GetSessionResponse)
async def get_session(
    get_session_use_case: FromDishka[GetSessionUseCase],
) -> GetSessionResponse:
    """Report the current session.

    Never fails: an absent, expired or forged token reads as
    ``authenticated: false``.
    """
    return await get_session_use_case.execute()


@router.post("/signout", response_model=SignOutResponse)
async def sign_out(
    response: Response,
    sign_out_use_case: FromDishka[SignOutUseCase],
    jar: FromDishka[CookieJar],
) -> SignOutResponse:
    """Discard the session cookie. Linked accounts are kept."""
    await sign_out_use_case.execute()
    jar.apply(response)
    return SignOutResponse(success=True)
