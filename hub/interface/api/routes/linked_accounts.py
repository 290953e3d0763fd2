"""Linked account routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Response

from hub.application.usecase.linked_account import (
    ListLinkedAccountsUseCase,
    UnlinkAccountUseCase,
)
from hub.application.usecase.linked_account.list_linked_accounts import (
    ListLinkedAccountsResponse,
)
from hub.application.usecase.linked_account.unlink_account import UnlinkAccountRequest
from hub.interface.api.routes.auth import parse_provider
from hub.persistence.cookie import CookieJar

router = APIRouter(
    prefix="/api/linked-accounts", tags=["linked-accounts"], route_class=DishkaRoute
)


@router.get("", response_model=ListLinkedAccountsResponse)
async def list_linked_accounts(
    list_linked_accounts_use_case: FromDishka[ListLinkedAccountsUseCase],
) -> ListLinkedAccountsResponse:
    """List every identity linked from this browser. Tokens are never returned."""
    return await list_linked_accounts_use_case.execute()


@router.delete("/{provider}/{provider_id}", response_model=ListLinkedAccountsResponse)
async def unlink_account(
    provider: str,
    provider_id: str,
    response: Response,
    unlink_account_use_case: FromDishka[UnlinkAccountUseCase],
    jar: FromDishka[CookieJar],
) -> ListLinkedAccountsResponse:
    """Unlink one identity and return the remaining accounts."""
    result = await unlink_account_use_case.execute(
        UnlinkAccountRequest(provider=parse_provider(provider), provider_id=provider_id)
    )
    jar.apply(response)
    return result
