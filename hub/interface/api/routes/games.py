"""Game library routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter

from hub.application.usecase.game import GetGamesUseCase
from hub.application.usecase.game.get_games import GetGamesResponse

router = APIRouter(prefix="/api", tags=["games"], route_class=DishkaRoute)


@router.get("/games", response_model=GetGamesResponse)
async def get_games(
    get_games_use_case: FromDishka[GetGamesUseCase],
) -> GetGamesResponse:
    """Get the merged game library of every linked account.

    Returns 401 ``{"error": "Unauthorized"}`` without a session.

    Example:
        GET /api/games

        {
            "games": [{"id": "steam_400", "name": "Portal", "platform": "Steam", ...}],
            "totalCount": 1
        }
    """
    return await get_games_use_case.execute()
