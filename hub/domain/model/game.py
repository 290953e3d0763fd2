"""Game entity."""

from hub.domain.model.common import DomainModel


class Game(DomainModel):
    """A game owned on one platform, normalized across providers."""

    id: str  # "<provider>_<native id>", e.g. steam_620
    name: str
    platform: str
    image: str | None = None
    playtime_minutes: int | None = None
    release_date: str | None = None
    categories: list[str] | None = None
    tags: list[str] | None = None
