"""
Game Service

Resolves upstream catalog ids to canonical local Game records.

resolve_game(rawg_id):
======================
    1. Local lookup by rawg_id → return as-is (no freshness check)
    2. Miss → cached detail lookup through the catalog service
       (any upstream failure is reported as "game not found")
    3. Map the payload and insert inside a savepoint
    4. Lost insert race → return the row the winner wrote

Payload Mapping:
================
    name                        → name
    slug                        → slug
    description_raw             → description
    released ("YYYY-MM-DD")     → released (date)
    rating                      → rating
    metacritic                  → metacritic
    background_image            → image_url
    genres[].name               → genres
    platforms[].platform.name   → platforms

Missing optional fields become null or an empty list.
"""

from datetime import date
from typing import Any, Optional
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from gamevault.shared.core.exceptions import GameNotFoundError, UpstreamUnavailableError
from gamevault.shared.core.logging import logger
from gamevault.shared.models.game import Game
from gamevault.shared.repositories.game_repository import GameRepository
from gamevault.shared.services.catalog_service import CatalogService


def _parse_date(value: Any) -> Optional[date]:
    if not value:
        return None
    try:
        return date.fromisoformat(str(value))
    except ValueError:
        return None


def map_rawg_payload(payload: dict[str, Any]) -> dict[str, Any]:
    """Translate a RAWG detail payload into Game column values."""
    genres = [g["name"] for g in payload.get("genres") or [] if g.get("name")]
    platforms = [
        p["platform"]["name"]
        for p in payload.get("platforms") or []
        if (p.get("platform") or {}).get("name")
    ]
    return {
        "rawg_id": int(payload["id"]),
        "name": payload.get("name") or "",
        "slug": payload.get("slug") or "",
        "description": payload.get("description_raw"),
        "released": _parse_date(payload.get("released")),
        "rating": payload.get("rating"),
        "metacritic": payload.get("metacritic"),
        "image_url": payload.get("background_image"),
        "genres": genres,
        "platforms": platforms,
    }


class GameService:
    """Lookup and lazy creation of Game records."""

    def __init__(self, session: AsyncSession, catalog: CatalogService) -> None:
        self.session = session
        self.catalog = catalog
        self.repo = GameRepository(session)

    async def get_game(self, game_id: UUID) -> Game:
        """
        Get a local game by id.

        Raises:
            GameNotFoundError: If no such game exists locally
        """
        game = await self.repo.get(game_id)
        if not game:
            raise GameNotFoundError(str(game_id))
        return game

    async def resolve_game(self, rawg_id: int) -> tuple[Game, bool]:
        """
        Return the Game for an upstream id, creating it on first reference.

        Returns:
            (game, created) where created is True only for the request that
            inserted the row

        Raises:
            GameNotFoundError: If the upstream cannot provide the game
        """
        game = await self.repo.get_by_rawg_id(rawg_id)
        if game:
            return game, False

        try:
            payload = await self.catalog.get_game_details(rawg_id)
        except UpstreamUnavailableError as e:
            logger.info(
                "Upstream could not resolve game",
                rawg_id=rawg_id,
                upstream_status=e.upstream_status,
            )
            raise GameNotFoundError(str(rawg_id)) from e

        fields = map_rawg_payload({**payload, "id": rawg_id})
        game, created = await self.repo.create_or_get(**fields)
        if created:
            logger.info("Game created from catalog", rawg_id=rawg_id, game_id=str(game.id))
        return game, created
