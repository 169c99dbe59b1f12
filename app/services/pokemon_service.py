import asyncio
import logging

from app.clients.pokeapi_client import PokeAPIClient
from app.exceptions import MappingError, PokemonNotFound, UpstreamUnavailable
from app.mappers import to_detail, to_summary
from app.models import Page, PokemonDetail, PokemonSummary

logger = logging.getLogger(__name__)


def total_pages(count: int, limit: int) -> int:
    """ceil(count / limit) in integer arithmetic."""
    return -(-count // limit)


class PokemonService:
    # Service receives the upstream client via Dependency Injection
    def __init__(self, poke_client: PokeAPIClient, max_concurrency: int = 10):
        if max_concurrency < 1:
            raise ValueError("max_concurrency must be at least 1")
        self._poke_client = poke_client
        self._max_concurrency = max_concurrency

    async def list_page(self, offset: int, limit: int, page: int | None = None) -> Page:
        """
        Fetches one upstream list page and expands every stub into a summary.

        Detail fetches run concurrently, at most ``max_concurrency`` at a time.
        The result keeps the upstream stub order. If any fetch fails the whole
        call fails with that error and the remaining fetches are cancelled.
        """
        if offset < 0:
            raise ValueError("offset must be >= 0")
        if limit < 1:
            raise ValueError("limit must be > 0")

        data = await self._poke_client.get_pokemon_list(offset=offset, limit=limit)
        try:
            urls = [stub["url"] for stub in data["results"]]
            count = data["count"]
        except (KeyError, TypeError) as e:
            raise MappingError(f"Malformed Pokemon list payload: {e!r}") from e

        logger.info(f"Expanding {len(urls)} Pokemon stubs (offset={offset}, limit={limit})")
        semaphore = asyncio.Semaphore(self._max_concurrency)

        async def fetch_summary(url: str) -> PokemonSummary:
            async with semaphore:
                raw = await self._poke_client.fetch_json(url)
            return to_summary(raw)

        tasks = [asyncio.ensure_future(fetch_summary(url)) for url in urls]
        try:
            # gather returns results by task index, not completion order
            results = await asyncio.gather(*tasks)
        except BaseException:
            for task in tasks:
                task.cancel()
            raise

        return Page(
            results=results,
            count=count,
            next=data.get("next"),
            previous=data.get("previous"),
            page=page if page is not None else offset // limit + 1,
            limit=limit,
            total_pages=total_pages(count, limit),
        )

    async def get_pokemon(self, pokemon_id: int | str) -> PokemonDetail:
        """Fetches a single Pokemon, by id or name, and maps it to the detail record."""
        # Blank or dot-only ids would address a different upstream resource
        if not str(pokemon_id).strip(". "):
            raise PokemonNotFound(f"Pokemon '{pokemon_id}' not found.")
        try:
            raw = await self._poke_client.get_pokemon(pokemon_id)
        except UpstreamUnavailable as e:
            if e.status_code == 404:
                # Map upstream 404 to the domain not-found error
                raise PokemonNotFound(f"Pokemon '{pokemon_id}' not found.") from e
            raise
        return to_detail(raw)
