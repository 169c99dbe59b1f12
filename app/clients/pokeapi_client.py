import httpx
import logging
from typing import Any
from urllib.parse import quote

from app.config import get_settings
from app.exceptions import UpstreamUnavailable

logger = logging.getLogger(__name__)


class PokeAPIClient:
    """Thin async wrapper over the PokeAPI REST endpoints. No retries, no caching."""

    def __init__(self, base_url: str | None = None, timeout: float | None = None):
        settings = get_settings()
        self.base_url = (base_url or settings.pokeapi_base_url).rstrip("/")
        self.client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout if timeout is not None else settings.http_timeout,
        )

    async def fetch_json(self, url: str, params: dict | None = None) -> Any:
        """GET an absolute or base-relative URL and return the decoded JSON body.

        Raises UpstreamUnavailable on transport errors, non-success statuses
        (carrying the upstream status code) and undecodable bodies.
        """
        logger.info(f"Fetching upstream resource: {url}")

        try:
            response = await self.client.get(url, params=params)
            response.raise_for_status()  # Raises for 4xx/5xx status codes
            return response.json()

        except httpx.HTTPStatusError as e:
            status_code = e.response.status_code
            # 404 is an expected outcome for unknown ids, the caller decides what it means
            if status_code != 404:
                logger.error(f"PokeAPI failed with status {status_code} for {url}")
            raise UpstreamUnavailable(
                f"PokeAPI failed with status {status_code}", status_code=status_code
            ) from e
        except httpx.RequestError as e:
            # Handle network failures/timeouts
            logger.error(f"PokeAPI network error for {url}: {e!r}")
            raise UpstreamUnavailable(f"PokeAPI network error: {e!r}") from e
        except ValueError as e:
            logger.error(f"PokeAPI returned a non-JSON body for {url}")
            raise UpstreamUnavailable("PokeAPI returned an unexpected response format.") from e

    async def get_pokemon_list(self, offset: int, limit: int) -> dict:
        """Fetches one page of ``{name, url}`` stubs plus count/next/previous."""
        return await self.fetch_json("/pokemon", params={"offset": offset, "limit": limit})

    async def get_pokemon(self, pokemon_id: int | str) -> dict:
        """Fetches the raw detail payload for a single Pokemon, by id or name."""
        # PokeAPI names are lowercase; quote so the id stays a single path segment
        normalized_id = quote(str(pokemon_id).strip().lower(), safe="")
        return await self.fetch_json(f"/pokemon/{normalized_id}")

    async def close(self):
        """Close the underlying HTTP connection pool (call on app shutdown)."""
        await self.client.aclose()
