"""
Domain exceptions - error taxonomy for the Pokedex proxy.

The API layer maps these to HTTP responses; none of them carry
information that is meant to reach the caller verbatim.
"""


class PokedexError(Exception):
    """Base class for Pokedex domain errors."""

    pass


class BadRequest(PokedexError):
    """Required input is missing or empty."""

    pass


class Unauthorized(PokedexError):
    """Credentials were rejected."""

    pass


class PokemonNotFound(PokedexError):
    """The upstream API has no Pokemon with the requested id."""

    pass


class UpstreamUnavailable(PokedexError):
    """The upstream API failed, either at transport level or with a non-success status."""

    def __init__(self, detail: str, status_code: int | None = None):
        super().__init__(detail)
        self.detail = detail
        self.status_code = status_code


class MappingError(PokedexError):
    """An upstream payload did not have the expected shape."""

    pass
