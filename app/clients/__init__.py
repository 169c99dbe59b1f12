"""Client modules for external API communication."""
from .pokeapi_client import PokeAPIClient

__all__ = [
    'PokeAPIClient',
]
