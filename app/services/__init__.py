"""Domain services orchestrating the upstream client and mappers."""
from .auth_service import AuthService, CredentialVerifier, StaticCredentialVerifier
from .pokemon_service import PokemonService

__all__ = [
    'AuthService',
    'CredentialVerifier',
    'PokemonService',
    'StaticCredentialVerifier',
]
