from app.clients import PokeAPIClient
from app.config import get_settings
from app.services import AuthService, CredentialVerifier, PokemonService, StaticCredentialVerifier
from fastapi import Depends

_poke_client = None

def get_poke_client() -> PokeAPIClient:
    global _poke_client
    if _poke_client is None:
        _poke_client = PokeAPIClient()
    return _poke_client

async def close_poke_client() -> None:
    global _poke_client
    if _poke_client is not None:
        await _poke_client.close()
        _poke_client = None

def get_credential_verifier() -> CredentialVerifier:
    settings = get_settings()
    return StaticCredentialVerifier(settings.auth_username, settings.auth_password)

def get_pokemon_service(
    poke_client: PokeAPIClient = Depends(get_poke_client),
) -> PokemonService:
    return PokemonService(poke_client=poke_client, max_concurrency=get_settings().max_concurrency)

def get_auth_service(
    verifier: CredentialVerifier = Depends(get_credential_verifier),
) -> AuthService:
    return AuthService(verifier=verifier)
