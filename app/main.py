import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import uvicorn
from fastapi import APIRouter, Depends, FastAPI, HTTPException, Query, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.config import get_settings
from app.dependencies import close_poke_client, get_auth_service, get_pokemon_service
from app.exceptions import BadRequest, PokemonNotFound, Unauthorized
from app.models import ErrorResponse, LoginRequest, LoginResponse, Page, PokemonDetail
from app.services import AuthService, PokemonService

settings = get_settings()

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    logger.info("Starting Pokedex proxy...")
    yield
    # Shutdown: release the shared upstream connection pool
    await close_poke_client()
    logger.info("Upstream client closed")


app = FastAPI(
    title="Pokedex Proxy API",
    description="Aggregating proxy in front of PokeAPI with a placeholder login.",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Every HTTP error leaves the proxy as {"error": "..."}
@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


# Validation details stay internal; a bad login body counts as missing credentials
@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.info("Rejected invalid request to %r", request.url.path)
    if request.url.path == f"{settings.api_prefix}/login":
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": "Username and password are required"},
        )
    return JSONResponse(
        status_code=422,
        content={"error": "Invalid request parameters"},
    )


router = APIRouter()


# Endpoint 1: Placeholder login
@router.post(
    "/login",
    response_model=LoginResponse,
    responses={400: {"model": ErrorResponse}, 401: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    summary="Checks a username/password pair against the configured credentials",
)
def login(
    credentials: LoginRequest | None = None,
    service: AuthService = Depends(get_auth_service),
):
    """Not a real authentication mechanism: no token or session is issued."""
    credentials = credentials or LoginRequest()
    try:
        return service.login(credentials.username, credentials.password)
    except BadRequest as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except Unauthorized as e:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(e))
    except Exception:
        logger.exception("Login error")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error",
        )


# Endpoint 2: Paginated Pokemon list
@router.get(
    "/pokemons",
    response_model=Page,
    responses={500: {"model": ErrorResponse}},
    summary="Returns one page of Pokemon summaries",
)
async def list_pokemons(
    page: int = Query(1, ge=1),
    limit: int = Query(20, ge=1),
    offset: int | None = Query(None, ge=0),
    service: PokemonService = Depends(get_pokemon_service),
):
    """An explicit offset wins over the one derived from page and limit."""
    if offset is None:
        offset = (page - 1) * limit
    try:
        return await service.list_page(offset=offset, limit=limit, page=page)
    except Exception:
        # Upstream, mapping and unexpected errors all collapse to a generic 500
        logger.exception("Pokemons list error")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch pokemons",
        )


# Endpoint 3: Single Pokemon detail
@router.get(
    "/pokemons/{pokemon_id}",
    response_model=PokemonDetail,
    responses={404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    summary="Returns full details for one Pokemon",
)
async def get_pokemon(
    pokemon_id: str,
    service: PokemonService = Depends(get_pokemon_service),
):
    try:
        return await service.get_pokemon(pokemon_id)
    except PokemonNotFound:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Pokémon not found")
    except Exception:
        logger.exception("Pokemon detail error")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch pokemon details",
        )


app.include_router(router, prefix=settings.api_prefix)


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Liveness probe; does not contact the upstream API."""
    return {"status": "healthy"}


def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())
