from pydantic import BaseModel, ConfigDict, Field


# Records built from PokeAPI payloads; frozen since they are never mutated after mapping
class PokemonSummary(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    number: int  # always equal to id
    image: str | None


class Ability(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    is_hidden: bool
    slot: int


class Move(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    learn_method: str | None


class Form(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    url: str


class Stat(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    base_stat: int


class PokemonDetail(PokemonSummary):
    height: int
    weight: int
    types: list[str]
    # PokeAPI reports null for some alternate forms
    base_experience: int | None
    abilities: list[Ability]
    moves: list[Move]
    forms: list[Form]
    stats: list[Stat]


# Model for the paginated list response (GET /pokemons)
class Page(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    results: list[PokemonSummary]
    count: int
    next: str | None
    previous: str | None
    page: int
    limit: int
    # Keep the camelCase key on the wire, snake_case in Python
    total_pages: int = Field(alias="totalPages")


# Login contract (POST /login). Fields are optional so that missing
# credentials surface as a 400 from the service instead of a 422.
class LoginRequest(BaseModel):
    username: str | None = None
    password: str | None = None


class UserInfo(BaseModel):
    username: str


class LoginResponse(BaseModel):
    success: bool
    message: str
    user: UserInfo


class ErrorResponse(BaseModel):
    error: str
