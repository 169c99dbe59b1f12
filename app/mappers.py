"""Pure transforms from raw PokeAPI ``/pokemon/{id}`` payloads to our records."""
from typing import Any

from app.exceptions import MappingError
from app.models import Ability, Form, Move, PokemonDetail, PokemonSummary, Stat


def extract_image(raw: dict) -> str | None:
    """Official artwork when present, else the default sprite, else None."""
    sprites = raw.get("sprites") or {}
    artwork = (sprites.get("other") or {}).get("official-artwork") or {}
    return artwork.get("front_default") or sprites.get("front_default")


def _first_learn_method(move: dict) -> str | None:
    # Only the first version group is considered
    details = move.get("version_group_details") or []
    if not details:
        return None
    return (details[0].get("move_learn_method") or {}).get("name")


def to_summary(raw: Any) -> PokemonSummary:
    """Reduce a raw Pokemon payload to the list-view record."""
    try:
        return PokemonSummary(
            id=raw["id"],
            name=raw["name"],
            number=raw["id"],
            image=extract_image(raw),
        )
    except (KeyError, TypeError, AttributeError, ValueError) as e:
        raise MappingError(f"Malformed Pokemon payload: {e!r}") from e


def to_detail(raw: Any) -> PokemonDetail:
    """Map a raw Pokemon payload to the full detail record."""
    try:
        return PokemonDetail(
            id=raw["id"],
            name=raw["name"],
            number=raw["id"],
            image=extract_image(raw),
            height=raw["height"],
            weight=raw["weight"],
            types=[entry["type"]["name"] for entry in raw["types"]],
            base_experience=raw.get("base_experience"),
            abilities=[
                Ability(
                    name=entry["ability"]["name"],
                    is_hidden=entry["is_hidden"],
                    slot=entry["slot"],
                )
                for entry in raw["abilities"]
            ],
            moves=[
                Move(name=entry["move"]["name"], learn_method=_first_learn_method(entry))
                for entry in raw["moves"]
            ],
            forms=[Form(name=entry["name"], url=entry["url"]) for entry in raw["forms"]],
            stats=[
                Stat(name=entry["stat"]["name"], base_stat=entry["base_stat"])
                for entry in raw["stats"]
            ],
        )
    except (KeyError, TypeError, AttributeError, ValueError) as e:
        raise MappingError(f"Malformed Pokemon payload: {e!r}") from e
