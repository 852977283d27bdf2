"""Convert setup configs, setups and errors to and from JSON documents.

Field names and enum spellings match the ones used by the web bridge so
documents can be exchanged with existing front ends unchanged.
"""

from __future__ import annotations

import json
from enum import Enum
from pathlib import Path
from typing import Any, Iterable

from ..domain.cards import BaneCard, Expansion, KingdomCard, Project
from ..domain.exceptions import GEN_SETUP_ERRORS, GenSetupError, IntersectingCardBansAndIncludes
from ..domain.setups import BaneCount, ProjectCount, Setup, SetupConfig

CONFIG_FIELDS = ("include_expansions", "ban_cards", "include_cards", "project_count", "bane_count")
SETUP_FIELDS = ("kingdom_cards", "bane_card", "project_cards", "bane_cards", "second_zebra")


def load_setup_config(path: str | Path) -> SetupConfig:
    """Read a setup config JSON file."""
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    return parse_setup_config(data)


def parse_setup_config(data: dict[str, Any]) -> SetupConfig:
    """Parse a JSON dict (already decoded) into a ``SetupConfig``."""
    errors = validate_setup_config_dict(data)
    if errors:
        raise ValueError(_format_errors("Setup config validation failed", errors))
    return SetupConfig(
        include_expansions=_enum_set(Expansion, data.get("include_expansions")),
        ban_cards=_enum_set(KingdomCard, data.get("ban_cards")),
        include_cards=_enum_set(KingdomCard, data.get("include_cards")),
        project_count=(
            None if data.get("project_count") is None else ProjectCount(data["project_count"])
        ),
        bane_count=None if data.get("bane_count") is None else BaneCount(data["bane_count"]),
    )


def validate_setup_config_dict(data: Any) -> list[str]:
    errors: list[str] = []
    if not isinstance(data, dict):
        return ["Setup config must be an object."]

    for key in data:
        if key not in CONFIG_FIELDS:
            errors.append(f"Unknown setup config field '{key}'.")

    for field_name, enum in (
        ("include_expansions", Expansion),
        ("ban_cards", KingdomCard),
        ("include_cards", KingdomCard),
    ):
        values = data.get(field_name)
        if values is None:
            continue
        if not isinstance(values, list):
            errors.append(f"'{field_name}' must be an array or null.")
            continue
        for value in values:
            if not _is_member(enum, value):
                errors.append(f"'{field_name}' contains unknown value '{value}'.")

    for field_name, enum in (("project_count", ProjectCount), ("bane_count", BaneCount)):
        value = data.get(field_name)
        if value is None:
            continue
        if isinstance(value, bool) or not isinstance(value, int) or not _is_member(enum, value):
            allowed = ", ".join(str(int(member)) for member in enum)
            errors.append(f"'{field_name}' must be one of {allowed}, got '{value}'.")

    return errors


def setup_config_to_dict(config: SetupConfig) -> dict[str, Any]:
    return {
        "include_expansions": _names(config.include_expansions),
        "ban_cards": _names(config.ban_cards),
        "include_cards": _names(config.include_cards),
        "project_count": None if config.project_count is None else int(config.project_count),
        "bane_count": None if config.bane_count is None else int(config.bane_count),
    }


def setup_to_dict(setup: Setup) -> dict[str, Any]:
    return {
        "kingdom_cards": [card.value for card in setup.kingdom_cards],
        "bane_card": setup.bane_card.value if setup.bane_card else None,
        "project_cards": [project.value for project in setup.project_cards],
        "bane_cards": {card.value: tag.value for card, tag in setup.bane_cards.items()},
        "second_zebra": setup.second_zebra.value if setup.second_zebra else None,
    }


def setup_from_dict(data: dict[str, Any]) -> Setup:
    missing = [field_name for field_name in SETUP_FIELDS if field_name not in data]
    if missing:
        raise ValueError(_format_errors("Setup is missing fields", missing))
    try:
        return Setup(
            kingdom_cards=tuple(KingdomCard(card) for card in data["kingdom_cards"]),
            bane_card=_optional(KingdomCard, data["bane_card"]),
            project_cards=tuple(Project(project) for project in data["project_cards"]),
            bane_cards={
                KingdomCard(card): BaneCard(tag) for card, tag in data["bane_cards"].items()
            },
            second_zebra=_optional(KingdomCard, data["second_zebra"]),
        )
    except (TypeError, AttributeError) as exc:
        raise ValueError(f"Malformed setup document: {exc}") from exc


def error_to_dict(error: GenSetupError) -> Any:
    return error.to_dict()


def error_from_dict(data: Any) -> GenSetupError:
    """Rebuild a ``GenSetupError`` from its JSON form."""
    if isinstance(data, dict) and len(data) == 1:
        kind, cards = next(iter(data.items()))
        if kind == IntersectingCardBansAndIncludes.kind:
            return IntersectingCardBansAndIncludes(KingdomCard(card) for card in cards)
    for error_type in GEN_SETUP_ERRORS:
        if error_type is not IntersectingCardBansAndIncludes and data == error_type.kind:
            return error_type()
    raise ValueError(f"Unknown setup error '{data}'")


def _enum_set(enum: type[Enum], values: Iterable[Any] | None) -> frozenset | None:
    if values is None:
        return None
    return frozenset(enum(value) for value in values)


def _optional(enum: type[Enum], value: Any) -> Any:
    return None if value is None else enum(value)


def _is_member(enum: type[Enum], value: Any) -> bool:
    try:
        enum(value)
    except (ValueError, TypeError):
        return False
    return True


def _names(values: Iterable[Enum] | None) -> list[str] | None:
    if values is None:
        return None
    return sorted(value.value for value in values)


def _format_errors(prefix: str, errors: Iterable[str]) -> str:
    formatted = "\n".join(f"- {err}" for err in errors)
    return f"{prefix}:\n{formatted}"
