"""Configuration models for KingdomForge."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, TypeVar

from .domain.cards import Expansion, KingdomCard
from .domain.setups import BaneCount, ProjectCount, SetupConfig

E = TypeVar("E", bound=Enum)

PREFIX = "KINGDOMFORGE_"


@dataclass(slots=True)
class GeneratorConfig:
    """Knobs for the setup generator itself."""

    rng_seed: int | None = None
    # None lets the generator retry once per candidate card.
    max_bane_retries: int | None = None
    log_level: str = "WARNING"


@dataclass(slots=True)
class KingdomForgeConfig:
    """Top-level configuration container."""

    generator: GeneratorConfig = field(default_factory=GeneratorConfig)
    default_setup: SetupConfig = field(default_factory=SetupConfig)

    @classmethod
    def from_env(cls) -> "KingdomForgeConfig":
        """Create config from environment variables prefixed with KINGDOMFORGE_."""
        generator = GeneratorConfig(
            rng_seed=_parse_int("RNG_SEED"),
            max_bane_retries=_parse_non_negative("MAX_BANE_RETRIES"),
            log_level=_parse_log_level("LOG_LEVEL"),
        )
        default_setup = SetupConfig(
            include_expansions=_parse_enum_set("EXPANSIONS", Expansion),
            ban_cards=_parse_enum_set("BAN_CARDS", KingdomCard),
            include_cards=_parse_enum_set("INCLUDE_CARDS", KingdomCard),
            project_count=_parse_count("PROJECT_COUNT", ProjectCount),
            bane_count=_parse_count("BANE_COUNT", BaneCount),
        )
        return cls(generator=generator, default_setup=default_setup)


def _parse_int(name: str) -> int | None:
    raw = os.getenv(f"{PREFIX}{name}")
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"{PREFIX}{name} must be an integer, got '{raw}'") from exc


def _parse_non_negative(name: str) -> int | None:
    value = _parse_int(name)
    if value is not None and value < 0:
        raise ValueError(f"{PREFIX}{name} cannot be negative, got {value}")
    return value


def _parse_log_level(name: str) -> str:
    level = os.getenv(f"{PREFIX}{name}", "").strip().upper() or "WARNING"
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"{PREFIX}{name} must be a logging level name, got '{level}'")
    return level


def _parse_enum_set(name: str, enum: type[E]) -> frozenset[E] | None:
    raw = os.getenv(f"{PREFIX}{name}")
    if raw is None:
        return None
    values = [value.strip() for value in raw.split(",") if value.strip()]
    return frozenset(_convert(name, enum, value) for value in values)


def _parse_count(name: str, enum: Callable[[int], E]) -> E | None:
    value = _parse_int(name)
    if value is None:
        return None
    try:
        return enum(value)
    except ValueError as exc:
        raise ValueError(f"{PREFIX}{name} value {value} is out of range") from exc


def _convert(name: str, enum: type[E], value: str) -> E:
    try:
        return enum(value)
    except ValueError as exc:
        raise ValueError(f"{PREFIX}{name} contains unknown value '{value}'") from exc
