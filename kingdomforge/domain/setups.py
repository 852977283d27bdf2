"""Setup request and result models."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from types import MappingProxyType
from typing import Iterable, Mapping

from .cards import BaneCard, Expansion, KingdomCard, Project


class ProjectCount(IntEnum):
    """The number of projects allowed in a game."""

    NO_PROJECTS = 0
    ONE_PROJECT = 1
    TWO_PROJECTS = 2

    @property
    def count(self) -> int:
        return int(self)


class BaneCount(IntEnum):
    """The number of custom bane tags allowed in a game."""

    NO_BANES = 0
    ONE_BANE = 1
    TWO_BANES = 2
    THREE_BANES = 3

    @property
    def count(self) -> int:
        return int(self)


def _frozen(values: Iterable | None) -> frozenset | None:
    return None if values is None else frozenset(values)


@dataclass(frozen=True, slots=True)
class SetupConfig:
    """Constraints for a generated setup.

    ``include_cards`` may name cards outside ``include_expansions``; forced
    cards are always honoured. ``None`` means "no constraint" for every
    field, while an empty ``include_expansions`` means no expansion at all.
    """

    include_expansions: frozenset[Expansion] | None = None
    ban_cards: frozenset[KingdomCard] | None = None
    include_cards: frozenset[KingdomCard] | None = None
    project_count: ProjectCount | None = None
    bane_count: BaneCount | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "include_expansions", _frozen(self.include_expansions))
        object.__setattr__(self, "ban_cards", _frozen(self.ban_cards))
        object.__setattr__(self, "include_cards", _frozen(self.include_cards))
        if self.project_count is not None:
            object.__setattr__(self, "project_count", ProjectCount(self.project_count))
        if self.bane_count is not None:
            object.__setattr__(self, "bane_count", BaneCount(self.bane_count))

    @classmethod
    def none(cls) -> "SetupConfig":
        """A totally random game."""
        return cls()

    @classmethod
    def including_expansions(cls, expansions: Iterable[Expansion]) -> "SetupConfig":
        return cls(include_expansions=frozenset(expansions))

    @classmethod
    def including_cards(cls, cards: Iterable[KingdomCard]) -> "SetupConfig":
        return cls(include_cards=frozenset(cards))


@dataclass(frozen=True, slots=True)
class Setup:
    """A generated game setup.

    ``kingdom_cards`` always holds exactly ten distinct cards. The Young Witch
    bane lives in ``bane_card`` and is not one of the ten. ``bane_cards`` maps
    some kingdom cards to custom bane tags, and ``second_zebra`` is the extra
    card drawn when one of those tags is a Zebra.
    """

    kingdom_cards: tuple[KingdomCard, ...]
    bane_card: KingdomCard | None = None
    project_cards: tuple[Project, ...] = ()
    bane_cards: Mapping[KingdomCard, BaneCard] = field(default_factory=dict)
    second_zebra: KingdomCard | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "kingdom_cards", tuple(self.kingdom_cards))
        object.__setattr__(self, "project_cards", tuple(self.project_cards))
        object.__setattr__(self, "bane_cards", MappingProxyType(dict(self.bane_cards)))

    def __hash__(self) -> int:
        # mappingproxy is unhashable, so hash the tags as sorted pairs.
        tags = tuple(sorted(self.bane_cards.items(), key=lambda item: item[0].value))
        return hash(
            (self.kingdom_cards, self.bane_card, self.project_cards, tags, self.second_zebra)
        )

    @classmethod
    def bane(cls, bane: KingdomCard, other_kingdom: Iterable[KingdomCard]) -> "Setup":
        return cls(kingdom_cards=tuple(other_kingdom), bane_card=bane)

    def cards(self) -> list[KingdomCard]:
        """Kingdom cards followed by the Young Witch bane, if any."""
        cards = list(self.kingdom_cards)
        if self.bane_card is not None:
            cards.append(self.bane_card)
        return cards
