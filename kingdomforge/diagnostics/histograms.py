"""Histograms summarising the shape of a setup."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import Generic, Hashable, Iterable, TypeVar

from ..domain.cards import CardType, Expansion
from ..domain.catalog import CardCatalog
from ..domain.setups import Setup

K = TypeVar("K", bound=Hashable)


@dataclass(slots=True)
class Histogram(Generic[K]):
    """Counts of values, mergeable with ``+``."""

    counts: Counter = field(default_factory=Counter)

    @classmethod
    def empty(cls) -> "Histogram[K]":
        return cls()

    @classmethod
    def one(cls, value: K) -> "Histogram[K]":
        return cls.n(value, 1)

    @classmethod
    def n(cls, value: K, amount: int) -> "Histogram[K]":
        # Zero counts are kept so empty buckets still show up in pretty().
        counts: Counter = Counter()
        counts[value] = amount
        return cls(counts)

    @classmethod
    def of(cls, values: Iterable[K], *, buckets: Iterable[K] = ()) -> "Histogram[K]":
        histogram = cls(Counter({bucket: 0 for bucket in buckets}))
        histogram.counts.update(values)
        return histogram

    def count(self, value: K) -> int:
        return self.counts.get(value, 0)

    def __add__(self, other: "Histogram[K]") -> "Histogram[K]":
        merged = Counter(self.counts)
        for value, amount in other.counts.items():
            merged[value] = merged.get(value, 0) + amount
        return Histogram(merged)

    def pretty(self) -> str:
        if not self.counts:
            return ""
        keys = sorted(self.counts, key=_sort_key)
        labels = {key: _label(key) for key in keys}
        width = max(len(label) for label in labels.values())
        return "\n".join(
            f"{labels[key]:<{width}}: {'#' * self.counts[key]} ({self.counts[key]})"
            for key in keys
        )


@dataclass(slots=True)
class SetupHistograms:
    costs: Histogram[int]
    types: Histogram[CardType]
    expansions: Histogram[Expansion]


def setup_histograms(setup: Setup, catalog: CardCatalog | None = None) -> SetupHistograms:
    """Count costs, card types and expansions over every card of the setup."""
    catalog = catalog or CardCatalog.default()
    cards = setup.cards()
    all_costs = {catalog.base_cost(card) for card in catalog.kingdom_cards}
    return SetupHistograms(
        costs=Histogram.of((catalog.base_cost(card) for card in cards), buckets=all_costs),
        types=Histogram.of(
            (card_type for card in cards for card_type in catalog.card_types(card)),
            buckets=CardType,
        ),
        expansions=Histogram.of(
            expansion for card in cards for expansion in catalog.expansions_of(card)
        ),
    )


def _sort_key(value: object) -> tuple:
    if isinstance(value, (CardType, Expansion)):
        return (1, list(type(value)).index(value))
    return (0, value)


def _label(value: object) -> str:
    return value.value if isinstance(value, (CardType, Expansion)) else str(value)
