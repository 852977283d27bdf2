"""JSON-ready listings of what the catalog offers."""

from __future__ import annotations

from .domain.catalog import CardCatalog
from .domain.setups import BaneCount, ProjectCount


def list_kingdom_cards(catalog: CardCatalog | None = None) -> list[str]:
    catalog = catalog or CardCatalog.default()
    return [card.value for card in catalog.kingdom_cards]


def list_expansions(catalog: CardCatalog | None = None) -> list[str]:
    catalog = catalog or CardCatalog.default()
    return [expansion.value for expansion in catalog.expansions]


def list_expansion_cards(catalog: CardCatalog | None = None) -> dict[str, list[str]]:
    """Map each expansion name to the names of its kingdom cards."""
    catalog = catalog or CardCatalog.default()
    return {
        expansion.value: [card.value for card in cards]
        for expansion, cards in catalog.cards_by_expansion().items()
    }


def list_project_counts() -> list[int]:
    return [int(count) for count in ProjectCount]


def list_bane_counts() -> list[int]:
    return [int(count) for count in BaneCount]


__all__ = [
    "list_bane_counts",
    "list_expansion_cards",
    "list_expansions",
    "list_kingdom_cards",
    "list_project_counts",
]
