"""Validation utilities for KingdomForge catalogs."""

from __future__ import annotations

from typing import Mapping

from .domain.cards import CardType, Expansion, KingdomCard, Project
from .domain.catalog import CardCatalog
from .domain.tables import BASE_COSTS, CARD_EXPANSIONS, CARD_TYPES, PROJECT_EXPANSIONS

MIN_COST = 2
MAX_COST = 8


def validate_tables(
    *,
    base_costs: Mapping[KingdomCard, int] = BASE_COSTS,
    card_types: Mapping[KingdomCard, frozenset[CardType]] = CARD_TYPES,
    card_expansions: Mapping[KingdomCard, frozenset[Expansion]] = CARD_EXPANSIONS,
    project_expansions: Mapping[Project, frozenset[Expansion]] = PROJECT_EXPANSIONS,
) -> list[str]:
    """Return list of problems found in the static card tables."""
    errors: list[str] = []

    for card in KingdomCard:
        if card not in base_costs:
            errors.append(f"Card '{card.value}' has no base cost.")
        elif not MIN_COST <= base_costs[card] <= MAX_COST:
            errors.append(
                f"Card '{card.value}' has base cost {base_costs[card]} outside {MIN_COST}-{MAX_COST}."
            )

        if not card_types.get(card):
            errors.append(f"Card '{card.value}' has no card types.")
        if not card_expansions.get(card):
            errors.append(f"Card '{card.value}' does not belong to any expansion.")

    for project in Project:
        if not project_expansions.get(project):
            errors.append(f"Project '{project.value}' does not belong to any expansion.")

    for table_name, table in (
        ("base cost", base_costs),
        ("card type", card_types),
        ("expansion", card_expansions),
    ):
        for card in table:
            if not isinstance(card, KingdomCard):
                errors.append(f"The {table_name} table lists unknown card '{card}'.")

    return errors


def validate_catalog(catalog: CardCatalog) -> list[str]:
    """Return list of problems that would stop the generator from using ``catalog``."""
    errors: list[str] = []
    known_expansions = set(catalog.expansions)

    for card in catalog.kingdom_cards:
        cost = catalog.base_cost(card)
        if not MIN_COST <= cost <= MAX_COST:
            errors.append(f"Card '{card.value}' has base cost {cost} outside {MIN_COST}-{MAX_COST}.")
        if not catalog.card_types(card):
            errors.append(f"Card '{card.value}' has no card types.")
        card_expansions = catalog.expansions_of(card)
        if not card_expansions:
            errors.append(f"Card '{card.value}' does not belong to any expansion.")
        for expansion in card_expansions - known_expansions:
            errors.append(f"Card '{card.value}' references unknown expansion '{expansion.value}'.")

    for project in catalog.projects:
        if not catalog.expansions_of(project):
            errors.append(f"Project '{project.value}' does not belong to any expansion.")

    if len(set(catalog.kingdom_cards)) != len(catalog.kingdom_cards):
        errors.append("Catalog lists some kingdom cards more than once.")
    if len(set(catalog.bane_cards)) != len(catalog.bane_cards):
        errors.append("Catalog lists some bane cards more than once.")

    return errors


__all__ = ["validate_catalog", "validate_tables"]
