"""Human-readable renderings of setups and setup errors."""

from __future__ import annotations

import re
from datetime import date
from enum import Enum
from typing import Iterable

from .diagnostics.histograms import setup_histograms
from .domain.cards import BaneCard, KingdomCard
from .domain.catalog import CardCatalog
from .domain.exceptions import (
    CouldNotSatisfyBaneCard,
    CouldNotSatisfyKingdomCards,
    CouldNotSatisfyProjectsFromExpansions,
    CouldNotSatisfySecondZebra,
    GenSetupError,
    IntersectingCardBansAndIncludes,
    TooManyCardsIncluded,
)
from .domain.setups import Setup

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")

SECTION_RULE = "=" * 51


def spaced(value: Enum | str) -> str:
    """``YoungWitch`` -> ``Young Witch``."""
    name = value.value if isinstance(value, Enum) else value
    return _CAMEL_BOUNDARY.sub(" ", name)


def format_card(card: KingdomCard, setup: Setup) -> str:
    tag = setup.bane_cards.get(card)
    if tag is BaneCard.ZEBRA:
        partner = spaced(setup.second_zebra) if setup.second_zebra else ""
        return f" - {spaced(card)} (Zebra with {partner})"
    if tag is not None:
        return f" - {spaced(card)} ({spaced(tag)})"
    if setup.bane_card is card:
        return f" - {spaced(card)} (Bane)"
    return f" - {spaced(card)}"


def format_setup(setup: Setup, catalog: CardCatalog | None = None) -> str:
    """Cards grouped by expansion, ready for a physical table setup."""
    catalog = catalog or CardCatalog.default()
    sections = [
        _section(
            "Kingdom Cards",
            _group_by_expansion(
                sorted(setup.cards(), key=lambda card: card.value),
                catalog,
                lambda card: format_card(card, setup),
            ),
        )
    ]
    if setup.project_cards:
        sections.append(
            _section(
                "Project Cards",
                _group_by_expansion(
                    sorted(setup.project_cards, key=lambda project: project.value),
                    catalog,
                    lambda project: f" - {spaced(project)}",
                ),
            )
        )
    return "\n\n".join(sections)


def format_code(name: str, setup: Setup, *, today: date | None = None) -> str:
    """History entry with the setup (largely) filled out."""
    today = today or date.today()
    return (
        f'  , Played {{ name = Just "{name} at {today.isoformat()}"\n'
        f"           , at = Just $ Date {{year={today.year}, month={today.month}, day={today.day}}}\n"
        f"           , setup = {_setup_expression(setup)}\n"
        f"           , players = Just []\n"
        f"           , rating = Nothing\n"
        f"           }}\n"
    )


def format_histograms(setup: Setup, catalog: CardCatalog | None = None) -> str:
    histograms = setup_histograms(setup, catalog)
    return "\n\n".join(
        [
            _titled("Cards' costs", histograms.costs.pretty()),
            _titled("Cards' types", histograms.types.pretty()),
            _titled("Expansions' cards", histograms.expansions.pretty()),
        ]
    )


def format_error(error: GenSetupError) -> str:
    """Explain a generation failure and how to fix the configuration."""
    if isinstance(error, CouldNotSatisfyProjectsFromExpansions):
        return (
            "The requested project count could not be satisfied! "
            "Ensure you're not specifying expansions which preclude projects."
        )
    if isinstance(error, CouldNotSatisfyKingdomCards):
        return "Could not pick 10 kingdom cards! Ensure your filters don't over-limit cards."
    if isinstance(error, CouldNotSatisfyBaneCard):
        return "Could not pick a bane card! Ensure your filters don't over-limit cards."
    if isinstance(error, CouldNotSatisfySecondZebra):
        return "Could not pick a second zebra card! Ensure your filters don't over-limit cards."
    if isinstance(error, IntersectingCardBansAndIncludes):
        cards = ", ".join(card.value for card in error.cards)
        return (
            "Cards can't be both banned and included! "
            f"The following exist in the ban and include lists: {cards}"
        )
    if isinstance(error, TooManyCardsIncluded):
        return (
            "Too many cards were asked to be included! "
            "A kingdom can't be generated with more than 10 cards."
        )
    return str(error)


def _setup_expression(setup: Setup) -> str:
    kingdom = _list(setup.kingdom_cards)
    projects = _list(setup.project_cards)
    if setup.bane_card is None and not setup.project_cards:
        return f"S.standard {kingdom}"
    if setup.bane_card is not None and not setup.project_cards:
        return f"S.bane {setup.bane_card.value} {kingdom}"
    if setup.bane_card is None:
        return f"S.standardWithProjects {projects} {kingdom}"
    return f"S.baneWithProjects {setup.bane_card.value} {projects} {kingdom}"


def _list(values: Iterable[Enum]) -> str:
    return "[" + ", ".join(value.value for value in values) + "]"


def _group_by_expansion(items, catalog: CardCatalog, render) -> str:
    groups: dict[str, list[str]] = {}
    for item in items:
        expansions = sorted(catalog.expansions_of(item), key=catalog.expansions.index)
        label = "/".join(expansion.value for expansion in expansions)
        groups.setdefault(label, []).append(render(item))
    return "\n".join(f"{label}\n" + "\n".join(lines) for label, lines in sorted(groups.items()))


def _section(title: str, body: str) -> str:
    return f"{SECTION_RULE}\n=== {title} ===\n{SECTION_RULE}\n\n{body}"


def _titled(title: str, body: str) -> str:
    return f"{title}:\n{'-' * (len(title) + 1)}\n{body}"


__all__ = [
    "format_card",
    "format_code",
    "format_error",
    "format_histograms",
    "format_setup",
    "spaced",
]
