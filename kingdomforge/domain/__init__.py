"""Domain models and services."""

from .cards import BaneCard, CardType, Expansion, KingdomCard, Project
from .catalog import CardCatalog, base_cost, card_types, expansions
from .setups import BaneCount, ProjectCount, Setup, SetupConfig
from .randomness import RandomSource, StdlibRandomSource
from .generator import KINGDOM_SIZE, SetupGenerator, gen_setup
from .exceptions import (
    CouldNotSatisfyBaneCard,
    CouldNotSatisfyKingdomCards,
    CouldNotSatisfyProjectsFromExpansions,
    CouldNotSatisfySecondZebra,
    GenSetupError,
    IntersectingCardBansAndIncludes,
    KingdomForgeError,
    TooManyCardsIncluded,
)

__all__ = [
    "BaneCard",
    "CardType",
    "Expansion",
    "KingdomCard",
    "Project",
    "CardCatalog",
    "base_cost",
    "card_types",
    "expansions",
    "BaneCount",
    "ProjectCount",
    "Setup",
    "SetupConfig",
    "RandomSource",
    "StdlibRandomSource",
    "KINGDOM_SIZE",
    "SetupGenerator",
    "gen_setup",
    "CouldNotSatisfyBaneCard",
    "CouldNotSatisfyKingdomCards",
    "CouldNotSatisfyProjectsFromExpansions",
    "CouldNotSatisfySecondZebra",
    "GenSetupError",
    "IntersectingCardBansAndIncludes",
    "KingdomForgeError",
    "TooManyCardsIncluded",
]
