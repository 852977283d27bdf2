"""Exceptions raised by KingdomForge domain services."""

from __future__ import annotations

from typing import Any, Iterable

from .cards import KingdomCard


class KingdomForgeError(RuntimeError):
    """Base class for domain exceptions."""


class GenSetupError(KingdomForgeError):
    """Raised when no setup satisfies the requested configuration.

    ``kind`` carries the stable wire spelling of the failure so adapters can
    report it without depending on the Python class name.
    """

    kind: str = "GenSetupError"
    default_message = "Could not generate a setup"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)

    def to_dict(self) -> Any:
        return self.kind


class IntersectingCardBansAndIncludes(GenSetupError):
    """Raised when the same cards are both banned and forced into the kingdom."""

    kind = "IntersectingCardBansAndIncludes"

    def __init__(self, cards: Iterable[KingdomCard]) -> None:
        self.cards = tuple(sorted(cards, key=lambda card: card.value))
        names = ", ".join(card.value for card in self.cards)
        super().__init__(f"Cards both banned and included: {names}")

    def to_dict(self) -> Any:
        return {self.kind: [card.value for card in self.cards]}


class TooManyCardsIncluded(GenSetupError):
    """Raised when more cards are forced than a kingdom holds."""

    kind = "TooManyCardsIncluded"
    default_message = "More than 10 cards were asked to be included"


class CouldNotSatisfyKingdomCards(GenSetupError):
    """Raised when filters leave fewer than ten kingdom cards."""

    kind = "CouldNotSatisfyKingdomCards"
    default_message = "Not enough kingdom cards left to pick 10"


class CouldNotSatisfyProjectsFromExpansions(GenSetupError):
    """Raised when the chosen expansions cannot supply the requested projects."""

    kind = "CouldNotSatisfyProjectsFromExpansions"
    default_message = "Not enough projects in the chosen expansions"


class CouldNotSatisfyBaneCard(GenSetupError):
    """Raised when Young Witch has no cost 2 or 3 card to use as its bane."""

    kind = "CouldNotSatisfyBaneCard"
    default_message = "No cost 2 or 3 card available as a bane"


class CouldNotSatisfySecondZebra(GenSetupError):
    """Raised when a Zebra tag has no card left to pair with."""

    kind = "CouldNotSatisfySecondZebra"
    default_message = "No card available as a second zebra"


GEN_SETUP_ERRORS: tuple[type[GenSetupError], ...] = (
    CouldNotSatisfyProjectsFromExpansions,
    CouldNotSatisfyKingdomCards,
    CouldNotSatisfyBaneCard,
    CouldNotSatisfySecondZebra,
    IntersectingCardBansAndIncludes,
    TooManyCardsIncluded,
)
