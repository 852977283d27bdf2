"""Kingdom setup generation."""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, Sequence

from .cards import BaneCard, Expansion, KingdomCard, Project
from .catalog import CardCatalog
from .exceptions import (
    CouldNotSatisfyBaneCard,
    CouldNotSatisfyKingdomCards,
    CouldNotSatisfyProjectsFromExpansions,
    CouldNotSatisfySecondZebra,
    IntersectingCardBansAndIncludes,
    TooManyCardsIncluded,
)
from .randomness import RandomSource, StdlibRandomSource
from .setups import Setup, SetupConfig

logger = logging.getLogger(__name__)

KINGDOM_SIZE = 10
BANE_COSTS = frozenset({2, 3})
# Upper bound (exclusive) for the project count when none is requested.
RANDOM_PROJECT_LIMIT = 3


class SetupGenerator:
    """Pick kingdom cards, projects and banes that satisfy a ``SetupConfig``."""

    def __init__(
        self,
        catalog: CardCatalog | None = None,
        *,
        rng: RandomSource | None = None,
        max_bane_retries: int | None = None,
    ) -> None:
        if max_bane_retries is not None and max_bane_retries < 0:
            raise ValueError("max_bane_retries cannot be negative")
        self._catalog = catalog or CardCatalog.default()
        self._rng = rng or StdlibRandomSource()
        self._max_bane_retries = max_bane_retries

    @property
    def catalog(self) -> CardCatalog:
        return self._catalog

    def generate(self, config: SetupConfig | None = None) -> Setup:
        """Return a setup satisfying ``config`` or raise a ``GenSetupError``."""
        config = config or SetupConfig()
        banned = config.ban_cards or frozenset()
        forced = config.include_cards or frozenset()

        conflicts = banned & forced
        if conflicts:
            raise IntersectingCardBansAndIncludes(conflicts)

        if len(forced) > KINGDOM_SIZE:
            raise TooManyCardsIncluded()

        desired = self._desired_expansions(config)
        possible_projects = self._project_candidates(desired)
        if config.project_count is not None and config.project_count.count > len(possible_projects):
            raise CouldNotSatisfyProjectsFromExpansions(
                f"Asked for {config.project_count.count} projects but the chosen expansions "
                f"only offer {len(possible_projects)}"
            )

        possible_cards = self._kingdom_candidates(desired, banned, forced)
        logger.debug(
            "Generating setup from %d candidate cards and %d candidate projects",
            len(possible_cards),
            len(possible_projects),
        )

        retries = (
            self._max_bane_retries if self._max_bane_retries is not None else len(possible_cards)
        )
        for attempt in range(retries + 1):
            setup = self._draw(config, possible_projects, possible_cards, forced)
            if setup is not None:
                return setup
            if attempt < retries:
                logger.info(
                    "No bane left for Young Witch, redrawing kingdom (retry %d of %d)",
                    attempt + 1,
                    retries,
                )

        logger.warning("Gave up finding a Young Witch bane after %d retries", retries)
        raise CouldNotSatisfyBaneCard(
            f"No cost 2 or 3 card was left over for Young Witch after {retries} retries"
        )

    def _draw(
        self,
        config: SetupConfig,
        possible_projects: Sequence[Project],
        possible_cards: Sequence[KingdomCard],
        forced: frozenset[KingdomCard],
    ) -> Setup | None:
        """Run one randomized draw. ``None`` means Young Witch should be retried."""
        project_cards = self._draw_projects(config, possible_projects)

        shuffled = list(possible_cards)
        self._rng.shuffle(shuffled)

        random_needed = KINGDOM_SIZE - len(forced)
        kingdom_cards = shuffled[:random_needed]
        kingdom_cards.extend(sorted(forced, key=lambda card: card.value))
        if len(kingdom_cards) < KINGDOM_SIZE:
            raise CouldNotSatisfyKingdomCards(
                f"Only {len(kingdom_cards)} kingdom cards survive the filters, need {KINGDOM_SIZE}"
            )

        leftovers = self._cheap_cards(shuffled[random_needed:])

        bane_card = None
        if KingdomCard.YOUNG_WITCH in kingdom_cards:
            bane_card = next(leftovers, None)
            if bane_card is None:
                if any(self._catalog.base_cost(card) in BANE_COSTS for card in kingdom_cards):
                    return None
                raise CouldNotSatisfyBaneCard()
            logger.debug("Young Witch bane is %s", bane_card.value)

        bane_cards = self._draw_bane_tags(config, kingdom_cards)

        second_zebra = None
        if BaneCard.ZEBRA in bane_cards.values():
            second_zebra = next(leftovers, None)
            if second_zebra is None:
                raise CouldNotSatisfySecondZebra()

        return Setup(
            kingdom_cards=tuple(kingdom_cards),
            bane_card=bane_card,
            project_cards=tuple(project_cards),
            bane_cards=bane_cards,
            second_zebra=second_zebra,
        )

    def _desired_expansions(self, config: SetupConfig) -> frozenset[Expansion]:
        if config.include_expansions is None:
            return frozenset(self._catalog.expansions)
        return config.include_expansions

    def _project_candidates(self, desired: frozenset[Expansion]) -> list[Project]:
        return [
            project
            for project in self._catalog.projects
            if self._catalog.expansions_of(project) & desired
        ]

    def _kingdom_candidates(
        self,
        desired: frozenset[Expansion],
        banned: frozenset[KingdomCard],
        forced: frozenset[KingdomCard],
    ) -> list[KingdomCard]:
        return [
            card
            for card in self._catalog.kingdom_cards
            if self._catalog.expansions_of(card) & desired
            and card not in banned
            and card not in forced
        ]

    def _draw_projects(
        self, config: SetupConfig, possible_projects: Sequence[Project]
    ) -> list[Project]:
        if config.project_count is not None:
            count = config.project_count.count
        else:
            count = min(self._rng.randrange(RANDOM_PROJECT_LIMIT), len(possible_projects))
        return self._rng.sample(possible_projects, count)

    def _draw_bane_tags(
        self, config: SetupConfig, kingdom_cards: Sequence[KingdomCard]
    ) -> dict[KingdomCard, BaneCard]:
        count = config.bane_count.count if config.bane_count is not None else 0
        count = min(count, len(self._catalog.bane_cards))
        if not count:
            return {}
        tagged = self._rng.sample(kingdom_cards, count)
        tags = self._rng.sample(self._catalog.bane_cards, count)
        return dict(zip(tagged, tags))

    def _cheap_cards(self, cards: Iterable[KingdomCard]) -> Iterator[KingdomCard]:
        return (card for card in cards if self._catalog.base_cost(card) in BANE_COSTS)


def gen_setup(
    config: SetupConfig | None = None,
    *,
    catalog: CardCatalog | None = None,
    rng: RandomSource | None = None,
    max_bane_retries: int | None = None,
) -> Setup:
    """Generate a setup in one call, with a fresh generator."""
    generator = SetupGenerator(catalog, rng=rng, max_bane_retries=max_bane_retries)
    return generator.generate(config)
