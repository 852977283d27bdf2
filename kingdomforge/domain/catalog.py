"""Read-only card catalog consumed by the setup generator."""

from __future__ import annotations

from typing import Iterable, Mapping

from .cards import BaneCard, CardType, Expansion, KingdomCard, Project
from .tables import BASE_COSTS, CARD_EXPANSIONS, CARD_TYPES, PROJECT_EXPANSIONS


class CardCatalog:
    """Lookup of kingdom cards, projects, bane tags and their attributes.

    Catalog order follows the order cards are given in, which is the enum
    declaration order for the default catalog. The generator relies on that
    order being stable so seeded runs are reproducible.
    """

    _default: "CardCatalog | None" = None

    def __init__(
        self,
        *,
        kingdom_cards: Iterable[KingdomCard],
        projects: Iterable[Project],
        bane_cards: Iterable[BaneCard],
        base_costs: Mapping[KingdomCard, int],
        card_types: Mapping[KingdomCard, Iterable[CardType]],
        card_expansions: Mapping[KingdomCard, Iterable[Expansion]],
        project_expansions: Mapping[Project, Iterable[Expansion]],
        expansions: Iterable[Expansion] | None = None,
    ) -> None:
        self.kingdom_cards: tuple[KingdomCard, ...] = tuple(kingdom_cards)
        self.projects: tuple[Project, ...] = tuple(projects)
        self.bane_cards: tuple[BaneCard, ...] = tuple(bane_cards)
        self.expansions: tuple[Expansion, ...] = tuple(Expansion if expansions is None else expansions)

        missing = [
            card.value
            for card in self.kingdom_cards
            if card not in base_costs or card not in card_types or card not in card_expansions
        ]
        missing += [project.value for project in self.projects if project not in project_expansions]
        if missing:
            raise ValueError(f"Catalog tables are missing entries for: {', '.join(missing)}")

        self._costs = {card: int(base_costs[card]) for card in self.kingdom_cards}
        self._types = {card: frozenset(card_types[card]) for card in self.kingdom_cards}
        self._card_expansions = {
            card: frozenset(card_expansions[card]) for card in self.kingdom_cards
        }
        self._project_expansions = {
            project: frozenset(project_expansions[project]) for project in self.projects
        }

    @classmethod
    def default(cls) -> "CardCatalog":
        """Shared catalog of every supported card. Never mutated after creation."""
        if cls._default is None:
            cls._default = cls(
                kingdom_cards=KingdomCard,
                projects=Project,
                bane_cards=BaneCard,
                base_costs=BASE_COSTS,
                card_types=CARD_TYPES,
                card_expansions=CARD_EXPANSIONS,
                project_expansions=PROJECT_EXPANSIONS,
            )
        return cls._default

    def base_cost(self, card: KingdomCard) -> int:
        try:
            return self._costs[card]
        except KeyError as exc:
            raise KeyError(f"Card {card} not found") from exc

    def card_types(self, card: KingdomCard) -> frozenset[CardType]:
        try:
            return self._types[card]
        except KeyError as exc:
            raise KeyError(f"Card {card} not found") from exc

    def expansions_of(self, item: KingdomCard | Project) -> frozenset[Expansion]:
        try:
            if isinstance(item, Project):
                return self._project_expansions[item]
            return self._card_expansions[item]
        except KeyError as exc:
            raise KeyError(f"Card {item} not found") from exc

    def cards_by_expansion(self) -> dict[Expansion, list[KingdomCard]]:
        results: dict[Expansion, list[KingdomCard]] = {}
        for card in self.kingdom_cards:
            for expansion in sorted(self._card_expansions[card], key=self.expansions.index):
                results.setdefault(expansion, []).append(card)
        return results


def base_cost(card: KingdomCard) -> int:
    return CardCatalog.default().base_cost(card)


def card_types(card: KingdomCard) -> frozenset[CardType]:
    return CardCatalog.default().card_types(card)


def expansions(item: KingdomCard | Project) -> frozenset[Expansion]:
    return CardCatalog.default().expansions_of(item)
