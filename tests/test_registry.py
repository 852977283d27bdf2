from kingdomforge.domain.cards import KingdomCard
from kingdomforge.registry import (
    list_bane_counts,
    list_expansion_cards,
    list_expansions,
    list_kingdom_cards,
    list_project_counts,
)
from kingdomforge.testing import small_catalog


def test_listings_use_wire_names():
    cards = list_kingdom_cards()
    assert len(cards) == 186
    assert "YoungWitch" in cards
    assert list_expansions()[:3] == ["Base1", "Base2", "Renaissance"]
    assert list_project_counts() == [0, 1, 2]
    assert list_bane_counts() == [0, 1, 2, 3]


def test_expansion_cards_follow_catalog():
    catalog = small_catalog([KingdomCard.WITCH, KingdomCard.CHAPEL])
    assert list_expansion_cards(catalog) == {"Base2": ["Witch", "Chapel"]}
    assert "Sentry" in list_expansion_cards()["Base2"]
    assert "Sentry" not in list_expansion_cards()["Base1"]
