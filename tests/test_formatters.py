from datetime import date

import pytest

from kingdomforge.domain.cards import BaneCard, KingdomCard, Project
from kingdomforge.domain.exceptions import (
    CouldNotSatisfyBaneCard,
    CouldNotSatisfyKingdomCards,
    CouldNotSatisfyProjectsFromExpansions,
    CouldNotSatisfySecondZebra,
    IntersectingCardBansAndIncludes,
    TooManyCardsIncluded,
)
from kingdomforge.domain.setups import Setup
from kingdomforge.formatting import (
    format_card,
    format_code,
    format_error,
    format_histograms,
    format_setup,
    spaced,
)

KINGDOM = (
    KingdomCard.CELLAR,
    KingdomCard.CHAPEL,
    KingdomCard.MOAT,
    KingdomCard.HARBINGER,
    KingdomCard.MERCHANT,
    KingdomCard.VASSAL,
    KingdomCard.VILLAGE,
    KingdomCard.WORKSHOP,
    KingdomCard.BUREAUCRAT,
    KingdomCard.GARDENS,
)


@pytest.fixture()
def setup() -> Setup:
    return Setup(
        kingdom_cards=KINGDOM,
        bane_card=KingdomCard.LURKER,
        project_cards=(Project.CITY_GATE, Project.ACADEMY),
        bane_cards={KingdomCard.CHAPEL: BaneCard.ZEBRA, KingdomCard.MOAT: BaneCard.FLANK},
        second_zebra=KingdomCard.PAWN,
    )


def test_spaced_splits_camel_case():
    assert spaced(KingdomCard.YOUNG_WITCH) == "Young Witch"
    assert spaced(Project.CITY_GATE) == "City Gate"
    assert spaced("Moat") == "Moat"


def test_format_card_marks_banes(setup):
    assert format_card(KingdomCard.CHAPEL, setup) == " - Chapel (Zebra with Pawn)"
    assert format_card(KingdomCard.MOAT, setup) == " - Moat (Flank)"
    assert format_card(KingdomCard.LURKER, setup) == " - Lurker (Bane)"
    assert format_card(KingdomCard.CELLAR, setup) == " - Cellar"


def test_format_setup_groups_cards_by_expansion(setup):
    rule = "=" * 51
    expected = "\n".join(
        [
            rule,
            "=== Kingdom Cards ===",
            rule,
            "",
            "Base1/Base2",
            " - Bureaucrat",
            " - Cellar",
            " - Chapel (Zebra with Pawn)",
            " - Gardens",
            " - Moat (Flank)",
            " - Village",
            " - Workshop",
            "Base2",
            " - Harbinger",
            " - Merchant",
            " - Vassal",
            "Intrigue2",
            " - Lurker (Bane)",
            "",
            rule,
            "=== Project Cards ===",
            rule,
            "",
            "Renaissance",
            " - Academy",
            " - City Gate",
        ]
    )
    assert format_setup(setup) == expected


def test_format_setup_skips_empty_project_section():
    text = format_setup(Setup(kingdom_cards=KINGDOM))
    assert "Project Cards" not in text
    assert " - Lurker" not in text


def test_format_code_picks_the_setup_shape(setup):
    text = format_code("The Moat of the Woods", setup, today=date(2024, 3, 9))
    assert 'name = Just "The Moat of the Woods at 2024-03-09"' in text
    assert "Date {year=2024, month=3, day=9}" in text
    assert "setup = S.baneWithProjects Lurker [CityGate, Academy] [Cellar, Chapel," in text

    plain = format_code("Game", Setup(kingdom_cards=KINGDOM), today=date(2024, 3, 9))
    assert "setup = S.standard [Cellar, Chapel, Moat," in plain
    bane_only = format_code("Game", Setup.bane(KingdomCard.LURKER, KINGDOM), today=date(2024, 3, 9))
    assert "setup = S.bane Lurker [Cellar," in bane_only
    projects_only = format_code(
        "Game", Setup(kingdom_cards=KINGDOM, project_cards=(Project.FAIR,)), today=date(2024, 3, 9)
    )
    assert "setup = S.standardWithProjects [Fair] [Cellar," in projects_only


def test_format_histograms_counts_every_card(setup):
    text = format_histograms(setup)
    assert text.startswith("Cards' costs:\n-------------\n")
    assert "2: #### (4)" in text
    assert "3: ##### (5)" in text
    assert "8:  (0)" in text
    assert "Action  : ########## (10)" in text
    assert "Duration:  (0)" in text
    assert "Base2    : ########## (10)" in text
    assert "Intrigue2: # (1)" in text


@pytest.mark.parametrize(
    ("error", "fragment"),
    [
        (CouldNotSatisfyKingdomCards(), "Could not pick 10 kingdom cards!"),
        (CouldNotSatisfyBaneCard(), "Could not pick a bane card!"),
        (CouldNotSatisfySecondZebra(), "Could not pick a second zebra card!"),
        (CouldNotSatisfyProjectsFromExpansions(), "The requested project count could not be satisfied!"),
        (TooManyCardsIncluded(), "more than 10 cards"),
        (
            IntersectingCardBansAndIncludes([KingdomCard.WITCH, KingdomCard.CHAPEL]),
            "The following exist in the ban and include lists: Chapel, Witch",
        ),
    ],
)
def test_format_error_explains_the_failure(error, fragment):
    assert fragment in format_error(error)
