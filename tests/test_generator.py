import pytest

from kingdomforge.domain.cards import BaneCard, Expansion, KingdomCard, Project
from kingdomforge.domain.catalog import CardCatalog, base_cost, expansions
from kingdomforge.domain.exceptions import (
    CouldNotSatisfyBaneCard,
    CouldNotSatisfyKingdomCards,
    CouldNotSatisfyProjectsFromExpansions,
    CouldNotSatisfySecondZebra,
    IntersectingCardBansAndIncludes,
    TooManyCardsIncluded,
)
from kingdomforge.domain.generator import SetupGenerator, gen_setup
from kingdomforge.domain.randomness import StdlibRandomSource
from kingdomforge.domain.setups import BaneCount, ProjectCount, SetupConfig
from kingdomforge.testing import SetupConfigFactory, small_catalog, young_witch_config
from kingdomforge.testing.doubles import ScriptedRandom

SEEDS = range(40)

EXPENSIVE = (
    KingdomCard.SMITHY,
    KingdomCard.MARKET,
    KingdomCard.MILITIA,
    KingdomCard.MINE,
    KingdomCard.FESTIVAL,
    KingdomCard.LIBRARY,
    KingdomCard.LABORATORY,
    KingdomCard.WITCH,
    KingdomCard.GARDENS,
    KingdomCard.MONEYLENDER,
)


def generate(config=None, seed=0, **kwargs):
    return gen_setup(config, rng=StdlibRandomSource(seed), **kwargs)


def assert_setup_invariants(setup, config=SetupConfig()):
    assert len(setup.kingdom_cards) == 10
    assert len(set(setup.kingdom_cards)) == 10
    for card in setup.bane_cards:
        assert card in setup.kingdom_cards
    assert len(set(setup.bane_cards.values())) == len(setup.bane_cards)
    if setup.bane_card is not None:
        assert setup.bane_card not in setup.bane_cards
        assert setup.bane_card not in setup.kingdom_cards
        assert base_cost(setup.bane_card) in (2, 3)
    if setup.second_zebra is not None:
        assert setup.second_zebra not in setup.cards()
    if config.ban_cards:
        assert not set(setup.cards()) & config.ban_cards
    forced = config.include_cards or frozenset()
    assert forced <= set(setup.kingdom_cards)
    if config.include_expansions is not None:
        for card in setup.kingdom_cards:
            if card not in forced:
                assert expansions(card) & config.include_expansions


@pytest.mark.parametrize("seed", SEEDS)
def test_unconstrained_setups_hold_invariants(seed):
    setup = generate(SetupConfig.none(), seed)
    assert_setup_invariants(setup)
    assert len(setup.project_cards) < 3
    assert setup.bane_cards == {}


@pytest.mark.parametrize("seed", SEEDS)
def test_random_configs_hold_invariants(seed):
    config = SetupConfigFactory.seeded(seed).build()
    projects_possible = (
        config.include_expansions is None or Expansion.RENAISSANCE in config.include_expansions
    )
    if config.project_count and not projects_possible:
        with pytest.raises(CouldNotSatisfyProjectsFromExpansions):
            generate(config, seed)
        return
    setup = generate(config, seed)
    assert_setup_invariants(setup, config)
    if config.bane_count is not None:
        assert len(setup.bane_cards) == config.bane_count.count
    if config.project_count is not None:
        assert len(setup.project_cards) == config.project_count.count


def test_same_seed_reproduces_the_same_setup():
    config = SetupConfig(bane_count=BaneCount.THREE_BANES, project_count=ProjectCount.TWO_PROJECTS)
    assert generate(config, seed=7) == generate(config, seed=7)


def test_expansion_list_is_respected():
    wanted = frozenset({Expansion.SEASIDE, Expansion.GUILDS})
    for seed in SEEDS:
        setup = generate(SetupConfig.including_expansions(wanted), seed)
        for card in setup.cards():
            assert expansions(card) & wanted


def test_empty_expansions_cannot_fill_a_kingdom():
    with pytest.raises(CouldNotSatisfyKingdomCards):
        generate(SetupConfig.including_expansions(set()))


def test_projects_need_an_expansion_that_has_them():
    config = SetupConfig(
        include_expansions={Expansion.BASE2}, project_count=ProjectCount.ONE_PROJECT
    )
    with pytest.raises(CouldNotSatisfyProjectsFromExpansions):
        generate(config)


@pytest.mark.parametrize("project_count", list(ProjectCount))
def test_forcing_project_count_returns_that_many_projects(project_count):
    setup = generate(SetupConfig(project_count=project_count))
    assert len(setup.project_cards) == project_count.count
    assert len(set(setup.project_cards)) == project_count.count


@pytest.mark.parametrize("bane_count", list(BaneCount))
def test_forcing_bane_count_returns_that_many_bane_tags(bane_count):
    setup = generate(SetupConfig(bane_count=bane_count))
    assert len(setup.bane_cards) == bane_count.count


def test_banned_cards_dont_come_up():
    banned = {KingdomCard.WITCH, KingdomCard.MILITIA}
    config = SetupConfig(include_expansions={Expansion.BASE2}, ban_cards=banned)
    for seed in SEEDS:
        assert not set(generate(config, seed).cards()) & banned


def test_included_cards_are_included_outside_chosen_expansions():
    config = SetupConfig(
        include_expansions={Expansion.SEASIDE},
        include_cards={KingdomCard.CHAPEL, KingdomCard.MOUNTEBANK},
        ban_cards={KingdomCard.YOUNG_WITCH},
    )
    setup = generate(config)
    assert {KingdomCard.CHAPEL, KingdomCard.MOUNTEBANK} <= set(setup.kingdom_cards)
    assert len(setup.cards()) == 10


def test_ten_included_cards_make_the_whole_kingdom():
    forced = frozenset(EXPENSIVE)
    setup = generate(SetupConfig.including_cards(forced))
    assert set(setup.kingdom_cards) == forced


def test_cannot_include_more_than_ten_cards():
    config = SetupConfig(
        include_expansions=set(),
        include_cards=set(list(KingdomCard)[:11]),
        project_count=ProjectCount.TWO_PROJECTS,
    )
    with pytest.raises(TooManyCardsIncluded):
        generate(config)


def test_bans_and_includes_cannot_intersect():
    config = SetupConfig(
        ban_cards={KingdomCard.WITCH, KingdomCard.MOAT, KingdomCard.CHAPEL},
        include_cards={KingdomCard.WITCH, KingdomCard.CHAPEL, KingdomCard.VILLAGE},
    )
    with pytest.raises(IntersectingCardBansAndIncludes) as excinfo:
        generate(config)
    assert set(excinfo.value.cards) == {KingdomCard.WITCH, KingdomCard.CHAPEL}


def test_intersection_is_reported_before_anything_else():
    config = SetupConfig(
        include_expansions=set(),
        ban_cards=set(KingdomCard),
        include_cards=set(KingdomCard),
    )
    with pytest.raises(IntersectingCardBansAndIncludes) as excinfo:
        generate(config)
    assert len(excinfo.value.cards) == len(KingdomCard)


def test_banning_every_card_leaves_no_kingdom():
    with pytest.raises(CouldNotSatisfyKingdomCards):
        generate(SetupConfig(ban_cards=set(KingdomCard)))


@pytest.mark.parametrize("seed", SEEDS)
def test_young_witch_implies_an_eleventh_cheap_bane(seed):
    setup = generate(young_witch_config(), seed)
    assert setup.bane_card is not None
    assert base_cost(setup.bane_card) in (2, 3)
    assert len(setup.cards()) == 11
    assert len(set(setup.cards())) == 11


def test_no_young_witch_no_bane_card():
    config = SetupConfig(
        include_expansions={Expansion.CORNUCOPIA}, ban_cards={KingdomCard.YOUNG_WITCH}
    )
    for seed in SEEDS:
        setup = generate(config, seed)
        assert setup.bane_card is None
        assert len(setup.cards()) == 10


def test_bans_can_make_the_bane_card_impossible():
    # Cornucopia keeps exactly ten cards, none of which cost 2 or 3.
    config = SetupConfig(
        include_expansions={Expansion.CORNUCOPIA},
        ban_cards={KingdomCard.HAMLET, KingdomCard.FORTUNE_TELLER, KingdomCard.MENAGERIE},
    )
    with pytest.raises(CouldNotSatisfyBaneCard):
        generate(config)


@pytest.mark.parametrize("seed", SEEDS)
def test_bane_tags_never_include_the_young_witch_bane(seed):
    setup = generate(young_witch_config(bane_count=BaneCount.THREE_BANES), seed)
    assert setup.bane_card not in setup.bane_cards
    assert_setup_invariants(setup)


@pytest.mark.parametrize("seed", SEEDS)
def test_zebra_implies_a_second_card_outside_the_kingdom(seed):
    setup = generate(young_witch_config(bane_count=BaneCount.THREE_BANES), seed)
    if BaneCard.ZEBRA in setup.bane_cards.values():
        assert setup.second_zebra is not None
        assert base_cost(setup.second_zebra) in (2, 3)
        assert setup.second_zebra not in setup.cards()
    else:
        assert setup.second_zebra is None


def test_scripted_draw_picks_bane_and_zebra_from_leftovers_in_order(scripted):
    catalog = small_catalog(
        (KingdomCard.YOUNG_WITCH, *EXPENSIVE[:9], KingdomCard.MONEYLENDER, KingdomCard.CHAPEL, KingdomCard.MOAT)
    )
    setup = SetupGenerator(catalog, rng=scripted).generate(
        SetupConfig(bane_count=BaneCount.ONE_BANE)
    )
    assert setup.kingdom_cards == (KingdomCard.YOUNG_WITCH, *EXPENSIVE[:9])
    assert setup.bane_card is KingdomCard.CHAPEL
    assert dict(setup.bane_cards) == {KingdomCard.YOUNG_WITCH: BaneCard.ZEBRA}
    assert setup.second_zebra is KingdomCard.MOAT
    assert setup.project_cards == ()


def test_zebra_without_leftovers_fails(scripted):
    catalog = small_catalog(
        (KingdomCard.YOUNG_WITCH, *EXPENSIVE[:9], KingdomCard.MONEYLENDER, KingdomCard.CHAPEL)
    )
    generator = SetupGenerator(catalog, rng=scripted)
    with pytest.raises(CouldNotSatisfySecondZebra):
        generator.generate(SetupConfig(bane_count=BaneCount.ONE_BANE))


def test_forced_cards_follow_the_random_fill(scripted):
    catalog = small_catalog((*EXPENSIVE, KingdomCard.CHAPEL, KingdomCard.MOAT))
    setup = SetupGenerator(catalog, rng=scripted).generate(
        SetupConfig.including_cards({KingdomCard.CHAPEL, KingdomCard.MOAT})
    )
    assert setup.kingdom_cards == (*EXPENSIVE[:8], KingdomCard.CHAPEL, KingdomCard.MOAT)


def test_missing_bane_is_retried_when_a_redraw_could_work():
    cards = (KingdomCard.CHAPEL, *EXPENSIVE, KingdomCard.YOUNG_WITCH)
    rng = ScriptedRandom(reverse_from=2)
    setup = SetupGenerator(small_catalog(cards), rng=rng).generate(young_witch_config())
    assert rng.shuffle_calls == 2
    assert setup.bane_card is KingdomCard.CHAPEL
    assert KingdomCard.CHAPEL not in setup.kingdom_cards


def test_bane_retries_are_capped():
    cards = (KingdomCard.CHAPEL, *EXPENSIVE, KingdomCard.YOUNG_WITCH)
    rng = ScriptedRandom()
    generator = SetupGenerator(small_catalog(cards), rng=rng, max_bane_retries=3)
    with pytest.raises(CouldNotSatisfyBaneCard):
        generator.generate(young_witch_config())
    assert rng.shuffle_calls == 4


def test_default_retry_cap_is_the_candidate_pool_size():
    cards = (KingdomCard.CHAPEL, *EXPENSIVE, KingdomCard.YOUNG_WITCH)
    rng = ScriptedRandom()
    with pytest.raises(CouldNotSatisfyBaneCard):
        SetupGenerator(small_catalog(cards), rng=rng).generate(young_witch_config())
    assert rng.shuffle_calls == 12


def test_no_cheap_card_anywhere_fails_without_retrying():
    cards = (*EXPENSIVE, KingdomCard.YOUNG_WITCH, KingdomCard.BUREAUCRAT)
    rng = ScriptedRandom()
    with pytest.raises(CouldNotSatisfyBaneCard):
        SetupGenerator(small_catalog(cards), rng=rng).generate(young_witch_config())
    assert rng.shuffle_calls == 1


def test_unrequested_project_count_is_clipped_to_available_projects():
    rng = ScriptedRandom(project_roll=2)
    catalog = small_catalog(EXPENSIVE, projects=(Project.ACADEMY,))
    setup = SetupGenerator(catalog, rng=rng).generate()
    assert setup.project_cards == (Project.ACADEMY,)

    setup = SetupGenerator(catalog, rng=rng).generate(
        SetupConfig.including_expansions({Expansion.BASE2})
    )
    assert setup.project_cards == ()


def test_negative_retry_cap_is_rejected():
    with pytest.raises(ValueError):
        SetupGenerator(CardCatalog.default(), max_bane_retries=-1)
