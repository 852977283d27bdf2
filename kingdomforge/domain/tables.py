"""Static attribute tables for every kingdom card and project."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from .cards import CardType as CT
from .cards import Expansion as EX
from .cards import KingdomCard as KC
from .cards import Project


BASE_COSTS: Mapping[KC, int] = MappingProxyType({
    KC.EMBARGO: 2,
    KC.HAVEN: 2,
    KC.LIGHTHOUSE: 2,
    KC.NATIVE_VILLAGE: 2,
    KC.PEARL_DIVER: 2,
    KC.AMBASSADOR: 3,
    KC.FISHING_VILLAGE: 3,
    KC.LOOKOUT: 3,
    KC.SMUGGLERS: 3,
    KC.WAREHOUSE: 3,
    KC.CARAVAN: 4,
    KC.CUTPURSE: 4,
    KC.ISLAND: 4,
    KC.NAVIGATOR: 4,
    KC.PIRATE_SHIP: 4,
    KC.SALVAGER: 4,
    KC.SEA_HAG: 4,
    KC.TREASURE_MAP: 4,
    KC.BAZAAR: 5,
    KC.EXPLORER: 5,
    KC.GHOST_SHIP: 5,
    KC.MERCHANT_SHIP: 5,
    KC.OUTPOST: 5,
    KC.TACTICIAN: 5,
    KC.TREASURY: 5,
    KC.WHARF: 5,
    KC.COURTYARD: 2,
    KC.LURKER: 2,
    KC.PAWN: 2,
    KC.MASQUERADE: 3,
    KC.SHANTY_TOWN: 3,
    KC.STEWARD: 3,
    KC.SWINDLER: 3,
    KC.WISHING_WELL: 3,
    KC.BARON: 4,
    KC.BRIDGE: 4,
    KC.CONSPIRATOR: 4,
    KC.DIPLOMAT: 4,
    KC.IRONWORKS: 4,
    KC.MILL: 4,
    KC.MINING_VILLAGE: 4,
    KC.SECRET_PASSAGE: 4,
    KC.COURTIER: 5,
    KC.DUKE: 5,
    KC.MINION: 5,
    KC.PATROL: 5,
    KC.REPLACE: 5,
    KC.TORTURER: 5,
    KC.TRADING_POST: 5,
    KC.UPGRADE: 5,
    KC.HAREM: 6,
    KC.NOBLES: 6,
    KC.HARBINGER: 3,
    KC.MERCHANT: 3,
    KC.VASSAL: 3,
    KC.POACHER: 4,
    KC.SENTRY: 5,
    KC.ARTISAN: 6,
    KC.ACTING_TROUPE: 3,
    KC.ADVENTURER: 6,
    KC.ADVISOR: 4,
    KC.BAKER: 5,
    KC.BANDIT: 5,
    KC.BORDER_GUARD: 2,
    KC.BUREAUCRAT: 4,
    KC.BUTCHER: 5,
    KC.CANDLESTICK_MAKER: 2,
    KC.CARGO_SHIP: 3,
    KC.CELLAR: 2,
    KC.CHANCELLOR: 3,
    KC.CHAPEL: 2,
    KC.COUNCIL_ROOM: 5,
    KC.DOCTOR: 3,
    KC.DUCAT: 2,
    KC.EXPERIMENT: 3,
    KC.FAIRGROUNDS: 6,
    KC.FARMING_VILLAGE: 4,
    KC.FEAST: 4,
    KC.FESTIVAL: 5,
    KC.FLAG_BEARER: 4,
    KC.FORTUNE_TELLER: 3,
    KC.GARDENS: 4,
    KC.HAMLET: 2,
    KC.HARVEST: 5,
    KC.HERALD: 4,
    KC.HIDEOUT: 4,
    KC.HORN_OF_PLENTY: 5,
    KC.HORSE_TRADERS: 4,
    KC.HUNTING_PARTY: 5,
    KC.IMPROVE: 3,
    KC.INVENTOR: 4,
    KC.JESTER: 5,
    KC.JOURNEYMAN: 5,
    KC.LABORATORY: 5,
    KC.LACKEYS: 2,
    KC.LIBRARY: 5,
    KC.MARKET: 5,
    KC.MASTERPIECE: 3,
    KC.MENAGERIE: 3,
    KC.MERCHANT_GUILD: 5,
    KC.MILITIA: 4,
    KC.MINE: 5,
    KC.MOAT: 2,
    KC.MONEYLENDER: 4,
    KC.MOUNTAIN_VILLAGE: 4,
    KC.OLD_WITCH: 5,
    KC.PATRON: 4,
    KC.PLAZA: 4,
    KC.PRIEST: 4,
    KC.RECRUITER: 5,
    KC.REMAKE: 4,
    KC.REMODEL: 4,
    KC.RESEARCH: 4,
    KC.SCEPTER: 5,
    KC.SCHOLAR: 5,
    KC.SCULPTOR: 5,
    KC.SEER: 5,
    KC.SILK_MERCHANT: 4,
    KC.SMITHY: 4,
    KC.SOOTHSAYER: 5,
    KC.SPICES: 5,
    KC.SPY: 4,
    KC.STONEMASON: 2,
    KC.SWASHBUCKLER: 5,
    KC.TAXMAN: 4,
    KC.THIEF: 4,
    KC.THRONE_ROOM: 4,
    KC.TOURNAMENT: 4,
    KC.TREASURER: 5,
    KC.VILLAGE: 3,
    KC.VILLAIN: 5,
    KC.WITCH: 5,
    KC.WOODCUTTER: 3,
    KC.WORKSHOP: 3,
    KC.YOUNG_WITCH: 4,
    KC.LOAN: 3,
    KC.TRADE_ROUTE: 3,
    KC.WATCHTOWER: 3,
    KC.BISHOP: 4,
    KC.MONUMENT: 4,
    KC.QUARRY: 4,
    KC.TALISMAN: 4,
    KC.WORKERS_VILLAGE: 4,
    KC.CITY: 5,
    KC.CONTRABAND: 5,
    KC.COUNTING_HOUSE: 5,
    KC.MINT: 5,
    KC.MOUNTEBANK: 5,
    KC.RABBLE: 5,
    KC.ROYAL_SEAL: 5,
    KC.VAULT: 5,
    KC.VENTURE: 5,
    KC.GOONS: 6,
    KC.GRAND_MARKET: 6,
    KC.HOARD: 6,
    KC.BANK: 7,
    KC.EXPAND: 7,
    KC.FORGE: 7,
    KC.KINGS_COURT: 7,
    KC.PEDDLER: 8,
    KC.CROSSROADS: 2,
    KC.DUCHESS: 2,
    KC.FOOLS_GOLD: 2,
    KC.DEVELOP: 3,
    KC.OASIS: 3,
    KC.ORACLE: 3,
    KC.SCHEME: 3,
    KC.TUNNEL: 3,
    KC.JACK_OF_ALL_TRADES: 4,
    KC.NOBLE_BRIGAND: 4,
    KC.NOMAD_CAMP: 4,
    KC.SILK_ROAD: 4,
    KC.SPICE_MERCHANT: 4,
    KC.TRADER: 4,
    KC.CACHE: 5,
    KC.CARTOGRAPHER: 5,
    KC.EMBASSY: 5,
    KC.HAGGLER: 5,
    KC.HIGHWAY: 5,
    KC.ILL_GOTTEN_GAINS: 5,
    KC.INN: 5,
    KC.MANDARIN: 5,
    KC.MARGRAVE: 5,
    KC.STABLES: 5,
    KC.BORDER_VILLAGE: 6,
    KC.FARMLAND: 6,
})


CARD_TYPES: Mapping[KC, frozenset[CT]] = MappingProxyType({
    KC.EMBARGO: frozenset({CT.ACTION}),
    KC.HAVEN: frozenset({CT.ACTION, CT.DURATION}),
    KC.LIGHTHOUSE: frozenset({CT.ACTION, CT.DURATION}),
    KC.NATIVE_VILLAGE: frozenset({CT.ACTION}),
    KC.PEARL_DIVER: frozenset({CT.ACTION}),
    KC.AMBASSADOR: frozenset({CT.ACTION, CT.ATTACK}),
    KC.FISHING_VILLAGE: frozenset({CT.ACTION, CT.DURATION}),
    KC.LOOKOUT: frozenset({CT.ACTION}),
    KC.SMUGGLERS: frozenset({CT.ACTION}),
    KC.WAREHOUSE: frozenset({CT.ACTION}),
    KC.CARAVAN: frozenset({CT.ACTION, CT.DURATION}),
    KC.CUTPURSE: frozenset({CT.ACTION, CT.ATTACK}),
    KC.ISLAND: frozenset({CT.ACTION, CT.VICTORY}),
    KC.NAVIGATOR: frozenset({CT.ACTION}),
    KC.PIRATE_SHIP: frozenset({CT.ACTION, CT.ATTACK}),
    KC.SALVAGER: frozenset({CT.ACTION}),
    KC.SEA_HAG: frozenset({CT.ACTION, CT.ATTACK}),
    KC.TREASURE_MAP: frozenset({CT.ACTION}),
    KC.BAZAAR: frozenset({CT.ACTION}),
    KC.EXPLORER: frozenset({CT.ACTION}),
    KC.GHOST_SHIP: frozenset({CT.ACTION, CT.ATTACK}),
    KC.MERCHANT_SHIP: frozenset({CT.ACTION, CT.DURATION}),
    KC.OUTPOST: frozenset({CT.ACTION, CT.DURATION}),
    KC.TACTICIAN: frozenset({CT.ACTION, CT.DURATION}),
    KC.TREASURY: frozenset({CT.ACTION}),
    KC.WHARF: frozenset({CT.ACTION, CT.DURATION}),
    KC.COURTYARD: frozenset({CT.ACTION}),
    KC.LURKER: frozenset({CT.ACTION}),
    KC.PAWN: frozenset({CT.ACTION}),
    KC.MASQUERADE: frozenset({CT.ACTION}),
    KC.SHANTY_TOWN: frozenset({CT.ACTION}),
    KC.STEWARD: frozenset({CT.ACTION}),
    KC.SWINDLER: frozenset({CT.ACTION, CT.ATTACK}),
    KC.WISHING_WELL: frozenset({CT.ACTION}),
    KC.BARON: frozenset({CT.ACTION}),
    KC.BRIDGE: frozenset({CT.ACTION}),
    KC.CONSPIRATOR: frozenset({CT.ACTION}),
    KC.DIPLOMAT: frozenset({CT.ACTION, CT.REACTION}),
    KC.IRONWORKS: frozenset({CT.ACTION}),
    KC.MILL: frozenset({CT.ACTION, CT.VICTORY}),
    KC.MINING_VILLAGE: frozenset({CT.ACTION}),
    KC.SECRET_PASSAGE: frozenset({CT.ACTION}),
    KC.COURTIER: frozenset({CT.ACTION}),
    KC.DUKE: frozenset({CT.VICTORY}),
    KC.MINION: frozenset({CT.ACTION, CT.ATTACK}),
    KC.PATROL: frozenset({CT.ACTION}),
    KC.REPLACE: frozenset({CT.ACTION, CT.ATTACK}),
    KC.TORTURER: frozenset({CT.ACTION, CT.ATTACK}),
    KC.TRADING_POST: frozenset({CT.ACTION}),
    KC.UPGRADE: frozenset({CT.ACTION}),
    KC.HAREM: frozenset({CT.TREASURE, CT.VICTORY}),
    KC.NOBLES: frozenset({CT.ACTION, CT.VICTORY}),
    KC.HARBINGER: frozenset({CT.ACTION}),
    KC.MERCHANT: frozenset({CT.ACTION}),
    KC.VASSAL: frozenset({CT.ACTION}),
    KC.POACHER: frozenset({CT.ACTION}),
    KC.SENTRY: frozenset({CT.ACTION}),
    KC.ARTISAN: frozenset({CT.ACTION}),
    KC.ACTING_TROUPE: frozenset({CT.ACTION}),
    KC.ADVENTURER: frozenset({CT.ACTION}),
    KC.ADVISOR: frozenset({CT.ACTION}),
    KC.BAKER: frozenset({CT.ACTION}),
    KC.BANDIT: frozenset({CT.ACTION, CT.ATTACK}),
    KC.BORDER_GUARD: frozenset({CT.ACTION}),
    KC.BUREAUCRAT: frozenset({CT.ACTION, CT.ATTACK}),
    KC.BUTCHER: frozenset({CT.ACTION}),
    KC.CANDLESTICK_MAKER: frozenset({CT.ACTION}),
    KC.CARGO_SHIP: frozenset({CT.ACTION, CT.DURATION}),
    KC.CELLAR: frozenset({CT.ACTION}),
    KC.CHANCELLOR: frozenset({CT.ACTION}),
    KC.CHAPEL: frozenset({CT.ACTION}),
    KC.COUNCIL_ROOM: frozenset({CT.ACTION}),
    KC.DOCTOR: frozenset({CT.ACTION}),
    KC.DUCAT: frozenset({CT.TREASURE}),
    KC.EXPERIMENT: frozenset({CT.ACTION}),
    KC.FAIRGROUNDS: frozenset({CT.VICTORY}),
    KC.FARMING_VILLAGE: frozenset({CT.ACTION}),
    KC.FEAST: frozenset({CT.ACTION}),
    KC.FESTIVAL: frozenset({CT.ACTION}),
    KC.FLAG_BEARER: frozenset({CT.ACTION}),
    KC.FORTUNE_TELLER: frozenset({CT.ACTION, CT.ATTACK}),
    KC.GARDENS: frozenset({CT.VICTORY}),
    KC.HAMLET: frozenset({CT.ACTION}),
    KC.HARVEST: frozenset({CT.ACTION}),
    KC.HERALD: frozenset({CT.ACTION}),
    KC.HIDEOUT: frozenset({CT.ACTION}),
    KC.HORN_OF_PLENTY: frozenset({CT.TREASURE}),
    KC.HORSE_TRADERS: frozenset({CT.ACTION, CT.REACTION}),
    KC.HUNTING_PARTY: frozenset({CT.ACTION}),
    KC.IMPROVE: frozenset({CT.ACTION}),
    KC.INVENTOR: frozenset({CT.ACTION}),
    KC.JESTER: frozenset({CT.ACTION, CT.ATTACK}),
    KC.JOURNEYMAN: frozenset({CT.ACTION}),
    KC.LABORATORY: frozenset({CT.ACTION}),
    KC.LACKEYS: frozenset({CT.ACTION}),
    KC.LIBRARY: frozenset({CT.ACTION}),
    KC.MARKET: frozenset({CT.ACTION}),
    KC.MASTERPIECE: frozenset({CT.TREASURE}),
    KC.MENAGERIE: frozenset({CT.ACTION}),
    KC.MERCHANT_GUILD: frozenset({CT.ACTION}),
    KC.MILITIA: frozenset({CT.ACTION, CT.ATTACK}),
    KC.MINE: frozenset({CT.ACTION}),
    KC.MOAT: frozenset({CT.ACTION, CT.REACTION}),
    KC.MONEYLENDER: frozenset({CT.ACTION}),
    KC.MOUNTAIN_VILLAGE: frozenset({CT.ACTION}),
    KC.OLD_WITCH: frozenset({CT.ACTION, CT.ATTACK}),
    KC.PATRON: frozenset({CT.ACTION, CT.REACTION}),
    KC.PLAZA: frozenset({CT.ACTION}),
    KC.PRIEST: frozenset({CT.ACTION}),
    KC.RECRUITER: frozenset({CT.ACTION}),
    KC.REMAKE: frozenset({CT.ACTION}),
    KC.REMODEL: frozenset({CT.ACTION}),
    KC.RESEARCH: frozenset({CT.ACTION, CT.DURATION}),
    KC.SCEPTER: frozenset({CT.TREASURE}),
    KC.SCHOLAR: frozenset({CT.ACTION}),
    KC.SCULPTOR: frozenset({CT.ACTION}),
    KC.SEER: frozenset({CT.ACTION}),
    KC.SILK_MERCHANT: frozenset({CT.ACTION}),
    KC.SMITHY: frozenset({CT.ACTION}),
    KC.SOOTHSAYER: frozenset({CT.ACTION, CT.ATTACK}),
    KC.SPICES: frozenset({CT.TREASURE}),
    KC.SPY: frozenset({CT.ACTION, CT.ATTACK}),
    KC.STONEMASON: frozenset({CT.ACTION}),
    KC.SWASHBUCKLER: frozenset({CT.ACTION}),
    KC.TAXMAN: frozenset({CT.ACTION, CT.ATTACK}),
    KC.THIEF: frozenset({CT.ACTION, CT.ATTACK}),
    KC.THRONE_ROOM: frozenset({CT.ACTION}),
    KC.TOURNAMENT: frozenset({CT.ACTION}),
    KC.TREASURER: frozenset({CT.ACTION}),
    KC.VILLAGE: frozenset({CT.ACTION}),
    KC.VILLAIN: frozenset({CT.ACTION, CT.ATTACK}),
    KC.WITCH: frozenset({CT.ACTION, CT.ATTACK}),
    KC.WOODCUTTER: frozenset({CT.ACTION}),
    KC.WORKSHOP: frozenset({CT.ACTION}),
    KC.YOUNG_WITCH: frozenset({CT.ACTION, CT.ATTACK}),
    KC.LOAN: frozenset({CT.TREASURE}),
    KC.TRADE_ROUTE: frozenset({CT.ACTION}),
    KC.WATCHTOWER: frozenset({CT.ACTION, CT.REACTION}),
    KC.BISHOP: frozenset({CT.ACTION}),
    KC.MONUMENT: frozenset({CT.ACTION}),
    KC.QUARRY: frozenset({CT.TREASURE}),
    KC.TALISMAN: frozenset({CT.TREASURE}),
    KC.WORKERS_VILLAGE: frozenset({CT.ACTION}),
    KC.CITY: frozenset({CT.ACTION}),
    KC.CONTRABAND: frozenset({CT.TREASURE}),
    KC.COUNTING_HOUSE: frozenset({CT.ACTION}),
    KC.MINT: frozenset({CT.ACTION}),
    KC.MOUNTEBANK: frozenset({CT.ACTION, CT.ATTACK}),
    KC.RABBLE: frozenset({CT.ACTION, CT.ATTACK}),
    KC.ROYAL_SEAL: frozenset({CT.TREASURE}),
    KC.VAULT: frozenset({CT.ACTION}),
    KC.VENTURE: frozenset({CT.TREASURE}),
    KC.GOONS: frozenset({CT.ACTION, CT.ATTACK}),
    KC.GRAND_MARKET: frozenset({CT.ACTION}),
    KC.HOARD: frozenset({CT.TREASURE}),
    KC.BANK: frozenset({CT.TREASURE}),
    KC.EXPAND: frozenset({CT.ACTION}),
    KC.FORGE: frozenset({CT.ACTION}),
    KC.KINGS_COURT: frozenset({CT.ACTION}),
    KC.PEDDLER: frozenset({CT.ACTION}),
    KC.CROSSROADS: frozenset({CT.ACTION}),
    KC.DUCHESS: frozenset({CT.ACTION}),
    KC.FOOLS_GOLD: frozenset({CT.TREASURE, CT.REACTION}),
    KC.DEVELOP: frozenset({CT.ACTION}),
    KC.OASIS: frozenset({CT.ACTION}),
    KC.ORACLE: frozenset({CT.ACTION, CT.ATTACK}),
    KC.SCHEME: frozenset({CT.ACTION}),
    KC.TUNNEL: frozenset({CT.VICTORY, CT.REACTION}),
    KC.JACK_OF_ALL_TRADES: frozenset({CT.ACTION}),
    KC.NOBLE_BRIGAND: frozenset({CT.ACTION, CT.ATTACK}),
    KC.NOMAD_CAMP: frozenset({CT.ACTION}),
    KC.SILK_ROAD: frozenset({CT.VICTORY}),
    KC.SPICE_MERCHANT: frozenset({CT.ACTION}),
    KC.TRADER: frozenset({CT.ACTION, CT.REACTION}),
    KC.CACHE: frozenset({CT.TREASURE}),
    KC.CARTOGRAPHER: frozenset({CT.ACTION}),
    KC.EMBASSY: frozenset({CT.ACTION}),
    KC.HAGGLER: frozenset({CT.ACTION}),
    KC.HIGHWAY: frozenset({CT.ACTION}),
    KC.ILL_GOTTEN_GAINS: frozenset({CT.TREASURE}),
    KC.INN: frozenset({CT.ACTION}),
    KC.MANDARIN: frozenset({CT.ACTION}),
    KC.MARGRAVE: frozenset({CT.ACTION, CT.ATTACK}),
    KC.STABLES: frozenset({CT.ACTION}),
    KC.BORDER_VILLAGE: frozenset({CT.ACTION}),
    KC.FARMLAND: frozenset({CT.VICTORY}),
})


_EXPANSION_GROUPS: dict[tuple[EX, ...], tuple[KC, ...]] = {
    (EX.INTRIGUE2,): (
        KC.COURTYARD,
        KC.LURKER,
        KC.PAWN,
        KC.MASQUERADE,
        KC.SHANTY_TOWN,
        KC.STEWARD,
        KC.SWINDLER,
        KC.WISHING_WELL,
        KC.BARON,
        KC.BRIDGE,
        KC.CONSPIRATOR,
        KC.DIPLOMAT,
        KC.IRONWORKS,
        KC.MILL,
        KC.MINING_VILLAGE,
        KC.SECRET_PASSAGE,
        KC.COURTIER,
        KC.DUKE,
        KC.MINION,
        KC.PATROL,
        KC.REPLACE,
        KC.TORTURER,
        KC.TRADING_POST,
        KC.UPGRADE,
        KC.HAREM,
        KC.NOBLES,
    ),
    (EX.BASE2,): (
        KC.HARBINGER,
        KC.VASSAL,
        KC.SENTRY,
        KC.POACHER,
        KC.MERCHANT,
        KC.ARTISAN,
        KC.BANDIT,
    ),
    (EX.BASE1, EX.BASE2): (
        KC.CELLAR,
        KC.CHAPEL,
        KC.MOAT,
        KC.VILLAGE,
        KC.WORKSHOP,
        KC.BUREAUCRAT,
        KC.GARDENS,
        KC.MILITIA,
        KC.MONEYLENDER,
        KC.REMODEL,
        KC.SMITHY,
        KC.THRONE_ROOM,
        KC.COUNCIL_ROOM,
        KC.FESTIVAL,
        KC.LABORATORY,
        KC.LIBRARY,
        KC.MARKET,
        KC.MINE,
        KC.WITCH,
    ),
    (EX.BASE1,): (
        KC.CHANCELLOR,
        KC.WOODCUTTER,
        KC.FEAST,
        KC.SPY,
        KC.THIEF,
        KC.ADVENTURER,
    ),
    (EX.RENAISSANCE,): (
        KC.BORDER_GUARD,
        KC.DUCAT,
        KC.LACKEYS,
        KC.ACTING_TROUPE,
        KC.CARGO_SHIP,
        KC.EXPERIMENT,
        KC.IMPROVE,
        KC.FLAG_BEARER,
        KC.HIDEOUT,
        KC.INVENTOR,
        KC.MOUNTAIN_VILLAGE,
        KC.PATRON,
        KC.PRIEST,
        KC.RESEARCH,
        KC.SILK_MERCHANT,
        KC.OLD_WITCH,
        KC.RECRUITER,
        KC.SCEPTER,
        KC.SCHOLAR,
        KC.SCULPTOR,
        KC.SEER,
        KC.SPICES,
        KC.SWASHBUCKLER,
        KC.TREASURER,
        KC.VILLAIN,
    ),
    (EX.GUILDS,): (
        KC.CANDLESTICK_MAKER,
        KC.STONEMASON,
        KC.DOCTOR,
        KC.MASTERPIECE,
        KC.ADVISOR,
        KC.PLAZA,
        KC.TAXMAN,
        KC.HERALD,
        KC.BAKER,
        KC.BUTCHER,
        KC.JOURNEYMAN,
        KC.MERCHANT_GUILD,
        KC.SOOTHSAYER,
    ),
    (EX.CORNUCOPIA,): (
        KC.HAMLET,
        KC.FORTUNE_TELLER,
        KC.MENAGERIE,
        KC.FARMING_VILLAGE,
        KC.HORSE_TRADERS,
        KC.REMAKE,
        KC.TOURNAMENT,
        KC.YOUNG_WITCH,
        KC.HARVEST,
        KC.HORN_OF_PLENTY,
        KC.HUNTING_PARTY,
        KC.JESTER,
        KC.FAIRGROUNDS,
    ),
    (EX.SEASIDE,): (
        KC.EMBARGO,
        KC.HAVEN,
        KC.LIGHTHOUSE,
        KC.NATIVE_VILLAGE,
        KC.PEARL_DIVER,
        KC.AMBASSADOR,
        KC.FISHING_VILLAGE,
        KC.LOOKOUT,
        KC.SMUGGLERS,
        KC.WAREHOUSE,
        KC.BAZAAR,
        KC.EXPLORER,
        KC.GHOST_SHIP,
        KC.MERCHANT_SHIP,
        KC.OUTPOST,
        KC.TACTICIAN,
        KC.TREASURY,
        KC.WHARF,
        KC.CARAVAN,
        KC.CUTPURSE,
        KC.ISLAND,
        KC.NAVIGATOR,
        KC.PIRATE_SHIP,
        KC.SALVAGER,
        KC.SEA_HAG,
        KC.TREASURE_MAP,
    ),
    (EX.PROSPERITY,): (
        KC.LOAN,
        KC.TRADE_ROUTE,
        KC.WATCHTOWER,
        KC.BISHOP,
        KC.MONUMENT,
        KC.QUARRY,
        KC.TALISMAN,
        KC.WORKERS_VILLAGE,
        KC.CITY,
        KC.CONTRABAND,
        KC.COUNTING_HOUSE,
        KC.MINT,
        KC.MOUNTEBANK,
        KC.RABBLE,
        KC.ROYAL_SEAL,
        KC.VAULT,
        KC.VENTURE,
        KC.GOONS,
        KC.GRAND_MARKET,
        KC.HOARD,
        KC.BANK,
        KC.EXPAND,
        KC.FORGE,
        KC.KINGS_COURT,
        KC.PEDDLER,
    ),
    (EX.HINTERLANDS,): (
        KC.CROSSROADS,
        KC.DUCHESS,
        KC.FOOLS_GOLD,
        KC.DEVELOP,
        KC.OASIS,
        KC.ORACLE,
        KC.SCHEME,
        KC.TUNNEL,
        KC.JACK_OF_ALL_TRADES,
        KC.NOBLE_BRIGAND,
        KC.NOMAD_CAMP,
        KC.SILK_ROAD,
        KC.SPICE_MERCHANT,
        KC.TRADER,
        KC.CACHE,
        KC.CARTOGRAPHER,
        KC.EMBASSY,
        KC.HAGGLER,
        KC.HIGHWAY,
        KC.ILL_GOTTEN_GAINS,
        KC.INN,
        KC.MANDARIN,
        KC.MARGRAVE,
        KC.STABLES,
        KC.BORDER_VILLAGE,
        KC.FARMLAND,
    ),
}

CARD_EXPANSIONS: Mapping[KC, frozenset[EX]] = MappingProxyType({
    card: frozenset(expansions)
    for expansions, cards in _EXPANSION_GROUPS.items()
    for card in cards
})


PROJECT_EXPANSIONS: Mapping[Project, frozenset[EX]] = MappingProxyType(
    {project: frozenset({EX.RENAISSANCE}) for project in Project}
)


__all__ = ["BASE_COSTS", "CARD_EXPANSIONS", "CARD_TYPES", "PROJECT_EXPANSIONS"]
