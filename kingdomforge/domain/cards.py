"""Card identifiers for the Dominion kingdom generator."""

from __future__ import annotations

from enum import Enum


class Expansion(str, Enum):
    BASE1 = "Base1"
    BASE2 = "Base2"
    RENAISSANCE = "Renaissance"
    GUILDS = "Guilds"
    CORNUCOPIA = "Cornucopia"
    INTRIGUE2 = "Intrigue2"
    SEASIDE = "Seaside"
    PROSPERITY = "Prosperity"
    HINTERLANDS = "Hinterlands"


class CardType(str, Enum):
    ACTION = "Action"
    ATTACK = "Attack"
    REACTION = "Reaction"
    VICTORY = "Victory"
    TREASURE = "Treasure"
    DURATION = "Duration"


class KingdomCard(str, Enum):
    """A card that may be selected into the kingdom supply."""

    ACTING_TROUPE = "ActingTroupe"
    ADVENTURER = "Adventurer"
    ADVISOR = "Advisor"
    AMBASSADOR = "Ambassador"
    ARTISAN = "Artisan"
    BAKER = "Baker"
    BANDIT = "Bandit"
    BANK = "Bank"
    BARON = "Baron"
    BAZAAR = "Bazaar"
    BISHOP = "Bishop"
    BORDER_GUARD = "BorderGuard"
    BORDER_VILLAGE = "BorderVillage"
    BRIDGE = "Bridge"
    BUREAUCRAT = "Bureaucrat"
    BUTCHER = "Butcher"
    CACHE = "Cache"
    CANDLESTICK_MAKER = "CandlestickMaker"
    CARAVAN = "Caravan"
    CARGO_SHIP = "CargoShip"
    CARTOGRAPHER = "Cartographer"
    CELLAR = "Cellar"
    CHANCELLOR = "Chancellor"
    CHAPEL = "Chapel"
    CITY = "City"
    CONSPIRATOR = "Conspirator"
    CONTRABAND = "Contraband"
    COUNCIL_ROOM = "CouncilRoom"
    COUNTING_HOUSE = "CountingHouse"
    COURTIER = "Courtier"
    COURTYARD = "Courtyard"
    CROSSROADS = "Crossroads"
    CUTPURSE = "Cutpurse"
    DEVELOP = "Develop"
    DIPLOMAT = "Diplomat"
    DOCTOR = "Doctor"
    DUCAT = "Ducat"
    DUCHESS = "Duchess"
    DUKE = "Duke"
    EMBARGO = "Embargo"
    EMBASSY = "Embassy"
    EXPAND = "Expand"
    EXPERIMENT = "Experiment"
    EXPLORER = "Explorer"
    FAIRGROUNDS = "Fairgrounds"
    FARMING_VILLAGE = "FarmingVillage"
    FARMLAND = "Farmland"
    FEAST = "Feast"
    FESTIVAL = "Festival"
    FISHING_VILLAGE = "FishingVillage"
    FLAG_BEARER = "FlagBearer"
    FOOLS_GOLD = "FoolsGold"
    FORGE = "Forge"
    FORTUNE_TELLER = "FortuneTeller"
    GARDENS = "Gardens"
    GHOST_SHIP = "GhostShip"
    GOONS = "Goons"
    GRAND_MARKET = "GrandMarket"
    HAGGLER = "Haggler"
    HAMLET = "Hamlet"
    HARBINGER = "Harbinger"
    HAREM = "Harem"
    HARVEST = "Harvest"
    HAVEN = "Haven"
    HERALD = "Herald"
    HIDEOUT = "Hideout"
    HIGHWAY = "Highway"
    HOARD = "Hoard"
    HORN_OF_PLENTY = "HornOfPlenty"
    HORSE_TRADERS = "HorseTraders"
    HUNTING_PARTY = "HuntingParty"
    ILL_GOTTEN_GAINS = "IllGottenGains"
    IMPROVE = "Improve"
    INN = "Inn"
    INVENTOR = "Inventor"
    IRONWORKS = "Ironworks"
    ISLAND = "Island"
    JACK_OF_ALL_TRADES = "JackOfAllTrades"
    JESTER = "Jester"
    JOURNEYMAN = "Journeyman"
    KINGS_COURT = "KingsCourt"
    LABORATORY = "Laboratory"
    LACKEYS = "Lackeys"
    LIBRARY = "Library"
    LIGHTHOUSE = "Lighthouse"
    LOAN = "Loan"
    LOOKOUT = "Lookout"
    LURKER = "Lurker"
    MANDARIN = "Mandarin"
    MARGRAVE = "Margrave"
    MARKET = "Market"
    MASQUERADE = "Masquerade"
    MASTERPIECE = "Masterpiece"
    MENAGERIE = "Menagerie"
    MERCHANT = "Merchant"
    MERCHANT_GUILD = "MerchantGuild"
    MERCHANT_SHIP = "MerchantShip"
    MILITIA = "Militia"
    MILL = "Mill"
    MINE = "Mine"
    MINING_VILLAGE = "MiningVillage"
    MINION = "Minion"
    MINT = "Mint"
    MOAT = "Moat"
    MONEYLENDER = "Moneylender"
    MONUMENT = "Monument"
    MOUNTAIN_VILLAGE = "MountainVillage"
    MOUNTEBANK = "Mountebank"
    NATIVE_VILLAGE = "NativeVillage"
    NAVIGATOR = "Navigator"
    NOBLE_BRIGAND = "NobleBrigand"
    NOBLES = "Nobles"
    NOMAD_CAMP = "NomadCamp"
    OASIS = "Oasis"
    OLD_WITCH = "OldWitch"
    ORACLE = "Oracle"
    OUTPOST = "Outpost"
    PATROL = "Patrol"
    PATRON = "Patron"
    PAWN = "Pawn"
    PEARL_DIVER = "PearlDiver"
    PEDDLER = "Peddler"
    PIRATE_SHIP = "PirateShip"
    PLAZA = "Plaza"
    POACHER = "Poacher"
    PRIEST = "Priest"
    QUARRY = "Quarry"
    RABBLE = "Rabble"
    RECRUITER = "Recruiter"
    REMAKE = "Remake"
    REMODEL = "Remodel"
    REPLACE = "Replace"
    RESEARCH = "Research"
    ROYAL_SEAL = "RoyalSeal"
    SALVAGER = "Salvager"
    SCEPTER = "Scepter"
    SCHEME = "Scheme"
    SCHOLAR = "Scholar"
    SCULPTOR = "Sculptor"
    SEA_HAG = "SeaHag"
    SECRET_PASSAGE = "SecretPassage"
    SEER = "Seer"
    SENTRY = "Sentry"
    SHANTY_TOWN = "ShantyTown"
    SILK_MERCHANT = "SilkMerchant"
    SILK_ROAD = "SilkRoad"
    SMITHY = "Smithy"
    SMUGGLERS = "Smugglers"
    SOOTHSAYER = "Soothsayer"
    SPICE_MERCHANT = "SpiceMerchant"
    SPICES = "Spices"
    SPY = "Spy"
    STABLES = "Stables"
    STEWARD = "Steward"
    STONEMASON = "Stonemason"
    SWASHBUCKLER = "Swashbuckler"
    SWINDLER = "Swindler"
    TACTICIAN = "Tactician"
    TALISMAN = "Talisman"
    TAXMAN = "Taxman"
    THIEF = "Thief"
    THRONE_ROOM = "ThroneRoom"
    TORTURER = "Torturer"
    TOURNAMENT = "Tournament"
    TRADE_ROUTE = "TradeRoute"
    TRADER = "Trader"
    TRADING_POST = "TradingPost"
    TREASURE_MAP = "TreasureMap"
    TREASURER = "Treasurer"
    TREASURY = "Treasury"
    TUNNEL = "Tunnel"
    UPGRADE = "Upgrade"
    VASSAL = "Vassal"
    VAULT = "Vault"
    VENTURE = "Venture"
    VILLAGE = "Village"
    VILLAIN = "Villain"
    WAREHOUSE = "Warehouse"
    WATCHTOWER = "Watchtower"
    WHARF = "Wharf"
    WISHING_WELL = "WishingWell"
    WITCH = "Witch"
    WOODCUTTER = "Woodcutter"
    WORKERS_VILLAGE = "WorkersVillage"
    WORKSHOP = "Workshop"
    YOUNG_WITCH = "YoungWitch"


class Project(str, Enum):
    """Renaissance project cards."""

    ACADEMY = "Academy"
    BARRACKS = "Barracks"
    CANAL = "Canal"
    CAPITALISM = "Capitalism"
    CATHEDRAL = "Cathedral"
    CITADEL = "Citadel"
    CITY_GATE = "CityGate"
    CROP_ROTATION = "CropRotation"
    EXPLORATION = "Exploration"
    FAIR = "Fair"
    FLEET = "Fleet"
    GUILDHALL = "Guildhall"
    INNOVATION = "Innovation"
    PAGEANT = "Pageant"
    PIAZZA = "Piazza"
    ROAD_NETWORK = "RoadNetwork"
    SEWERS = "Sewers"
    SILOS = "Silos"
    SINISTER_PLOT = "SinisterPlot"
    STAR_CHART = "StarChart"


class BaneCard(str, Enum):
    """Custom bane tags layered onto kingdom cards.

    ``ZEBRA`` is special: a kingdom card tagged with it needs a second card
    drawn from outside the kingdom.
    """

    BARGAIN = "Bargain"
    BUY_AND_BUY = "BuyAndBuy"
    COVER_OF_DARKNESS = "CoverOfDarkness"
    CURSED_HEIRLOOM = "CursedHeirloom"
    EXCHANGE = "Exchange"
    FLANK = "Flank"
    FOOLS_GOLD = "FoolsGold"
    FORTIFICATION = "Fortification"
    FRONTIER = "Frontier"
    GAMBLER = "Gambler"
    MAGIC_SHIELD = "MagicShield"
    OPPORTUNE = "Opportune"
    PLAGUE_CART = "PlagueCart"
    REBATE = "Rebate"
    SACRIFICE = "Sacrifice"
    SECRET_PLANS = "SecretPlans"
    SILVER_MINE = "SilverMine"
    THRONE = "Throne"
    TREASURY_KEY = "TreasuryKey"
    TUNNEL = "Tunnel"
    VAULT = "Vault"
    ZEBRA = "Zebra"


__all__ = ["BaneCard", "CardType", "Expansion", "KingdomCard", "Project"]
