"""Random, flavourful names for generated kingdoms."""

from __future__ import annotations

from dataclasses import dataclass, field

from faker import Faker

from .domain.setups import Setup

ENDS = (
    "Adventure", "Apprentice", "Bane", "Banishment", "Captivity", "Cleansing",
    "Coffers", "Coins", "Copper", "Crown", "Curse", "Deceit", "Defeat", "Demise",
    "Destiny", "Dismissal", "End", "Enigma", "Entry", "Err", "Execution", "Exit",
    "Failing", "Fate", "Favor", "Fettering", "Flight", "Foresight", "Fortune",
    "Game", "Gauntlet", "Help", "Incident", "Journey", "Killing", "Kinship",
    "Loss", "Love", "Mystery", "Nocturne", "Overreach", "Peace", "Plight",
    "Poverty", "Prudence", "Punishment", "Quickening", "Relief", "Repose",
    "Sacking", "Screams", "Surrender", "Tell", "Termination", "Treasure",
    "Triumph", "Turn", "Turning", "Unfettering", "Victory", "Wealth", "Winning",
    "Yearning", "Yells", "Zeal",
)

PLACES = (
    "Battlefield", "Battlement", "Castle", "Dungeon", "Field", "Forest",
    "Kingdom", "Mountain", "Palace", "Pit", "Sea", "Sky", "Tower", "Town",
    "Village", "Waste", "Woods",
)


@dataclass(slots=True)
class KingdomNamer:
    """Name a setup after a couple of its cards, e.g. "The Witch's Village"."""

    faker: Faker = field(default_factory=Faker)

    @classmethod
    def seeded(cls, seed: int) -> "KingdomNamer":
        faker = Faker()
        faker.seed_instance(seed)
        return cls(faker=faker)

    def name(self, setup: Setup) -> str:
        first, second = self.faker.random_elements(setup.cards(), length=2, unique=True)
        templates = (
            lambda: f"The {first.value} of the {self._end()}",
            lambda: f"The {self._end()} of the {first.value}",
            lambda: f"The {first.value} and the {second.value}",
            lambda: f"The {first.value}'s {second.value}",
            lambda: f"The {first.value} of the {self._place()}",
            lambda: f"The {self._end()} of the {self._place()}",
        )
        return self.faker.random_element(templates)()

    def _end(self) -> str:
        return self.faker.random_element(ENDS)

    def _place(self) -> str:
        return self.faker.random_element(PLACES)


def random_name(setup: Setup, *, seed: int | None = None) -> str:
    namer = KingdomNamer.seeded(seed) if seed is not None else KingdomNamer()
    return namer.name(setup)


__all__ = ["ENDS", "PLACES", "KingdomNamer", "random_name"]
