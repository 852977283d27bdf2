"""Testing utilities for KingdomForge."""

from .doubles import ScriptedRandom, small_catalog
from .factory import SetupConfigFactory, young_witch_config
from .fixtures import app_fixture, seeded_app

__all__ = [
    "ScriptedRandom",
    "SetupConfigFactory",
    "app_fixture",
    "seeded_app",
    "small_catalog",
    "young_witch_config",
]
