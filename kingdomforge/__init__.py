"""KingdomForge public API."""

from .app import KingdomApp
from .config import GeneratorConfig, KingdomForgeConfig
from .domain import (
    BaneCard,
    BaneCount,
    CardCatalog,
    Expansion,
    GenSetupError,
    KingdomCard,
    Project,
    ProjectCount,
    Setup,
    SetupConfig,
    SetupGenerator,
    gen_setup,
)

__all__ = [
    "KingdomApp",
    "GeneratorConfig",
    "KingdomForgeConfig",
    "BaneCard",
    "BaneCount",
    "CardCatalog",
    "Expansion",
    "GenSetupError",
    "KingdomCard",
    "Project",
    "ProjectCount",
    "Setup",
    "SetupConfig",
    "SetupGenerator",
    "gen_setup",
]
