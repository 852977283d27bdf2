"""Top level application object for KingdomForge."""

from __future__ import annotations

from typing import Any

from .config import KingdomForgeConfig
from .domain.catalog import CardCatalog
from .domain.generator import SetupGenerator
from .domain.randomness import RandomSource, StdlibRandomSource
from .domain.setups import Setup, SetupConfig
from .loaders import setup_config_to_dict


class KingdomApp:
    """Central dependency container used by the CLI and embedding code."""

    def __init__(
        self,
        config: KingdomForgeConfig | None = None,
        *,
        catalog: CardCatalog | None = None,
        rng: RandomSource | None = None,
    ) -> None:
        self.config = config or KingdomForgeConfig()
        self.catalog = catalog or CardCatalog.default()
        self.rng = rng or StdlibRandomSource(self.config.generator.rng_seed)
        self.generator = SetupGenerator(
            self.catalog,
            rng=self.rng,
            max_bane_retries=self.config.generator.max_bane_retries,
        )

    def generate(self, setup_config: SetupConfig | None = None) -> Setup:
        """Generate a setup, falling back to the configured default constraints."""
        return self.generator.generate(setup_config or self.config.default_setup)

    def snapshot(self) -> dict[str, Any]:
        """Export current configuration for debugging."""
        return {
            "rng_seed": self.config.generator.rng_seed,
            "max_bane_retries": self.config.generator.max_bane_retries,
            "kingdom_cards": len(self.catalog.kingdom_cards),
            "projects": len(self.catalog.projects),
            "bane_cards": len(self.catalog.bane_cards),
            "expansions": [expansion.value for expansion in self.catalog.expansions],
            "default_setup": setup_config_to_dict(self.config.default_setup),
        }
