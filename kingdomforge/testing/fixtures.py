"""Pytest fixtures for KingdomForge."""

from __future__ import annotations

import pytest

from ..app import KingdomApp
from ..config import GeneratorConfig, KingdomForgeConfig


@pytest.fixture()
def seeded_app() -> KingdomApp:
    return app_fixture(rng_seed=1234)


def app_fixture(**generator_options) -> KingdomApp:
    """Build an app outside of the fixture, e.g. to compare two seeded apps."""
    config = KingdomForgeConfig(generator=GeneratorConfig(**generator_options))
    return KingdomApp(config)
