import pytest

from kingdomforge.testing.doubles import ScriptedRandom
from kingdomforge.testing.fixtures import seeded_app  # noqa: F401


@pytest.fixture()
def scripted() -> ScriptedRandom:
    return ScriptedRandom()
