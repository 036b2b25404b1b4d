from helpers import ScriptedEngine
import pytest


@pytest.fixture
def engine() -> ScriptedEngine:
    return ScriptedEngine()
