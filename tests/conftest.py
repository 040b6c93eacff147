import pytest

from radixcalc.calculator import Calculator
from radixcalc.types.value import Integer, Float, Undefined

# Every test runs with the calculator's environment variables cleared so that a
# developer's shell settings (prompt, colour, display base) cannot leak in.
_CONFIG_VARS = (
    "RADIXCALC_PROMPT",
    "RADIXCALC_LOG_LEVEL",
    "RADIXCALC_COLOR",
    "RADIXCALC_BASE",
    "NO_COLOR",
)


@pytest.fixture(autouse=True)
def _clean_config_env(monkeypatch):
    for var in _CONFIG_VARS:
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def calc():
    """Fresh calculator with no bindings."""
    return Calculator()


@pytest.fixture
def bindings():
    return {"x": Integer(10), "y": Float(2.5), "u": Undefined}
