import pytest
import sys
from pathlib import Path

# Add src to sys.path so we can import ternary_calc
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from ternary_calc.config import EvaluatorConfig


# Common test fixtures
@pytest.fixture
def bounded_config():
    """Return a config that reports overflow outside signed 32-bit."""
    return EvaluatorConfig.bounded(32)
