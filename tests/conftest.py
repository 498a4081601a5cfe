import sys
from pathlib import Path

import pytest

# Ensure the project root is importable when pytest starts from any directory
PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from symcalc import Var  # noqa: E402


@pytest.fixture
def x():
    return Var("x")


@pytest.fixture
def y():
    return Var("y")


@pytest.fixture
def sample_points():
    """Positive points, so ln and real powers of the variable stay defined."""
    return [0.5, 1.0, 1.7, 2.0, 3.25]
