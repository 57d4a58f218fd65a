import sys, os
import random

import pytest

# Ensure src and the repo root are on path for test imports
ROOT = os.path.dirname(os.path.dirname(__file__))
SRC = os.path.join(ROOT, 'src')
for path in (SRC, ROOT):
    if path not in sys.path:
        sys.path.insert(0, path)

from tests.helpers import grid, make_board, snapshot


@pytest.fixture
def rng():
    return random.Random(1234)


__all__ = [
    "grid",
    "make_board",
    "snapshot",
]
