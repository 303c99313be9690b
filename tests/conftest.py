"""Shared pytest configuration for the BinTreeLib test suite."""

import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from bintreelib import BinarySearchTree, build_tree


def pytest_configure(config):
    config.addinivalue_line("markers", "slow: deep or generated-input tests excluded by run_tests.py")


@pytest.fixture
def scenario_tree() -> BinarySearchTree:
    """Tree built from 10, 5, 15, 3, 7, 12, 17, 10.

    Shape:
            10
           /  \\
          5    15
         / \\   / \\
        3   7 12  17
              /
            10
    """
    return build_tree([10, 5, 15, 3, 7, 12, 17, 10])
