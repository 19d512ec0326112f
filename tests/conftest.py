"""Shared fixtures for the PageTree test suite."""

import logging
import sys
from datetime import datetime, timezone
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from pagetree import FixedClock
from pagetree.demo import build_sample_tree


# Friday noon, UTC. 2024 is a leap year, so 15 days back is Feb 29.
NOW = datetime(2024, 3, 15, 12, 0, tzinfo=timezone.utc)


def pytest_configure(config):
    config.addinivalue_line("markers", "slow: deep-tree tests excluded from the default run")


@pytest.fixture
def fixed_clock():
    """A clock frozen at NOW."""
    return FixedClock(NOW)


@pytest.fixture
def site(fixed_clock):
    """The demo site built against the fixed clock, keyed by short name."""
    return build_sample_tree(fixed_clock)


@pytest.fixture
def reset_pagetree_logger():
    """Undo logging configuration done by the demo driver."""
    yield
    app_logger = logging.getLogger("pagetree")
    for handler in list(app_logger.handlers):
        app_logger.removeHandler(handler)
    app_logger.setLevel(logging.NOTSET)
