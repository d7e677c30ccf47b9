import logging

import numpy as np
import pytest

from feedforward.config import reset_config


@pytest.fixture(autouse=True)
def setup_logging():
    """Set up logging for tests."""
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    # Suppress excessive logging during tests
    logging.getLogger("feedforward").setLevel(logging.CRITICAL)

    yield

    # Reset logging after test
    logging.getLogger("feedforward").setLevel(logging.NOTSET)


@pytest.fixture(autouse=True)
def clean_config():
    """Make sure no test sees another test's global configuration."""
    reset_config()
    yield
    reset_config()


@pytest.fixture
def rng():
    """Return a seeded generator so parameters are reproducible."""
    return np.random.default_rng(1234)


@pytest.fixture
def demo_input():
    """Input vector used by the 4-3-2 demonstration network."""
    return [0.1, 0.4, 0.2, 0.3]
