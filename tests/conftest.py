"""
Copyright (c) 2025, The Junkcoin developers
See LICENSE for details
"""

import random

import pytest

from junkcoin import nets
from junkcoin.util import helpers


# Seed initialization is delegated to tests.
# random.seed(0)


@pytest.fixture
def randBytes():
    def _randBytes(low=0, high=50):
        return bytes(random.randint(0, 255) for _ in range(random.randint(low, high)))

    return _randBytes


@pytest.fixture(scope="module")
def prepareLogger(request):
    helpers.prepareLogging()


@pytest.fixture(scope="session")
def registry():
    return nets.buildRegistry()


@pytest.fixture(scope="session")
def mainnet(registry):
    return registry.parse("mainnet")


@pytest.fixture(scope="session")
def testnet(registry):
    return registry.parse("testnet")
