"""
Copyright (c) 2025, The Junkcoin developers
See LICENSE for details
"""

from . import mainnet, testnet
from .params import Params
from .registry import Registry


NETWORKS = (mainnet, testnet)


def buildRegistry(tables=NETWORKS):
    """
    Validate the network tables and register them. The first invalid or
    conflicting table aborts the build.

    Args:
        tables (iterable(module)): optional. default NETWORKS. The network
            tables.

    Returns:
        Registry: The populated registry.
    """
    registry = Registry()
    for table in tables:
        registry.register(Params.fromModule(table))
    return registry


def normalizeName(netName):
    """
    Strip the coin prefix from a network name.

    Args:
        netName (string): The raw network name.

    Returns:
        string: The network name without the "junkcoin-" prefix.
    """
    prefix = "junkcoin-"
    return netName[len(prefix) :] if netName.startswith(prefix) else netName
