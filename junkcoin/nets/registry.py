"""
Copyright (c) 2025, The Junkcoin developers
See LICENSE for details

The Registry resolves network parameters by magic or by name.
"""

import threading

from junkcoin import JunkcoinError
from junkcoin.util import helpers


log = helpers.getLogger("NETS")

# Short names accepted by Registry.parse.
Aliases = {
    "mainnet": "junkcoin-mainnet",
    "testnet": "junkcoin-testnet",
}


class DuplicateNetwork(JunkcoinError):
    """
    A network with the same magic, name or bech32 prefix is already
    registered.
    """

    pass


class _Snapshot:
    """
    An immutable view of the registered networks. Registration builds a new
    snapshot and swaps it in, so readers always see both indexes from the
    same state.
    """

    def __init__(self, byMagic, byName, order):
        self.byMagic = byMagic
        self.byName = byName
        self.order = order


class Registry:
    """
    Registry holds the Params of every known network. Networks can be added
    but never removed or replaced.

    Writers are serialized with a lock. Readers do not lock.
    """

    def __init__(self):
        self.mtx = threading.Lock()
        self._snap = _Snapshot({}, {}, ())

    def register(self, params):
        """
        Add the network.

        Args:
            params (Params): The network parameters.
        """
        with self.mtx:
            snap = self._snap
            if params.Net in snap.byMagic:
                raise DuplicateNetwork(
                    f"network magic {params.Net:#010x} already registered "
                    f"for {snap.byMagic[params.Net].Name}"
                )
            if params.Name in snap.byName:
                raise DuplicateNetwork(f"network name {params.Name} already registered")
            for p in snap.order:
                if p.Bech32HRPSegwit == params.Bech32HRPSegwit:
                    raise DuplicateNetwork(
                        f"bech32 prefix {params.Bech32HRPSegwit!r} already used by {p.Name}"
                    )

            byMagic = dict(snap.byMagic)
            byMagic[params.Net] = params
            byName = dict(snap.byName)
            byName[params.Name] = params
            self._snap = _Snapshot(byMagic, byName, snap.order + (params,))
        log.debug(f"registered network {params.Name} (magic {params.Net:#010x})")

    def lookupByMagic(self, magic):
        """
        Args:
            magic (int): The network magic.

        Returns:
            Params or None: The network, or None if the magic is unknown.
        """
        return self._snap.byMagic.get(magic)

    def lookupByName(self, name):
        """
        Exact name lookup. See parse for the short names.

        Args:
            name (str): The network name.

        Returns:
            Params or None: The network, or None if the name is unknown.
        """
        return self._snap.byName.get(name)

    def parse(self, name):
        """
        Get the network parameters based on the network name. The short names
        mainnet and testnet are accepted.
        """
        params = self.lookupByName(Aliases.get(name, name))
        if params is None:
            raise JunkcoinError(f"unrecognized network name {name}")
        return params

    def names(self):
        """
        The names of the registered networks, in registration order.

        Returns:
            list(str): The names.
        """
        return [p.Name for p in self._snap.order]

    def __len__(self):
        return len(self._snap.order)

    def __contains__(self, name):
        return name in self._snap.byName

    def __iter__(self):
        return iter(self._snap.order)
