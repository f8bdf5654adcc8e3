"""
Copyright (c) 2025, The Junkcoin developers
See LICENSE for details

Print a summary of the active network.

$ python -m junkcoin [--testnet | --network NAME] [--decode ADDR]
"""

import sys

from junkcoin import JunkcoinError, addrlib, checkpoints, config
from junkcoin.crypto import crypto
from junkcoin.util import helpers


log = helpers.getLogger("JUNKCOIN")


def summary(netParams):
    """
    A human readable summary of the network parameters.

    Args:
        netParams (Params): The network parameters.

    Returns:
        list(str): The summary lines.
    """
    lastCheckpoint = checkpoints.latestCheckpoint(netParams)
    lines = [
        f"network:          {netParams.Name}",
        f"magic:            {netParams.Net:#010x}",
        f"port:             {netParams.DefaultPort}",
        f"genesis:          {netParams.genesisHashStr()}",
        f"pow limit bits:   {netParams.PowLimitBits:#010x}",
        f"retarget:         every {netParams.blocksPerRetarget} blocks",
        f"bech32 prefix:    {netParams.Bech32HRPSegwit}",
        f"bip44 path:       {crypto.pathString(crypto.coinTypePath(netParams))}",
    ]
    if lastCheckpoint:
        lines.append(
            f"last checkpoint:  {lastCheckpoint.height} {lastCheckpoint.hash.rhex()}"
        )
    return lines


def main(args=None):
    known, _ = config.parseArgs(args)
    try:
        logLvl = helpers.getLogLevel(known.loglevel or "info")
    except ValueError as e:
        print(e, file=sys.stderr)
        return 2
    helpers.prepareLogging(logLvl=logLvl)

    try:
        cfg = config.load(args=args)
    except JunkcoinError as e:
        log.critical(f"unable to load network parameters: {e}")
        log.debug(helpers.formatTraceback(e))
        return 1
    for line in summary(cfg.netParams):
        print(line)

    if cfg.args.decode:
        try:
            kind, payload = addrlib.decode(cfg.netParams, cfg.args.decode)
        except crypto.DecodeError as e:
            print(f"{cfg.args.decode}: {type(e).__name__}: {e}")
            return 1
        print(f"{cfg.args.decode}: {kind} {payload.hex()}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
