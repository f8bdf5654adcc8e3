"""
Copyright (c) 2025, The Junkcoin developers
See LICENSE for details
"""

import pytest

from junkcoin import JunkcoinError, checkpoints
from junkcoin.checkpoints import CheckpointMismatch
from junkcoin.crypto import crypto
from junkcoin.nets.params import Params
from junkcoin.nets import mainnet as mainnetTable


CHECKPOINT_0 = "000000000019d6689c085ae165831e934ff763ae46a2a6c172b3f1b60a8ce26f"
CHECKPOINT_53 = "b623a39a5a0534990a59916d5803fa2bd6a6d52d8e594546936a42a2cc9b0441"


def test_verifyCheckpoint(mainnet):
    checkpoints.verifyCheckpoint(mainnet, 0, CHECKPOINT_0)
    checkpoints.verifyCheckpoint(mainnet, 0, crypto.newHashFromStr(CHECKPOINT_0))
    checkpoints.verifyCheckpoint(mainnet, 53, CHECKPOINT_53)

    # No checkpoint at the height. Anything passes.
    checkpoints.verifyCheckpoint(mainnet, 54, CHECKPOINT_53)
    checkpoints.verifyCheckpoint(mainnet, 10 ** 7, "00" * 32)

    with pytest.raises(CheckpointMismatch) as e:
        checkpoints.verifyCheckpoint(mainnet, 53, CHECKPOINT_0)
    assert e.value.height == 53
    assert e.value.expected.rhex() == CHECKPOINT_53
    assert e.value.got.rhex() == CHECKPOINT_0
    assert isinstance(e.value, JunkcoinError)


def test_verifyGenesis(mainnet, testnet):
    for netParams in (mainnet, testnet):
        checkpoints.verifyCheckpoint(netParams, 0, netParams.GenesisHash)
        checkpoints.verifyCheckpoint(netParams, 0, netParams.genesisHashStr())

    with pytest.raises(CheckpointMismatch) as e:
        checkpoints.verifyCheckpoint(mainnet, 0, testnet.GenesisHash)
    assert e.value.expected == mainnet.GenesisHash
    assert e.value.got == testnet.GenesisHash

    # The published hash of the deployed chain is not this genesis block.
    with pytest.raises(CheckpointMismatch):
        checkpoints.verifyCheckpoint(
            mainnet, 0, "a2effa738145e377e08a61d76179c21703e13e48910b30a2a87f0dfe794b64c6"
        )


def test_parseBlockHash():
    h = checkpoints.parseBlockHash(CHECKPOINT_0)
    assert h.rhex() == CHECKPOINT_0
    assert checkpoints.parseBlockHash(h.bytes()) == h
    with pytest.raises(crypto.DecodeError):
        checkpoints.parseBlockHash(b"\x00" * 31)
    with pytest.raises(crypto.DecodeError):
        checkpoints.parseBlockHash("not a hash")


def test_latest(mainnet, testnet):
    assert checkpoints.lastCheckpointHeight(mainnet) == 168312
    assert checkpoints.latestCheckpoint(mainnet).hash.rhex() == (
        "deea2bcecb1146ae9cd74d67b29b4d0161e9bb63beb9022ca10f3625dda6c0e6"
    )
    assert checkpoints.lastCheckpointHeight(testnet) == 0

    bare = Params.fromModule(_noCheckpoints())
    assert checkpoints.latestCheckpoint(bare) is None
    assert checkpoints.lastCheckpointHeight(bare) is None
    assert checkpoints.findPreviousCheckpoint(bare, 100) is None
    assert not checkpoints.reorgViolatesCheckpoint(bare, 0)


def test_findPreviousCheckpoint(mainnet):
    assert checkpoints.findPreviousCheckpoint(mainnet, 0).height == 0
    assert checkpoints.findPreviousCheckpoint(mainnet, 52).height == 1
    assert checkpoints.findPreviousCheckpoint(mainnet, 53).height == 53
    assert checkpoints.findPreviousCheckpoint(mainnet, 6451).height == 200
    assert checkpoints.findPreviousCheckpoint(mainnet, 10 ** 7).height == 168312
    assert checkpoints.findPreviousCheckpoint(mainnet, -1) is None


def test_reorgViolatesCheckpoint(mainnet, testnet):
    assert checkpoints.reorgViolatesCheckpoint(mainnet, 1)
    assert checkpoints.reorgViolatesCheckpoint(mainnet, 168312)
    assert not checkpoints.reorgViolatesCheckpoint(mainnet, 168313)
    assert checkpoints.reorgViolatesCheckpoint(testnet, 0)
    assert not checkpoints.reorgViolatesCheckpoint(testnet, 1)


def _noCheckpoints():
    class Table:
        pass

    t = Table()
    for k in dir(mainnetTable):
        if not k.startswith("_"):
            setattr(t, k, getattr(mainnetTable, k))
    t.Checkpoints = []
    return t
