"""
Copyright (c) 2025, The Junkcoin developers
See LICENSE for details

Hard-coded checkpoint enforcement. The functions here only detect conflicts
with the checkpoints; rejecting a block or a reorganization is up to the
caller.
"""

import bisect

from junkcoin import JunkcoinError
from junkcoin.crypto import crypto
from junkcoin.util.encode import ByteArray


class CheckpointMismatch(JunkcoinError):
    """
    A block hash at a checkpointed height differs from the checkpoint.
    """

    def __init__(self, height, expected, got):
        """
        Args:
            height (int): The checkpoint height.
            expected (ByteArray): The checkpoint hash.
            got (ByteArray): The offending hash.
        """
        super().__init__(
            f"block at height {height} has hash {got.rhex()}, checkpoint is {expected.rhex()}"
        )
        self.height = height
        self.expected = expected
        self.got = got


def parseBlockHash(blockHash):
    """
    Accept a hash either as a big-endian hex display string or as 32 bytes in
    internal byte order.

    Args:
        blockHash (str or byte-like): The hash.

    Returns:
        ByteArray: The hash in internal byte order.
    """
    if isinstance(blockHash, str):
        return crypto.newHashFromStr(blockHash)
    b = ByteArray(blockHash)
    if len(b) != crypto.HASH_SIZE:
        raise crypto.DecodeError(f"block hash must be {crypto.HASH_SIZE} bytes, got {len(b)}")
    return b


def verifyCheckpoint(netParams, height, blockHash):
    """
    Verify the block hash against the checkpoint at the height, if there is
    one. Heights without a checkpoint always pass.

    Args:
        netParams (Params): The network parameters.
        height (int): The block height.
        blockHash (str or ByteArray): The block hash. See parseBlockHash.
    """
    checkpoint = netParams.checkpoint(height)
    if checkpoint is None:
        return
    blockHash = parseBlockHash(blockHash)
    if checkpoint.hash != blockHash:
        raise CheckpointMismatch(height, checkpoint.hash, blockHash)


def latestCheckpoint(netParams):
    """
    The most recent checkpoint.

    Args:
        netParams (Params): The network parameters.

    Returns:
        Checkpoint or None: None if the network has no checkpoints.
    """
    if not netParams.Checkpoints:
        return None
    return netParams.Checkpoints[-1]


def lastCheckpointHeight(netParams):
    """
    The height of the most recent checkpoint.

    Args:
        netParams (Params): The network parameters.

    Returns:
        int or None: None if the network has no checkpoints.
    """
    checkpoint = latestCheckpoint(netParams)
    return checkpoint.height if checkpoint else None


def findPreviousCheckpoint(netParams, height):
    """
    The highest checkpoint at or below the height.

    Args:
        netParams (Params): The network parameters.
        height (int): The block height.

    Returns:
        Checkpoint or None: None if no checkpoint is at or below the height.
    """
    heights = [c.height for c in netParams.Checkpoints]
    idx = bisect.bisect_right(heights, height)
    if idx == 0:
        return None
    return netParams.Checkpoints[idx - 1]


def reorgViolatesCheckpoint(netParams, forkHeight):
    """
    Whether a reorganization that replaces the block at forkHeight (and every
    block after it) would rewrite a block at or below the last checkpoint.

    Args:
        netParams (Params): The network parameters.
        forkHeight (int): The height of the first replaced block.

    Returns:
        bool: True if the reorganization must be refused.
    """
    lastHeight = lastCheckpointHeight(netParams)
    if lastHeight is None:
        return False
    return forkHeight <= lastHeight
