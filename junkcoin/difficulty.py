"""
Copyright (c) 2025, The Junkcoin developers
See LICENSE for details

Proof-of-work target encoding and the difficulty retarget rules.
"""

from junkcoin import JunkcoinError
from junkcoin.util import helpers


log = helpers.getLogger("DIFFICULTY")

# The sign bit of the compact encoding's mantissa.
COMPACT_SIGN_BIT = 0x00800000
COMPACT_MANTISSA_MASK = 0x007FFFFF

ONE_LSH_256 = 1 << 256


class DifficultyError(JunkcoinError):
    """
    A proof-of-work or retarget computation could not be completed with the
    provided data.
    """

    pass


class BlockNode:
    """
    BlockNode is the part of a block header that the retarget rules look at.
    """

    def __init__(self, height, timestamp, bits):
        """
        Args:
            height (int): The block height.
            timestamp (int): The block time, UNIX seconds.
            bits (int): The compact difficulty target of the block.
        """
        self.height = height
        self.timestamp = timestamp
        self.bits = bits

    def __repr__(self):
        return f"BlockNode(height={self.height}, timestamp={self.timestamp}, bits={self.bits:#010x})"


def compactToBig(compact):
    """
    compactToBig converts a compact representation of a whole number N to an
    integer. The representation is similar to IEEE754 floating point numbers.

    Like IEEE754 floating point, there are three basic components: the sign,
    the exponent, and the mantissa. They are broken out as follows:

      * the most significant 8 bits represent the unsigned base 256 exponent
      * bit 23 (the 24th bit) represents the sign bit
      * the least significant 23 bits represent the mantissa

      -------------------------------------------------
      |   Exponent     |    Sign    |    Mantissa     |
      -------------------------------------------------
      | 8 bits [31-24] | 1 bit [23] | 23 bits [22-00] |
      -------------------------------------------------

    The formula to calculate N is:
      N = (-1^sign) * mantissa * 256^(exponent-3)

    Args:
        compact (int): The uint32 compact value.

    Returns:
        int: The decoded number.
    """
    mantissa = compact & COMPACT_MANTISSA_MASK
    isNegative = compact & COMPACT_SIGN_BIT != 0
    exponent = compact >> 24

    # Since the base for the exponent is 256, the exponent can be treated as
    # the number of bytes to represent the full 256-bit number. So, treat
    # the exponent as the number of bytes and shift the mantissa right or left
    # accordingly.
    if exponent <= 3:
        bn = mantissa >> (8 * (3 - exponent))
    else:
        bn = mantissa << (8 * (exponent - 3))

    return -bn if isNegative else bn


def bigToCompact(n):
    """
    bigToCompact converts a whole number N to a compact representation using
    an unsigned 32-bit number. The compact representation only provides 23
    bits of precision, so values larger than (2^23 - 1) only encode the most
    significant digits of the number. See compactToBig for details.

    Args:
        n (int): The number.

    Returns:
        int: The uint32 compact value.
    """
    # No need to do any work if it's zero.
    if n == 0:
        return 0

    # Since the base for the exponent is 256, the exponent can be treated as
    # the number of bytes. So, shift the number right or left accordingly.
    # This is equivalent to:
    # mantissa = mantissa / 256^(exponent-3)
    tn = abs(n)
    exponent = (tn.bit_length() + 7) // 8
    if exponent <= 3:
        mantissa = tn << (8 * (3 - exponent))
    else:
        mantissa = tn >> (8 * (exponent - 3))

    # When the mantissa already has the sign bit set, the number is too large
    # to fit into the available 23-bits, so divide the number by 256 and
    # increment the exponent accordingly.
    if mantissa & COMPACT_SIGN_BIT:
        mantissa >>= 8
        exponent += 1

    # Pack the exponent, sign bit, and mantissa into an unsigned 32-bit int
    # and return it.
    compact = (exponent << 24) | mantissa
    if n < 0:
        compact |= COMPACT_SIGN_BIT
    return compact


def calcWork(bits):
    """
    calcWork calculates a work value from difficulty bits. The work is the
    expected number of hashes needed to find a block at the target,
    2^256 / (target+1).

    Args:
        bits (int): The compact difficulty target.

    Returns:
        int: The work value. Zero for a non-positive target.
    """
    difficultyNum = compactToBig(bits)
    if difficultyNum <= 0:
        return 0
    return ONE_LSH_256 // (difficultyNum + 1)


def hashToBig(blockHash):
    """
    hashToBig converts a hash in internal byte order to an integer that can be
    compared against a target.

    Args:
        blockHash (ByteArray): The hash.

    Returns:
        int: The hash as an integer.
    """
    return int.from_bytes(blockHash.bytes(), "little")


def checkProofOfWork(blockHash, bits, powLimit):
    """
    checkProofOfWork ensures the target encoded in bits is in the allowed
    range and that the block hash is no greater than the target.

    Args:
        blockHash (ByteArray): The block hash, in internal byte order.
        bits (int): The claimed compact difficulty target.
        powLimit (int): The highest allowed target.
    """
    target = compactToBig(bits)
    if target <= 0:
        raise DifficultyError(f"block target difficulty of {target:064x} is too low")
    if target > powLimit:
        raise DifficultyError(
            f"block target difficulty of {target:064x} is higher than max of {powLimit:064x}"
        )
    hashNum = hashToBig(blockHash)
    if hashNum > target:
        raise DifficultyError(
            f"block hash of {hashNum:064x} is higher than expected max of {target:064x}"
        )


def findPrevTestNetDifficulty(netParams, nodes):
    """
    findPrevTestNetDifficulty returns the difficulty of the most recent block
    that did not have the special minimum difficulty rule applied. Blocks on a
    retarget boundary always carry a real difficulty.

    Args:
        netParams (Params): The network parameters.
        nodes (list(BlockNode)): Contiguous nodes, oldest first.

    Returns:
        int: The compact difficulty.
    """
    blocksPerRetarget = netParams.blocksPerRetarget
    for node in reversed(nodes):
        if node.height % blocksPerRetarget == 0 or node.bits != netParams.PowLimitBits:
            return node.bits
    # Every known node is a minimum-difficulty block.
    return netParams.PowLimitBits


def calcNextRequiredDifficulty(netParams, lastNodes, newBlockTime):
    """
    calcNextRequiredDifficulty calculates the required difficulty for the
    block after the last of lastNodes.

    Outside of a retarget boundary the difficulty of the previous block
    carries over, except on networks that allow minimum-difficulty blocks
    after an idle gap. On a boundary the target is scaled by the observed
    timespan of the last retarget window, clamped to the adjustment factor
    and capped at the proof-of-work limit.

    Args:
        netParams (Params): The network parameters.
        lastNodes (list(BlockNode)): Contiguous nodes ending with the
            previous block, oldest first. A retarget needs at least
            blocksPerRetarget of them. Empty means the next block is the
            genesis block.
        newBlockTime (int): The timestamp of the block being validated,
            UNIX seconds.

    Returns:
        int: The required compact difficulty.
    """
    # Genesis block.
    if not lastNodes:
        return netParams.PowLimitBits

    lastNode = lastNodes[-1]
    blocksPerRetarget = netParams.blocksPerRetarget

    # Return the previous block's difficulty requirements if this block
    # is not at a difficulty retarget interval.
    if (lastNode.height + 1) % blocksPerRetarget != 0:
        # For networks that support it, allow special reduction of the
        # required difficulty once too much time has elapsed without
        # mining a block.
        if netParams.ReduceMinDifficulty:
            # Return minimum difficulty when more than the desired
            # amount of time has elapsed without mining a block.
            allowMinTime = lastNode.timestamp + netParams.MinDiffReductionTime
            if newBlockTime > allowMinTime:
                return netParams.PowLimitBits

            # The block was mined within the desired timeframe, so
            # return the difficulty for the last block which did
            # not have the special minimum difficulty rule applied.
            return findPrevTestNetDifficulty(netParams, lastNodes)

        # For the main network (or any unrecognized networks), simply
        # return the previous block's difficulty requirements.
        return lastNode.bits

    # Get the block node at the previous retarget (targetTimespan days
    # worth of blocks).
    if len(lastNodes) < blocksPerRetarget:
        raise DifficultyError(
            f"unable to obtain previous retarget block: need {blocksPerRetarget} nodes, got {len(lastNodes)}"
        )
    firstNode = lastNodes[-blocksPerRetarget]
    if firstNode.height != lastNode.height - (blocksPerRetarget - 1):
        raise DifficultyError(
            f"retarget window is not contiguous: first height {firstNode.height}, last height {lastNode.height}"
        )

    # Limit the amount of adjustment that can occur to the previous
    # difficulty.
    actualTimespan = lastNode.timestamp - firstNode.timestamp
    adjustedTimespan = actualTimespan
    if actualTimespan < netParams.minRetargetTimespan:
        adjustedTimespan = netParams.minRetargetTimespan
    elif actualTimespan > netParams.maxRetargetTimespan:
        adjustedTimespan = netParams.maxRetargetTimespan

    # Calculate new target difficulty as:
    #  currentDifficulty * (adjustedTimespan / targetTimespan)
    # The result uses integer division which means it will be slightly
    # rounded down.
    oldTarget = compactToBig(lastNode.bits)
    newTarget = oldTarget * adjustedTimespan // netParams.TargetTimespan

    # Limit new value to the proof of work limit.
    if newTarget > netParams.PowLimit:
        newTarget = netParams.PowLimit

    # The logged target is decoded from the compact bits, which carry less
    # precision than newTarget.
    newTargetBits = bigToCompact(newTarget)
    log.debug(
        f"difficulty retarget at block height {lastNode.height + 1}: "
        f"old target {lastNode.bits:08x}, new target {newTargetBits:08x} "
        f"({compactToBig(newTargetBits):064x}), actual timespan {actualTimespan}s, "
        f"adjusted timespan {adjustedTimespan}s, target timespan {netParams.TargetTimespan}s"
    )
    return newTargetBits
