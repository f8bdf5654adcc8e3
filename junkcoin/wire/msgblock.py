"""
Copyright (c) 2025, The Junkcoin developers
See LICENSE for details

Block header and block messages.
"""

from junkcoin.crypto import crypto
from junkcoin.util.encode import ByteArray
from junkcoin.wire import wire


HASH_SIZE = crypto.HASH_SIZE

# Version 4 bytes + PrevBlock 32 bytes + MerkleRoot 32 bytes + Timestamp 4
# bytes + Bits 4 bytes + Nonce 4 bytes.
MaxBlockHeaderPayload = 16 + (HASH_SIZE * 2)


class BlockHeader:
    """
    BlockHeader defines information about a block and is used in the block
    (MsgBlock) and headers (MsgHeaders) messages.
    """

    def __init__(
        self,
        version=1,
        prevBlock=None,
        merkleRoot=None,
        timestamp=0,
        bits=0,
        nonce=0,
    ):
        # version of the block.  This is not the same as the protocol version.
        self.version = version  # int32

        # hash of the previous block header in the block chain.
        self.prevBlock = prevBlock if prevBlock else ByteArray(0, length=HASH_SIZE)

        # merkle tree reference to hash of all transactions for the block.
        self.merkleRoot = merkleRoot if merkleRoot else ByteArray(0, length=HASH_SIZE)

        # time the block was created.  This is encoded as a uint32 on the
        # wire and therefore is limited to 2106.
        self.timestamp = timestamp  # uint32

        # difficulty target for the block.
        self.bits = bits  # uint32

        # nonce used to generate the block.
        self.nonce = nonce  # uint32

    def __eq__(self, bh):
        return (
            self.version == bh.version
            and self.prevBlock == bh.prevBlock
            and self.merkleRoot == bh.merkleRoot
            and self.timestamp == bh.timestamp
            and self.bits == bh.bits
            and self.nonce == bh.nonce
        )

    def btcEncode(self, pver):
        """
        Args:
            pver (int): the protocol version.
        """
        b = ByteArray(self.version, length=4).littleEndian()
        b += ByteArray(self.prevBlock, length=HASH_SIZE)
        b += ByteArray(self.merkleRoot, length=HASH_SIZE)
        b += ByteArray(self.timestamp, length=4).littleEndian()
        b += ByteArray(self.bits, length=4).littleEndian()
        b += ByteArray(self.nonce, length=4).littleEndian()
        return b

    def serialize(self):
        """
        Serialize the BlockHeader.

        Returns:
            ByteArray: The 80-byte serialized BlockHeader.
        """
        return self.btcEncode(0)

    def blockHash(self):
        """
        blockHash computes the block identifier hash for the header.

        Returns:
            ByteArray: The hash, in internal byte order.
        """
        return crypto.doubleHashH(self.serialize().bytes())

    def id(self):
        return self.blockHash().rhex()


class MsgBlock:
    """
    MsgBlock represents a block message. It is used to deliver block and
    transaction information.
    """

    def __init__(self, header=None, transactions=None):
        self.header = header if header else BlockHeader()
        self.transactions = transactions or []

    def addTransaction(self, tx):
        self.transactions.append(tx)

    def blockHash(self):
        return self.header.blockHash()

    def serialize(self):
        """
        Serialize the header, a varint transaction count and the
        transactions.

        Returns:
            ByteArray: The serialized block.
        """
        b = self.header.serialize()
        b += wire.writeVarInt(0, len(self.transactions))
        for tx in self.transactions:
            b += tx.serialize()
        return b


def hashMerkleBranches(left, right):
    """
    hashMerkleBranches takes two hashes, treated as the left and right tree
    nodes, and returns the hash of their concatenation.

    Args:
        left (ByteArray): The left node.
        right (ByteArray): The right node.

    Returns:
        ByteArray: The parent hash.
    """
    return crypto.doubleHashH((left + right).bytes())


def calcMerkleRoot(txs):
    """
    calcMerkleRoot computes the merkle root of the transactions. A level with
    an odd number of nodes pairs its last node with itself. A single
    transaction is its own root.

    Args:
        txs (list(MsgTx)): The transactions.

    Returns:
        ByteArray: The merkle root.
    """
    if len(txs) == 0:
        return ByteArray(0, length=HASH_SIZE)
    level = [tx.hash() for tx in txs]
    while len(level) > 1:
        if len(level) % 2:
            level.append(level[-1])
        level = [
            hashMerkleBranches(level[i], level[i + 1]) for i in range(0, len(level), 2)
        ]
    return level[0]
