"""
Copyright (c) 2025, The Junkcoin developers
See LICENSE for details
"""

from junkcoin.util.encode import ByteArray
from junkcoin.wire import msgblock, msgtx


GENESIS_HEADER = (
    "0100000000000000000000000000000000000000000000000000000000000000000000003ba3edfd"
    "7a7b12b27ac72c3e67768f617fc81bc3888a51323a9fb8aa4b1e5e4a29ab5f49ffff001d1dac2b7c"
)
GENESIS_HASH = "000000000019d6689c085ae165831e934ff763ae46a2a6c172b3f1b60a8ce26f"


class TestBlockHeader:
    def test_encode(self):
        bh = genesisHeader()
        assert bh.serialize().hex() == GENESIS_HEADER
        assert len(bh.serialize()) == msgblock.MaxBlockHeaderPayload
        assert bh.id() == GENESIS_HASH
        assert bh.blockHash().rhex() == GENESIS_HASH

    def test_defaults(self):
        bh = msgblock.BlockHeader()
        assert bh.prevBlock.iszero()
        assert bh.merkleRoot.iszero()
        assert bh.serialize().hex() == "01000000" + "00" * 76

    def test_equal(self):
        a, b = genesisHeader(), genesisHeader()
        assert a == b
        b.nonce += 1
        assert a != b
        assert a.blockHash() != b.blockHash()


def genesisHeader():
    return msgblock.BlockHeader(
        version=1,
        merkleRoot=ByteArray(GENESIS_HEADER[72:136]),
        timestamp=1231006505,
        bits=0x1D00FFFF,
        nonce=2083236893,
    )


def _tx(n):
    op = msgtx.OutPoint(txHash=ByteArray(n, length=32), idx=n)
    return msgtx.MsgTx(txIn=[msgtx.TxIn(previousOutPoint=op)], txOut=[msgtx.TxOut(value=n)])


def test_calcMerkleRoot():
    assert msgblock.calcMerkleRoot([]).iszero()

    a, b, c = _tx(1), _tx(2), _tx(3)
    assert msgblock.calcMerkleRoot([a]) == a.hash()

    ab = msgblock.hashMerkleBranches(a.hash(), b.hash())
    assert msgblock.calcMerkleRoot([a, b]) == ab

    # An odd level pairs its last node with itself.
    cc = msgblock.hashMerkleBranches(c.hash(), c.hash())
    assert msgblock.calcMerkleRoot([a, b, c]) == msgblock.hashMerkleBranches(ab, cc)


def test_msgBlock():
    block = msgblock.MsgBlock()
    block.addTransaction(_tx(1))
    block.header.merkleRoot = msgblock.calcMerkleRoot(block.transactions)
    b = block.serialize()
    assert len(b) == 80 + 1 + block.transactions[0].serializeSize()
    assert block.blockHash() == block.header.blockHash()
