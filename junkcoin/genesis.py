"""
Copyright (c) 2025, The Junkcoin developers
See LICENSE for details

Construction of the genesis block that anchors each network.
"""

from junkcoin.util import helpers
from junkcoin.util.encode import ByteArray
from junkcoin.wire.msgblock import BlockHeader, MsgBlock, calcMerkleRoot
from junkcoin.wire.msgtx import MaxPrevOutIndex, MaxTxInSequenceNum, MsgTx, OutPoint, TxIn, TxOut


log = helpers.getLogger("GENESIS")

# The coinbase signature script. Only the text matters; the leading pushes
# encode the bits 0x1d00ffff and the number 4.
GenesisSignatureScript = ByteArray(
    "04ffff001d0104455468652054696d65732030332f4a616e2f32303039204368616e63656c6c6f72"
    "206f6e206272696e6b206f66207365636f6e64206261696c6f757420666f722062616e6b73"
)  # |The Times 03/Jan/2009 Chancellor on brink of second bailout for banks|

# The coinbase output script pays to an uncompressed public key.
GenesisPkScript = ByteArray(
    "4104678afdb0fe5548271967f1a67130b7105cd6a828e03909a67962e0ea1f61deb649f6bc3f4cef"
    "38c4f35504e51ec112de5c384df7ba0b8d578a4c702b6bf11d5fac"
)

GenesisCoinbaseValue = 0x12A05F200


def genesisCoinbaseTx():
    """
    The coinbase transaction shared by the genesis blocks of all networks.
    A new instance is returned on each call.

    Returns:
        MsgTx: The coinbase transaction.
    """
    return MsgTx(
        version=1,
        txIn=[
            TxIn(
                previousOutPoint=OutPoint(txHash=None, idx=MaxPrevOutIndex),
                signatureScript=GenesisSignatureScript.copy(),
                sequence=MaxTxInSequenceNum,
            )
        ],
        txOut=[TxOut(value=GenesisCoinbaseValue, pkScript=GenesisPkScript.copy())],
        lockTime=0,
    )


def buildGenesisBlock(version, timestamp, bits, nonce, coinbaseTx=None):
    """
    Build a genesis block and compute its hash. The previous block hash is all
    zeroes and the merkle root commits to the single coinbase transaction.
    The result depends only on the arguments.

    Args:
        version (int): The block version.
        timestamp (int): The block time, in UNIX seconds.
        bits (int): The compact difficulty target.
        nonce (int): The header nonce.
        coinbaseTx (MsgTx): optional. default genesisCoinbaseTx(). The
            coinbase transaction.

    Returns:
        MsgBlock: The genesis block.
        ByteArray: The block hash, in internal byte order.
    """
    if coinbaseTx is None:
        coinbaseTx = genesisCoinbaseTx()
    header = BlockHeader(
        version=version,
        prevBlock=None,
        merkleRoot=calcMerkleRoot([coinbaseTx]),
        timestamp=timestamp,
        bits=bits,
        nonce=nonce,
    )
    block = MsgBlock(header=header, transactions=[coinbaseTx])
    blockHash = header.blockHash()
    log.debug(f"built genesis block {blockHash.rhex()}")
    return block, blockHash
