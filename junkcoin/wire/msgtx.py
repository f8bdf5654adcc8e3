"""
Copyright (c) 2025, The Junkcoin developers
See LICENSE for details

The legacy (non-witness) transaction encoding. Only what is needed to
serialize and hash the genesis coinbase is implemented.
"""

from typing import List, Optional

from junkcoin import JunkcoinError
from junkcoin.crypto import crypto
from junkcoin.util.encode import ByteArray
from junkcoin.wire import wire


HASH_SIZE = crypto.HASH_SIZE

# TxVersion is the current latest supported transaction version.
TxVersion = 1

# MaxTxInSequenceNum is the maximum sequence number the sequence field
# of a transaction input can be.
MaxTxInSequenceNum = 0xFFFFFFFF

# MaxPrevOutIndex is the maximum index the index field of a previous
# outpoint can be.
MaxPrevOutIndex = 0xFFFFFFFF


class OutPoint:
    """
    OutPoint defines a data type that is used to track previous transaction
    outputs.
    """

    def __init__(self, txHash: Optional[ByteArray], idx: int):
        self.hash = txHash if txHash else ByteArray(0, length=HASH_SIZE)
        self.index = idx

    def __eq__(self, other: "OutPoint") -> bool:
        return self.hash == other.hash and self.index == other.index

    def isNull(self) -> bool:
        """
        A null outpoint has a zero hash and the maximum index. It marks a
        coinbase input.
        """
        return self.index == MaxPrevOutIndex and self.hash.iszero()

    def txid(self) -> str:
        return reversed(self.hash).hex()


class TxIn:
    """
    TxIn defines a transaction input.
    """

    def __init__(
        self,
        previousOutPoint: OutPoint,
        sequence: int = MaxTxInSequenceNum,
        signatureScript: Optional[ByteArray] = None,
    ):
        self.previousOutPoint = previousOutPoint
        self.sequence = sequence  # uint32
        self.signatureScript = signatureScript or ByteArray(b"")

    def __eq__(self, ti: "TxIn") -> bool:
        return (
            self.previousOutPoint == ti.previousOutPoint
            and self.sequence == ti.sequence
            and self.signatureScript == ti.signatureScript
        )

    def serializeSize(self) -> int:
        # Outpoint Hash 32 bytes + Outpoint Index 4 bytes + Sequence 4 bytes +
        # serialized varint size for the length of SignatureScript +
        # SignatureScript bytes.
        sigLen = len(self.signatureScript)
        return 40 + wire.varIntSerializeSize(sigLen) + sigLen


class TxOut:
    """
    TxOut defines a transaction output.
    """

    def __init__(self, value: int = 0, pkScript: Optional[ByteArray] = None):
        self.value = value
        self.pkScript = pkScript or ByteArray()

    def serializeSize(self) -> int:
        return 8 + wire.varIntSerializeSize(len(self.pkScript)) + len(self.pkScript)

    def __eq__(self, to: "TxOut") -> bool:
        return self.value == to.value and self.pkScript == to.pkScript


class MsgTx:
    """
    MsgTx represents a transaction message.
    """

    def __init__(
        self,
        version: int = TxVersion,
        txIn: Optional[List[TxIn]] = None,
        txOut: Optional[List[TxOut]] = None,
        lockTime: int = 0,
    ):
        self.version = version
        self.txIn = txIn or []
        self.txOut = txOut or []
        self.lockTime = lockTime

    def __eq__(self, tx):
        return (
            self.version == tx.version
            and len(self.txIn) == len(tx.txIn)
            and len(self.txOut) == len(tx.txOut)
            and all((a == b for a, b in zip(self.txIn, tx.txIn)))
            and all((a == b for a, b in zip(self.txOut, tx.txOut)))
            and self.lockTime == tx.lockTime
        )

    def addTxIn(self, ti: TxIn):
        self.txIn.append(ti)

    def addTxOut(self, to: TxOut):
        self.txOut.append(to)

    def isCoinBase(self) -> bool:
        """
        A coinbase has exactly one input, which spends the null outpoint.
        """
        return len(self.txIn) == 1 and self.txIn[0].previousOutPoint.isNull()

    def hash(self) -> ByteArray:
        """
        The double-SHA256 of the serialized transaction, in internal byte
        order.
        """
        expSize = self.serializeSize()
        toHash = self.serialize()
        if len(toHash) != expSize:
            raise JunkcoinError(
                f"txHash: expected {expSize}-byte serialization, got {len(toHash)} bytes"
            )
        return crypto.doubleHashH(toHash.bytes())

    def txid(self) -> str:
        return self.hash().rhex()

    def btcEncode(self, pver: int) -> ByteArray:
        b = ByteArray(self.version, length=4).littleEndian()

        b += wire.writeVarInt(pver, len(self.txIn))
        for ti in self.txIn:
            b += writeTxIn(pver, ti)

        b += wire.writeVarInt(pver, len(self.txOut))
        for to in self.txOut:
            b += writeTxOut(pver, to)

        b += ByteArray(self.lockTime, length=4).littleEndian()
        return b

    def serialize(self) -> ByteArray:
        return self.btcEncode(0)

    def serializeSize(self) -> int:
        # Version 4 bytes + LockTime 4 bytes + Serialized varint size for the
        # number of transaction inputs and outputs.
        n = (
            8
            + wire.varIntSerializeSize(len(self.txIn))
            + wire.varIntSerializeSize(len(self.txOut))
        )
        for txIn in self.txIn:
            n += txIn.serializeSize()
        for txOut in self.txOut:
            n += txOut.serializeSize()
        return n


def writeOutPoint(pver: int, op: OutPoint) -> ByteArray:
    return op.hash + ByteArray(op.index, length=4).littleEndian()


def writeTxIn(pver: int, ti: TxIn) -> ByteArray:
    b = writeOutPoint(pver, ti.previousOutPoint)
    b += wire.writeVarBytes(pver, ti.signatureScript)
    return b + ByteArray(ti.sequence, length=4).littleEndian()


def writeTxOut(pver: int, to: TxOut) -> ByteArray:
    b = ByteArray(to.value, length=8).littleEndian()
    return b + wire.writeVarBytes(pver, to.pkScript)
