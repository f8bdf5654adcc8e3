"""
Copyright (c) 2025, The Junkcoin developers
See LICENSE for details

Constants and common routines of the wire encoding.
"""

from junkcoin.util.encode import ByteArray


# fmt: off
MaxUint16 = (1 << 16) - 1
MaxUint32 = (1 << 32) - 1
# fmt: on


def varIntSerializeSize(i):
    """
    The number of bytes needed to serialize i as a varint.
    """
    if i < 0xFD:
        return 1

    # Discriminant 1 byte plus 2 bytes for the uint16.
    if i <= MaxUint16:
        return 3

    # Discriminant 1 byte plus 4 bytes for the uint32.
    if i <= MaxUint32:
        return 5

    # Discriminant 1 byte plus 8 bytes for the uint64.
    return 9


def writeVarInt(pver, val):
    """
    writeVarInt serializes val using a variable number of bytes depending
    on its value.

    Args:
        pver int: the protocol version.
        val int: the value to be serialized.
    """
    if val < 0xFD:
        return ByteArray(val, length=1)

    if val <= MaxUint16:
        return ByteArray(0xFD) + ByteArray(val, length=2).littleEndian()

    if val <= MaxUint32:
        return ByteArray(0xFE) + ByteArray(val, length=4).littleEndian()

    return ByteArray(0xFF) + ByteArray(val, length=8).littleEndian()


def writeVarBytes(pver, inBytes):
    """
    writeVarBytes serializes a variable length byte array as a varint
    containing the number of bytes, followed by the bytes themselves.
    """
    return writeVarInt(pver, len(inBytes)) + inBytes

