"""
Copyright (c) 2025, The Junkcoin developers
See LICENSE for details
"""

import pytest

from junkcoin import JunkcoinError
from junkcoin.util.encode import ByteArray, decodeBA, intFromBytes, intToBytes, rba


class TestEncode:
    def test_ByteArray(self):
        makeA = lambda: ByteArray([0, 0, 255])
        makeB = lambda: ByteArray([0, 255, 0])
        makeC = lambda: ByteArray([255, 0, 0])
        zero = ByteArray([0, 0, 0])

        assert zero.iszero()
        assert not makeA().iszero()
        assert ByteArray(b"", length=3) == zero
        assert ByteArray(0, length=3) == zero
        assert ByteArray(255, length=3) == makeA()
        assert ByteArray("0000ff") == makeA()

        zero2 = ByteArray(zero)
        assert zero.b is not zero2.b
        assert zero == zero2

        zero2 = ByteArray(zero, copy=False)
        assert zero.b is zero2.b

        assert makeA() < makeB()
        assert makeC() > makeB()
        assert makeA() != makeB()
        assert not (makeA() == None)  # noqa
        assert makeA() != None  # noqa
        assert makeA() <= makeA()
        assert makeB() >= makeA()

        a = makeA()
        assert a[2] == 255
        assert a[1:] == bytearray([0, 255])
        assert a + makeC() == bytearray([0, 0, 255, 255, 0, 0])
        a += makeB()
        assert len(a) == 6

        assert reversed(makeA()) == makeC()
        assert makeA().rhex() == "ff0000"
        assert makeA().hex() == "0000ff"
        assert makeA().int() == 255
        assert makeA().littleEndian() == makeC()
        assert makeC().unLittle() == makeA()
        assert makeA().bytes() == b"\x00\x00\xff"
        assert rba("0000ff") == makeC()

        assert hash(makeA()) == hash(makeA())
        assert {makeA(): 1}[makeA()] == 1

        c = makeA().copy()
        assert c == makeA()

        with pytest.raises(JunkcoinError):
            ByteArray(256, length=1)

    def test_pop(self):
        b = ByteArray("0102030405")
        assert b.pop(2) == bytearray([1, 2])
        assert b == bytearray([3, 4, 5])
        assert b.pop(3) == bytearray([3, 4, 5])
        assert len(b) == 0
        with pytest.raises(JunkcoinError):
            b.pop(1)

    def test_ints(self):
        assert intToBytes(0) == bytearray()
        assert intToBytes(256) == bytearray([1, 0])
        assert intFromBytes(b"\x01\x00") == 256
        assert decodeBA(0) == bytearray([0])
        with pytest.raises(TypeError):
            decodeBA(1.5)
