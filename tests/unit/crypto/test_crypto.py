"""
Copyright (c) 2025, The Junkcoin developers
See LICENSE for details
"""

from base58 import b58decode, b58encode
import pytest

from junkcoin import JunkcoinError
from junkcoin.crypto import crypto
from junkcoin.util.encode import ByteArray


# BIP32 test vector 1, master keys.
XPRV = (
    "xprv9s21ZrQH143K3QTDL4LXw2F7HEK3wJUD2nW2nRk4stbPy6cq3jPPqjiChkVvvNKmPGJxW"
    "Utg6LnF5kejMRNNU3TGtRBeJgk33yuGBxrMPHi"
)
XPUB = (
    "xpub661MyMwAqRbcFtXgS5sYJABqqG9YLmC4Q1Rdap9gSE8NqtwybGhePY2gZ29ESFjqJoCu1"
    "Rupje8YtGqsefD265TMg7usUDFdp6W1EGMcet8"
)
CHAIN_CODE = "873dff81c02f525623fd1fe5167eac3a55a049de3d314bb42ee227ffed37d508"
PRIV_KEY = "e8f32e723decf4051aefac8e2c93c9c5b214313817cdb01a1494b917c8436b35"
PUB_KEY = "0339a36013301597daef41fbe593a02cc513d0b55527ec2df1050e2e8ff49c85c2"


def test_hashes():
    assert (
        crypto.doubleHashH(b"").hex()
        == "5df6e0e2761359d30a8275058e299fcc0381534545f55cf43e41983f5d4c9456"
    )
    assert crypto.checksum(b"") == bytes.fromhex("5df6e0e2")


def test_newHashFromStr():
    s = "000000000019d6689c085ae165831e934ff763ae46a2a6c172b3f1b60a8ce26f"
    h = crypto.newHashFromStr(s)
    assert len(h) == crypto.HASH_SIZE
    assert h.rhex() == s
    assert h[0] == 0x6F

    short = crypto.newHashFromStr("1")
    assert short[0] == 1
    assert short[1:].iszero()

    with pytest.raises(crypto.DecodeError):
        crypto.newHashFromStr("zz")
    with pytest.raises(crypto.DecodeError):
        crypto.newHashFromStr("00" * 33)
    # Every decode failure is a JunkcoinError.
    with pytest.raises(JunkcoinError):
        crypto.newHashFromStr("0x12")


def test_b58Check():
    addr = "3QJmV3qfvL9SuYo34YihAf3sRCW3qSinyC"
    payload, version = crypto.b58CheckDecode(addr)
    assert payload == ByteArray("f815b036d9bbbce5e9f2a00abd1bf3dc91e95510")
    assert version == ByteArray(0x05)
    assert crypto.b58CheckEncode(0x05, payload) == addr
    assert crypto.b58CheckEncode(ByteArray(0x05), payload.b) == addr

    with pytest.raises(crypto.ChecksumMismatch):
        crypto.b58CheckDecode(addr[:-1] + "D")
    with pytest.raises(crypto.DecodeError):
        crypto.b58CheckDecode("3QJmV3qfvL9SuYo34YihAf3sRCW3qSinyO")
    with pytest.raises(crypto.DecodeError):
        crypto.b58CheckDecode("1111")


def test_errorKinds():
    for err in (crypto.UnknownPrefix, crypto.ChecksumMismatch, crypto.WrongNetwork):
        assert issubclass(err, crypto.DecodeError)
        assert issubclass(err, JunkcoinError)


class TestExtendedKey:
    def test_decode(self, mainnet):
        xprv = crypto.decodeExtendedKey(mainnet, XPRV)
        assert xprv.isPrivate
        assert xprv.depth == 0
        assert xprv.parentFP.iszero()
        assert xprv.childNum == 0
        assert xprv.chainCode == ByteArray(CHAIN_CODE)
        assert xprv.key == ByteArray(PRIV_KEY)
        assert xprv.isForNet(mainnet)
        assert xprv.string() == XPRV
        assert len(xprv.serialize()) == crypto.SERIALIZED_KEY_LENGTH + crypto.CHECKSUM_SIZE

        xpub = crypto.decodeExtendedKey(mainnet, XPUB)
        assert not xpub.isPrivate
        assert xpub.key == ByteArray(PUB_KEY)
        assert xpub.string() == XPUB
        assert xpub != xprv

    def test_fromParts(self, mainnet, testnet):
        k = crypto.ExtendedKey.fromParts(
            mainnet, key=ByteArray(PRIV_KEY), chainCode=ByteArray(CHAIN_CODE), isPrivate=True,
        )
        assert k.string() == XPRV
        assert k == crypto.decodeExtendedKey(mainnet, XPRV)

        k = crypto.ExtendedKey.fromParts(
            testnet, key=ByteArray(PUB_KEY), chainCode=ByteArray(CHAIN_CODE), isPrivate=False,
        )
        assert k.string().startswith("tpub")
        assert k.isForNet(testnet)
        assert not k.isForNet(mainnet)
        assert crypto.decodeExtendedKey(testnet, k.string()) == k

        with pytest.raises(crypto.DecodeError):
            crypto.ExtendedKey.fromParts(
                mainnet, key=ByteArray(PUB_KEY), chainCode=ByteArray(CHAIN_CODE), isPrivate=True,
            )

    def test_decodeErrors(self, mainnet, testnet):
        with pytest.raises(crypto.UnknownPrefix):
            crypto.decodeExtendedKey(testnet, XPRV)
        with pytest.raises(crypto.UnknownPrefix):
            crypto.decodeExtendedKey(testnet, XPUB)

        badSum = XPUB[:-1] + ("9" if XPUB[-1] != "9" else "8")
        with pytest.raises(crypto.ChecksumMismatch):
            crypto.decodeExtendedKey(mainnet, badSum)

        short = b58encode(bytes(40)).decode()
        with pytest.raises(crypto.DecodeError):
            crypto.decodeExtendedKey(mainnet, short)

        with pytest.raises(crypto.DecodeError):
            crypto.decodeExtendedKey(mainnet, "0OIl")

    def test_checksumBitFlips(self, mainnet, testnet):
        tpub = crypto.ExtendedKey.fromParts(
            testnet, key=ByteArray(PUB_KEY), chainCode=ByteArray(CHAIN_CODE), isPrivate=False,
        ).string()
        for netParams, s in ((mainnet, XPRV), (mainnet, XPUB), (testnet, tpub)):
            raw = b58decode(s)
            for i in range(crypto.CHECKSUM_SIZE * 8):
                b = bytearray(raw)
                b[len(b) - crypto.CHECKSUM_SIZE + i // 8] ^= 1 << (i % 8)
                with pytest.raises(crypto.ChecksumMismatch):
                    crypto.decodeExtendedKey(netParams, b58encode(bytes(b)).decode())

    def test_childNum(self, mainnet):
        k = crypto.ExtendedKey.fromParts(
            mainnet,
            key=ByteArray(PRIV_KEY),
            chainCode=ByteArray(CHAIN_CODE),
            isPrivate=True,
            childNum=(1 << 32) - 1,
        )
        assert crypto.decodeExtendedKey(mainnet, k.string()).childNum == (1 << 32) - 1
        for childNum in (1 << 32, -1):
            with pytest.raises(crypto.DecodeError):
                crypto.ExtendedKey.fromParts(
                    mainnet,
                    key=ByteArray(PRIV_KEY),
                    chainCode=ByteArray(CHAIN_CODE),
                    isPrivate=True,
                    childNum=childNum,
                )


def test_coinTypePath(mainnet, testnet):
    H = crypto.HARDENED_KEY_START
    assert crypto.coinTypePath(mainnet) == [44 + H, 2013 + H, H]
    assert crypto.coinTypePath(testnet, account=3) == [44 + H, 11337 + H, 3 + H]
    assert crypto.pathString(crypto.coinTypePath(mainnet)) == "m/44'/2013'/0'"
    assert crypto.pathString([44 + H, 0, 5]) == "m/44'/0/5"
    with pytest.raises(JunkcoinError):
        crypto.coinTypePath(mainnet, account=-1)
