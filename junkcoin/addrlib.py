"""
Copyright (c) 2025, The Junkcoin developers
See LICENSE for details

Address and private key encodings. The version bytes and the bech32 prefix
come from the network parameters.
"""

from typing import Tuple, Union

import bech32

from junkcoin import JunkcoinError
from junkcoin.crypto.crypto import (
    RIPEMD160_SIZE,
    ChecksumMismatch,
    DecodeError,
    UnknownPrefix,
    WrongNetwork,
    b58CheckDecode,
    b58CheckEncode,
)
from junkcoin.util.encode import ByteArray


PrivKeyBytesLen = 32
compressMagic = 0x01

WitnessV0PubKeyHashLen = 20
WitnessV0ScriptHashLen = 32

Bech32ChecksumLen = 6


class AddrKind:
    """
    The kinds of address a string can decode to.
    """

    PubKeyHash = "pubkeyhash"
    ScriptHash = "scripthash"
    WitnessPubKeyHash = "witness_v0_keyhash"
    WitnessScriptHash = "witness_v0_scripthash"


class Address:
    """
    A parent class for all addresses. This class specifies an API that all
    child classes should implement.
    """

    kind = None

    def __init__(self, netParams):
        """
        Args:
            netParams (Params): The network parameters.
        """
        self.netName = netParams.Name

    def __eq__(self, a: Union[str, "Address"]) -> bool:
        """Check that other address is equivalent to this address."""
        if isinstance(a, str):
            return a == self.string()
        if isinstance(a, Address):
            return a.kind == self.kind and a.string() == self.string()
        return False

    def __repr__(self):
        return f"{type(self).__name__}({self.string()})"

    def string(self) -> str:
        """
        The encoded address.

        Returns:
            str: The encoded address.
        """
        raise NotImplementedError("string must be implemented by child class")

    def scriptAddress(self) -> ByteArray:
        """
        The raw bytes of the address to be used when inserting the address into
        a txout's script.

        Returns:
            ByteArray: The script address.
        """
        raise NotImplementedError("scriptAddress must be implemented by child class")

    def isForNet(self, netParams) -> bool:
        """
        isForNet returns whether or not the address is associated with the
        passed network.

        Returns:
            bool: True if address is for the supplied network.
        """
        raise NotImplementedError("isForNet must be implemented by child class")


class AddressPubKeyHash(Address):
    """
    Address based on a pubkey hash.
    """

    kind = AddrKind.PubKeyHash

    def __init__(self, pkHash: ByteArray, netParams):
        """
        Args:
            pkHash (ByteArray): The hashed pubkey.
            netParams (Params): The network parameters.
        """
        super().__init__(netParams)
        pkHash = ByteArray(pkHash)
        if len(pkHash) != RIPEMD160_SIZE:
            raise JunkcoinError(
                f"AddressPubKeyHash expected {RIPEMD160_SIZE} bytes, got {len(pkHash)}"
            )
        self.netID = netParams.PubKeyHashAddrID
        self.pkHash = pkHash

    def string(self) -> str:
        """
        A base-58 encoding of the pubkey hash.

        Returns:
            str: The encoded address.
        """
        return b58CheckEncode(self.netID, self.pkHash)

    def scriptAddress(self) -> ByteArray:
        return self.pkHash.copy()

    def isForNet(self, netParams) -> bool:
        return self.netID == netParams.PubKeyHashAddrID

    def hash160(self) -> ByteArray:
        """
        For AddressPubKeyHash, hash160 is the same as scriptAddress.

        Returns:
            ByteArray: The hash.
        """
        return self.pkHash.copy()


class AddressScriptHash(Address):
    """
    AddressScriptHash is an Address for a pay-to-script-hash (P2SH) transaction.
    """

    kind = AddrKind.ScriptHash

    def __init__(self, scriptHash: ByteArray, netParams):
        super().__init__(netParams)
        scriptHash = ByteArray(scriptHash)
        if len(scriptHash) != RIPEMD160_SIZE:
            raise JunkcoinError(f"incorrect script hash length {len(scriptHash)}")
        self.netID = netParams.ScriptHashAddrID
        self.scriptHash = scriptHash

    def string(self) -> str:
        return b58CheckEncode(self.netID, self.scriptHash)

    def scriptAddress(self) -> ByteArray:
        return self.scriptHash.copy()

    def isForNet(self, netParams) -> bool:
        return self.netID == netParams.ScriptHashAddrID

    def hash160(self) -> ByteArray:
        return self.scriptHash.copy()


class AddressWitness(Address):
    """
    A version 0 segregated witness address.
    """

    programLen = None

    def __init__(self, witnessProg: ByteArray, netParams):
        """
        Args:
            witnessProg (ByteArray): The witness program.
            netParams (Params): The network parameters.
        """
        super().__init__(netParams)
        witnessProg = ByteArray(witnessProg)
        if len(witnessProg) != self.programLen:
            raise JunkcoinError(
                f"{type(self).__name__} witness program must be {self.programLen} "
                f"bytes, got {len(witnessProg)}"
            )
        self.hrp = netParams.Bech32HRPSegwit
        self.witnessVersion = 0
        self.witnessProgram = witnessProg

    def __eq__(self, a: Union[str, Address]) -> bool:
        if isinstance(a, str):
            return a.lower() == self.string()
        return super().__eq__(a)

    def string(self) -> str:
        """
        A bech32 encoding of the witness program.

        Returns:
            str: The encoded address.
        """
        return encodeSegWitAddress(self.hrp, self.witnessVersion, self.witnessProgram)

    def scriptAddress(self) -> ByteArray:
        return self.witnessProgram.copy()

    def isForNet(self, netParams) -> bool:
        return self.hrp == netParams.Bech32HRPSegwit


class AddressWitnessPubKeyHash(AddressWitness):
    """
    Address based on a witness pubkey hash.
    """

    kind = AddrKind.WitnessPubKeyHash
    programLen = WitnessV0PubKeyHashLen

    def hash160(self) -> ByteArray:
        return self.witnessProgram.copy()


class AddressWitnessScriptHash(AddressWitness):
    """
    Address based on a witness script hash.
    """

    kind = AddrKind.WitnessScriptHash
    programLen = WitnessV0ScriptHashLen


class WIF:
    """
    WIF is a private key in wallet import format. The key is carried as raw
    bytes.
    """

    def __init__(self, privKey: ByteArray, compressPubKey: bool, netID):
        """
        Args:
            privKey (byte-like): The 32-byte private key.
            compressPubKey (bool): Whether the key pairs with a compressed
                public key.
            netID (int or Params): The private key version byte, or the
                network parameters to take it from.
        """
        if hasattr(netID, "PrivateKeyID"):
            netID = netID.PrivateKeyID
        privKey = ByteArray(privKey, length=PrivKeyBytesLen)
        if privKey.iszero():
            raise JunkcoinError("private key cannot be zero")
        self.privKey = privKey
        self.compressPubKey = compressPubKey
        self.netID = netID

    def __eq__(self, w):
        return (
            isinstance(w, WIF)
            and self.privKey == w.privKey
            and self.compressPubKey == w.compressPubKey
            and self.netID == w.netID
        )

    @staticmethod
    def decode(netParams, wif: str) -> "WIF":
        """
        Decode the WIF string for the network.

        Args:
            netParams (Params): The network parameters.
            wif (str): The encoded private key.

        Returns:
            WIF: The decoded key.
        """
        payload, version = b58CheckDecode(wif)
        compress = False

        # Payload must be 32 bytes + an optional 1 byte (0x01) if compressed.
        if len(payload) == PrivKeyBytesLen + 1:
            if payload[PrivKeyBytesLen] != compressMagic:
                raise DecodeError("malformed 33-byte private key payload")
            compress = True
        elif len(payload) != PrivKeyBytesLen:
            raise DecodeError("malformed private key")

        netID = version[0]
        if netID != netParams.PrivateKeyID:
            raise UnknownPrefix(
                f"private key version {netID:#04x} is not {netParams.Name}'s "
                f"{netParams.PrivateKeyID:#04x}"
            )
        privKeyBytes = payload[:PrivKeyBytesLen]
        if privKeyBytes.iszero():
            raise DecodeError("private key cannot be zero")
        return WIF(privKey=privKeyBytes, compressPubKey=compress, netID=netID)

    def isForNet(self, netParams) -> bool:
        return self.netID == netParams.PrivateKeyID

    def string(self) -> str:
        a = self.privKey.copy()
        if self.compressPubKey:
            a += ByteArray(compressMagic)
        return b58CheckEncode(self.netID, a)


def encodePubKeyHash(netParams, pkHash) -> str:
    """
    Encode a pay-to-pubkey-hash address.

    Args:
        netParams (Params): The network parameters.
        pkHash (byte-like): The 20-byte pubkey hash.

    Returns:
        str: The base-58 address.
    """
    return AddressPubKeyHash(pkHash, netParams).string()


def encodeScriptHash(netParams, scriptHash) -> str:
    """
    Encode a pay-to-script-hash address.

    Args:
        netParams (Params): The network parameters.
        scriptHash (byte-like): The 20-byte script hash.

    Returns:
        str: The base-58 address.
    """
    return AddressScriptHash(scriptHash, netParams).string()


def encodeSegWit(netParams, witnessProg) -> str:
    """
    Encode a version 0 witness program. 20-byte programs are pubkey hashes and
    32-byte programs are script hashes.

    Args:
        netParams (Params): The network parameters.
        witnessProg (byte-like): The witness program.

    Returns:
        str: The bech32 address.
    """
    witnessProg = ByteArray(witnessProg)
    if len(witnessProg) == WitnessV0PubKeyHashLen:
        return AddressWitnessPubKeyHash(witnessProg, netParams).string()
    if len(witnessProg) == WitnessV0ScriptHashLen:
        return AddressWitnessScriptHash(witnessProg, netParams).string()
    raise JunkcoinError(f"unsupported witness program length {len(witnessProg)}")


def decode(netParams, addr: str) -> Tuple[str, ByteArray]:
    """
    Classify the address and extract its payload.

    Args:
        netParams (Params): The network parameters.
        addr (str): The address.

    Returns:
        str: The AddrKind.
        ByteArray: The hash or witness program.
    """
    a = decodeAddress(addr, netParams)
    return a.kind, a.scriptAddress()


def decodeAddress(addr: str, netParams) -> Address:
    """
    decodeAddress decodes the string encoded address and returns the Address
    if it is a valid encoding for a known address type and is for the provided
    network.

    Args:
        addr (str): Base-58 or bech32 encoded address.
        netParams (Params): The network parameters.

    Returns:
        Address: The decoded address.
    """
    if _looksLikeBech32(addr, netParams):
        witnessVer, witnessProg = decodeSegWitAddress(netParams.Bech32HRPSegwit, addr)

        # We currently only support P2WPKH and P2WSH, which is
        # witness version 0.
        if witnessVer != 0:
            raise DecodeError(f"unsupported witness version {witnessVer}")

        witnessLen = len(witnessProg)
        if witnessLen == WitnessV0PubKeyHashLen:
            return AddressWitnessPubKeyHash(witnessProg, netParams)
        elif witnessLen == WitnessV0ScriptHashLen:
            return AddressWitnessScriptHash(witnessProg, netParams)
        raise DecodeError(f"unsupported witness program length {witnessLen}")

    hash160, version = b58CheckDecode(addr)
    if len(hash160) != RIPEMD160_SIZE:
        raise DecodeError(f"decoded address is of unknown size {len(hash160)}")

    netID = version[0]
    if netID == netParams.PubKeyHashAddrID:
        return AddressPubKeyHash(hash160, netParams)
    elif netID == netParams.ScriptHashAddrID:
        return AddressScriptHash(hash160, netParams)
    raise UnknownPrefix(f"unknown address version {netID:#04x} for {netParams.Name}")


def _looksLikeBech32(addr, netParams):
    """
    Whether the address should be handled as bech32. Strings with a valid
    bech32 checksum always are, and so are strings carrying the network's own
    prefix so that a typo there surfaces as a checksum error.
    """
    res = bech32.bech32_decode(addr)
    hrp = res[0]
    if hrp is not None:
        if hrp != netParams.Bech32HRPSegwit:
            raise WrongNetwork(
                f"bech32 prefix {hrp!r} does not match {netParams.Name}'s "
                f"{netParams.Bech32HRPSegwit!r}"
            )
        return True
    return addr.lower().startswith(netParams.Bech32HRPSegwit + "1")


def encodeSegWitAddress(hrp: str, witnessVersion: int, witnessProgram: ByteArray) -> str:
    """
    encodeSegWitAddress creates a bech32 encoded address string representation
    from witness version and witness program.
    """
    bech = bech32.encode(hrp, witnessVersion, witnessProgram.bytes())
    if not bech:
        raise JunkcoinError("bech32.encode error")
    return bech


def decodeSegWitAddress(hrp: str, addr: str) -> Tuple[int, ByteArray]:
    """
    decodeSegWitAddress parses a bech32 encoded segwit address string and
    returns the witness version and witness program byte representation.
    """
    lowered = addr.lower()
    sep = lowered.rfind("1")
    data = lowered[sep + 1 :]
    if addr != lowered and addr != addr.upper():
        raise DecodeError("mixed case bech32 string")
    if any(c not in bech32.CHARSET for c in data):
        raise DecodeError("invalid bech32 character")
    if len(data) < Bech32ChecksumLen or len(addr) > 90:
        raise DecodeError(f"invalid bech32 string length {len(addr)}")
    if bech32.bech32_decode(addr)[0] is None:
        raise ChecksumMismatch("invalid bech32 checksum")

    ver, dataI = bech32.decode(hrp, addr)
    if dataI is None:
        raise DecodeError("invalid witness program")
    return ver, ByteArray(dataI)
