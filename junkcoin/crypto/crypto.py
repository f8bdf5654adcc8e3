"""
Copyright (c) 2025, The Junkcoin developers
See LICENSE for details

Hashing, base-58 check encoding and extended key serialization.
"""

import hashlib

from base58 import b58decode, b58encode

from junkcoin import JunkcoinError
from junkcoin.util.encode import ByteArray


# chainhash.HashSize
HASH_SIZE = 32
MAX_HASH_STRING_SIZE = HASH_SIZE * 2
RIPEMD160_SIZE = 20
CHECKSUM_SIZE = 4
HD_VERSION_SIZE = 4
CHAIN_CODE_SIZE = 32
SERIALIZED_KEY_LENGTH = 4 + 1 + 4 + 4 + 32 + 33  # 78 bytes
HARDENED_KEY_START = 2 ** 31
MAX_COIN_TYPE = HARDENED_KEY_START - 1
MAX_ACCOUNT_NUM = HARDENED_KEY_START - 2
BIP44_PURPOSE = 44


class DecodeError(JunkcoinError):
    """
    The input could not be decoded. The subclasses narrow down why, so that
    callers can report the exact problem.
    """

    pass


class UnknownPrefix(DecodeError):
    """
    The version prefix of an encoded address or key does not match any prefix
    configured for the network.
    """

    pass


class ChecksumMismatch(DecodeError):
    """
    The checksum embedded in an encoded address or key does not match the
    checksum computed from its payload.
    """

    pass


class WrongNetwork(DecodeError):
    """
    The encoding is well-formed but belongs to a different network.
    """

    pass


def doubleHashH(b):
    """
    Double-SHA256 hash.

    Args:
        b (byte-like): The bytes to hash.

    Returns:
        ByteArray: The 32-byte hash in internal byte order.
    """
    v = hashlib.sha256(b).digest()
    return ByteArray(hashlib.sha256(v).digest())


def checksum(b):
    """
    The base-58 check checksum.

    Args:
        b (byte-like): Bytes to obtain a checksum for.

    Returns:
        bytes: The first 4 bytes of a double sha256 hash of input.
    """
    return doubleHashH(b).bytes()[:CHECKSUM_SIZE]


def newHashFromStr(s):
    """
    Parse a hash from its big-endian hex display string. Strings shorter than
    64 characters are zero-padded on the left.

    Args:
        s (str): The hex hash.

    Returns:
        ByteArray: The 32-byte hash in internal (little-endian) byte order.
    """
    if len(s) > MAX_HASH_STRING_SIZE:
        raise DecodeError(
            f"max hash string length is {MAX_HASH_STRING_SIZE} bytes, got {len(s)}"
        )
    if len(s) % 2:
        s = "0" + s
    try:
        b = bytes.fromhex(s)
    except ValueError as e:
        raise DecodeError(f"invalid hash string {s!r}: {e}")
    return reversed(ByteArray(b, length=HASH_SIZE))


def b58CheckEncode(version, payload):
    """
    Base-58 encode the payload with the version bytes prepended and the
    checksum appended.

    Args:
        version (byte-like or int): The version prefix. An int is a single
            version byte.
        payload (byte-like): The data.

    Returns:
        str: The base-58 encoding.
    """
    b = ByteArray(version, length=1) if isinstance(version, int) else ByteArray(version)
    b += payload
    b += checksum(b.b)
    return b58encode(b.bytes()).decode()


def b58CheckDecode(s, versionLen=1):
    """
    Decode the base-58 check string, splitting off the version prefix. An
    exception is raised if the checksum is invalid or missing.

    Args:
        s (str): The base-58 encoded string.
        versionLen (int): The length of the version prefix.

    Returns:
        ByteArray: Decoded bytes minus the leading version and trailing
            checksum.
        ByteArray: The version bytes.
    """
    try:
        decoded = b58decode(s)
    except ValueError as e:
        raise DecodeError(f"invalid base-58 string: {e}")
    if len(decoded) < versionLen + CHECKSUM_SIZE:
        raise DecodeError("decoded lacking version/checksum")
    included_cksum = decoded[len(decoded) - CHECKSUM_SIZE :]
    computed_cksum = checksum(decoded[: len(decoded) - CHECKSUM_SIZE])
    if included_cksum != computed_cksum:
        raise ChecksumMismatch("checksum error")
    version = ByteArray(decoded[:versionLen])
    payload = ByteArray(decoded[versionLen : len(decoded) - CHECKSUM_SIZE])
    return payload, version


class ExtendedKey:
    """
    ExtendedKey houses the serializable parts of a BIP0032 hierarchical
    deterministic extended key. Derivation is left to the wallet.
    """

    def __init__(
        self, version, key, chainCode, parentFP, depth, childNum, isPrivate,
    ):
        """
        Args:
            version (byte-like): The 4-byte network version for the key kind.
            key (byte-like): The 32-byte private key or 33-byte compressed
                public key.
            chainCode (byte-like): Chain code for key derivation.
            parentFP (byte-like): 4-byte parent key fingerprint.
            depth (int): Key depth.
            childNum (int): Child number.
            isPrivate (bool): Whether the key is a private or public key.
        """
        self.version = ByteArray(version)
        if len(self.version) != HD_VERSION_SIZE:
            raise DecodeError(
                f"network version bytes of incorrect length {len(self.version)}"
            )
        self.key = ByteArray(key)
        expKeyLen = 32 if isPrivate else 33
        if len(self.key) != expKeyLen:
            raise DecodeError(f"expected {expKeyLen}-byte key, got {len(self.key)}")
        self.chainCode = ByteArray(chainCode)
        if len(self.chainCode) != CHAIN_CODE_SIZE:
            raise DecodeError(f"chain code must be 32 bytes, got {len(self.chainCode)}")
        self.parentFP = ByteArray(parentFP, length=4)
        if not 0 <= depth <= 255:
            raise DecodeError(f"depth out of range: {depth}")
        self.depth = depth
        if not 0 <= childNum < 1 << 32:
            raise DecodeError(f"child number out of range: {childNum}")
        self.childNum = childNum
        self.isPrivate = isPrivate

    def __eq__(self, k):
        if not isinstance(k, ExtendedKey):
            return False
        return self.serialize() == k.serialize()

    @staticmethod
    def fromParts(netParams, key, chainCode, isPrivate, parentFP=0, depth=0, childNum=0):
        """
        Create an ExtendedKey using the network's version prefix for the key
        kind.

        Args:
            netParams (Params): The network parameters.
            key (byte-like): The key.
            chainCode (byte-like): The chain code.
            isPrivate (bool): Whether the key is private.
            parentFP (byte-like or int): optional. Parent fingerprint.
            depth (int): optional. Key depth.
            childNum (int): optional. Child number.

        Returns:
            ExtendedKey: The key.
        """
        version = netParams.HDPrivateKeyID if isPrivate else netParams.HDPublicKeyID
        return ExtendedKey(
            version=version,
            key=key,
            chainCode=chainCode,
            parentFP=parentFP,
            depth=depth,
            childNum=childNum,
            isPrivate=isPrivate,
        )

    def isForNet(self, netParams):
        """
        Whether the key's version belongs to the network.

        Args:
            netParams (Params): The network parameters.

        Returns:
            bool: True if the version matches the network's prefix.
        """
        want = netParams.HDPrivateKeyID if self.isPrivate else netParams.HDPublicKeyID
        return self.version == want

    def serialize(self):
        """
        Return the extended key in serialized form.

        Returns:
            ByteArray: The serialized extended key, including checksum.
        """
        # The serialized format is:
        #   version (4) || depth (1) || parent fingerprint (4)) ||
        #   child num (4) || chain code (32) || key data (33) || checksum (4)
        b = self.version.copy()
        b += ByteArray(self.depth, length=1)
        b += self.parentFP
        b += ByteArray(self.childNum, length=4)
        b += self.chainCode
        if self.isPrivate:
            b += bytearray(1)
        b += self.key
        b += checksum(b.b)
        return b

    def string(self):
        """
        string returns the extended key as a base58-encoded string. See
        `decodeExtendedKey` for decoding.

        Returns:
            str: The encoded extended key.
        """
        return b58encode(self.serialize().bytes()).decode()


def decodeExtendedKey(netParams, s):
    """
    Decode a base-58 ExtendedKey for the network.

    Args:
        netParams (Params): The network parameters.
        s (str): Base-58 encoded extended key.

    Returns:
        ExtendedKey: The decoded key.
    """
    try:
        decoded = ByteArray(b58decode(s))
    except ValueError as e:
        raise DecodeError(f"invalid base-58 string: {e}")
    decoded_len = len(decoded)
    if decoded_len != SERIALIZED_KEY_LENGTH + CHECKSUM_SIZE:
        raise DecodeError(f"decoded extended key is wrong length: {decoded_len}")

    # Split the payload and checksum up and ensure the checksum matches.
    payload = decoded[: decoded_len - CHECKSUM_SIZE]
    included_cksum = decoded[decoded_len - CHECKSUM_SIZE :]
    if included_cksum != checksum(payload.b):
        raise ChecksumMismatch("wrong checksum")

    version = payload[:4]
    if version == netParams.HDPrivateKeyID:
        isPrivate = True
    elif version == netParams.HDPublicKeyID:
        isPrivate = False
    else:
        raise UnknownPrefix(f"unknown extended key version {version.hex()}")

    keyData = payload[45:78]
    # Private key data is prefixed with 0x00. Compressed public keys start
    # with 0x02 or 0x03.
    if isPrivate:
        if keyData[0] != 0x00:
            raise DecodeError("private key data lacks the zero prefix")
        keyData = keyData[1:]
        if keyData.iszero():
            raise DecodeError("unusable key")
    elif keyData[0] not in (0x02, 0x03):
        raise DecodeError(f"invalid public key format {keyData[0]}")

    return ExtendedKey(
        version=version,
        key=keyData,
        chainCode=payload[13:45],
        parentFP=payload[5:9],
        depth=payload[4],
        childNum=payload[9:13].int(),
        isPrivate=isPrivate,
    )


def coinTypePath(netParams, account=0):
    """
    The BIP0044 account path m/44'/<coin type>'/<account>' for the network.

    Args:
        netParams (Params): The network parameters.
        account (int): optional. default 0. The account number.

    Returns:
        list(int): The child indexes, hardened.
    """
    coinType = netParams.HDCoinType
    if coinType > MAX_COIN_TYPE:
        raise JunkcoinError("coinType too high. %i > %i" % (coinType, MAX_COIN_TYPE))
    if not 0 <= account <= MAX_ACCOUNT_NUM:
        raise JunkcoinError(f"account number out of range: {account}")
    return [
        BIP44_PURPOSE + HARDENED_KEY_START,
        coinType + HARDENED_KEY_START,
        account + HARDENED_KEY_START,
    ]


def pathString(path):
    """
    Format a derivation path, marking hardened indexes with an apostrophe.

    Args:
        path (list(int)): Child indexes.

    Returns:
        str: e.g. "m/44'/2013'/0'".
    """
    parts = ["m"]
    for i in path:
        if i >= HARDENED_KEY_START:
            parts.append(f"{i - HARDENED_KEY_START}'")
        else:
            parts.append(str(i))
    return "/".join(parts)
