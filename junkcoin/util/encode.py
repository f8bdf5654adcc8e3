"""
Copyright (c) 2025, The Junkcoin developers
See LICENSE for details

A bytearray wrapper with the conversions needed for consensus serialization.
"""

from junkcoin import JunkcoinError


def intToBytes(i):
    """
    Minimal big-endian encoding of a non-negative integer.

    Args:
        i (int): The integer.

    Returns:
        bytearray: The encoded integer.
    """
    return bytearray(i.to_bytes((i.bit_length() + 7) // 8, byteorder="big"))


def intFromBytes(b):
    """
    Decodes a big-endian unsigned integer.

    Args:
        b (bytes-like): The encoded integer.

    Returns:
        int: The decoded integer.
    """
    return int.from_bytes(b, "big")


def decodeBA(b, copy=False):
    """
    Decode into a bytearray.

    Args:
        b (str, bytes-like, ByteArray, int, list(int)): The value to decode.
            Strings are interpreted as hexadecimal. Integers are minimally
            encoded as unsigned big-endian.

    Returns:
        bytearray: The decoded bytes.
    """
    if isinstance(b, ByteArray):
        return bytearray(b.b) if copy else b.b
    if isinstance(b, bytearray):
        return bytearray(b) if copy else b
    if isinstance(b, bytes):
        return bytearray(b)
    if isinstance(b, int):
        return intToBytes(b) if b else bytearray([0])
    if isinstance(b, str):
        return bytearray.fromhex(b)
    if hasattr(b, "__iter__"):
        return bytearray(b)
    raise TypeError("decodeBA: unknown type %s" % type(b))


class ByteArray:
    """
    ByteArray manages a bytearray and accepts hex strings, ints and other
    byte-likes wherever bytes are expected. An integer argument produces the
    shortest big-endian representation of the integer. Use the `length`
    keyword for a zero-padded value of a fixed size.
    """

    def __init__(self, b=b"", copy=True, length=None):
        if length:
            v = decodeBA(b)
            if len(v) > length:
                raise JunkcoinError("value %s too long for %i bytes" % (v.hex(), length))
            self.b = bytearray(length - len(v)) + v
        else:
            self.b = decodeBA(b, copy=copy)

    def __lt__(self, a):
        return bytearray.__lt__(self.b, decodeBA(a))

    def __le__(self, a):
        return bytearray.__le__(self.b, decodeBA(a))

    def __eq__(self, a):
        try:
            return bytearray.__eq__(self.b, decodeBA(a))
        except Exception:
            return False

    def __ne__(self, a):
        return not self.__eq__(a)

    def __ge__(self, a):
        return bytearray.__ge__(self.b, decodeBA(a))

    def __gt__(self, a):
        return bytearray.__gt__(self.b, decodeBA(a))

    def __repr__(self):
        return "ByteArray(" + self.hex() + ")"

    def __len__(self):
        return len(self.b)

    def __add__(self, a):
        return ByteArray(self.b + decodeBA(a))

    def __iadd__(self, a):
        """Append the bytes and return a new ByteArray."""
        return self.__add__(a)

    def __getitem__(self, k):
        if isinstance(k, slice):
            return ByteArray(self.b[k.start : k.stop : k.step], copy=False)
        return self.b[k]

    def __reversed__(self):
        return ByteArray(bytearray(reversed(self.b)))

    def __hash__(self):
        """Enables ByteArray to be a dict key."""
        return hash(bytes(self.b))

    def hex(self):
        """
        A hexadecimal string representation of the bytes.

        Returns:
            str: The hex bytes.
        """
        return self.b.hex()

    def rhex(self):
        """
        The hexadecimal string of the reversed bytes. Hashes are displayed
        this way.

        Returns:
            str: The reversed hex bytes.
        """
        return self.__reversed__().hex()

    def iszero(self):
        """
        True if all bytes are zero.
        """
        return all((v == 0 for v in self.b))

    def int(self):
        """The bytes as a big-endian integer."""
        return intFromBytes(self.b)

    def bytes(self):
        """The bytes as Python `bytes`."""
        return bytes(self.b)

    def littleEndian(self):
        """A copy of the ByteArray, reversed."""
        return ByteArray(reversed(self.b))

    def unLittle(self):
        """A copy of the ByteArray, reversed."""
        return self.littleEndian()

    def copy(self):
        """A copy of the ByteArray."""
        return ByteArray(self.b)

    def pop(self, n):
        """
        Remove n bytes from the beginning of the ByteArray, returning the bytes.
        An error is raised if fewer than n bytes remain.
        """
        if n > len(self.b):
            raise JunkcoinError("pop: need %i bytes, have %i" % (n, len(self.b)))
        b = self[:n]
        self.b = self.b[n:]
        return b


def rba(*a, **k):
    """
    Reversed ByteArray. All args and kwargs are passed to the ByteArray
    constructor.
    """
    return reversed(ByteArray(*a, **k))
