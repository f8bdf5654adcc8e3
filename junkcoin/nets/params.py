"""
Copyright (c) 2025, The Junkcoin developers
See LICENSE for details

Params is the validated, immutable form of a network parameter table.
"""

import copy

from junkcoin import JunkcoinError
from junkcoin import difficulty, genesis
from junkcoin.crypto import crypto
from junkcoin.util.encode import ByteArray
from junkcoin.wire.msgblock import calcMerkleRoot


MaxUint32 = (1 << 32) - 1

# BIP 173 limits the whole address to 90 characters. The separator and the
# 6 character checksum leave at most 83 for the human-readable part.
MaxHRPLength = 83


class InvalidParameters(JunkcoinError):
    """
    A network parameter table violates an invariant. Such a network must not
    be registered.
    """

    pass


class Checkpoint:
    """
    Checkpoint identifies a known good point in the block chain. The hash is
    held as bytes, and the hash property returns a fresh ByteArray.
    """

    def __init__(self, height, blockHash):
        """
        Args:
            height (int): The block height.
            blockHash (ByteArray): The block hash, in internal byte order.
        """
        object.__setattr__(self, "height", height)
        object.__setattr__(self, "_hash", ByteArray(blockHash).bytes())

    def __setattr__(self, k, v):
        raise JunkcoinError(f"Checkpoint is immutable, cannot set {k}")

    @property
    def hash(self):
        return ByteArray(self._hash)

    def __eq__(self, c):
        return (
            isinstance(c, Checkpoint) and self.height == c.height and self._hash == c._hash
        )

    def __repr__(self):
        return f"Checkpoint({self.height}, {self.hash.rhex()})"


class DNSSeed:
    """
    DNSSeed identifies a DNS seed.
    """

    def __init__(self, host, hasFiltering):
        """
        Args:
            host (str): The host name of the seed.
            hasFiltering (bool): Whether the seed supports filtering by
                service flags.
        """
        object.__setattr__(self, "host", host)
        object.__setattr__(self, "hasFiltering", hasFiltering)

    def __setattr__(self, k, v):
        raise JunkcoinError(f"DNSSeed is immutable, cannot set {k}")

    def __eq__(self, s):
        return isinstance(s, DNSSeed) and self.host == s.host and self.hasFiltering == s.hasFiltering

    def __repr__(self):
        return f"DNSSeed({self.host!r}, {self.hasFiltering})"


def _fail(msg):
    raise InvalidParameters(msg)


def _checkUint(name, v, maxVal=MaxUint32):
    if not isinstance(v, int) or isinstance(v, bool) or v < 0 or v > maxVal:
        _fail(f"{name} must be an integer in [0, {maxVal}], got {v!r}")


def _parseHash(name, s):
    try:
        return crypto.newHashFromStr(s)
    except crypto.DecodeError as e:
        raise InvalidParameters(f"{name}: {e}")


class Params:
    """
    Params defines a network by its consensus parameters. The constructor
    validates the parameters, and a Params cannot be modified once built.

    Attribute names follow the network tables in junkcoin.nets.
    """

    _fields = (
        "Name",
        "Net",
        "DefaultPort",
        "DNSSeeds",
        "GenesisBlock",
        "GenesisHash",
        "PowLimit",
        "PowLimitBits",
        "BIP0034Height",
        "BIP0065Height",
        "BIP0066Height",
        "CoinbaseMaturity",
        "SubsidyReductionInterval",
        "TargetTimespan",
        "TargetTimePerBlock",
        "RetargetAdjustmentFactor",
        "ReduceMinDifficulty",
        "MinDiffReductionTime",
        "GenerateSupported",
        "Checkpoints",
        "RuleChangeActivationThreshold",
        "MinerConfirmationWindow",
        "RelayNonStdTxs",
        "Bech32HRPSegwit",
        "PubKeyHashAddrID",
        "ScriptHashAddrID",
        "PrivateKeyID",
        "WitnessPubKeyHashAddrID",
        "WitnessScriptHashAddrID",
        "HDPrivateKeyID",
        "HDPublicKeyID",
        "HDCoinType",
    )

    def __init__(self, **fields):
        """
        Every name in Params._fields is required. DNSSeeds and Checkpoints can
        be given as sequences of DNSSeed and Checkpoint or as tuples of their
        constructor arguments.
        """
        missing = [k for k in self._fields if k not in fields]
        if missing:
            _fail(f"missing parameters: {', '.join(missing)}")
        unknown = [k for k in fields if k not in self._fields]
        if unknown:
            _fail(f"unknown parameters: {', '.join(unknown)}")

        fields["DNSSeeds"] = tuple(
            s if isinstance(s, DNSSeed) else DNSSeed(*s) for s in fields["DNSSeeds"]
        )
        fields["Checkpoints"] = tuple(
            c if isinstance(c, Checkpoint) else Checkpoint(*c)
            for c in fields["Checkpoints"]
        )
        fields["HDPrivateKeyID"] = ByteArray(fields["HDPrivateKeyID"]).bytes()
        fields["HDPublicKeyID"] = ByteArray(fields["HDPublicKeyID"]).bytes()
        # The genesis block and hash are reached through copying properties.
        object.__setattr__(self, "_genesisBlock", copy.deepcopy(fields.pop("GenesisBlock")))
        try:
            genesisHash = ByteArray(fields.pop("GenesisHash")).bytes()
        except (TypeError, ValueError) as e:
            raise InvalidParameters(f"invalid genesis hash: {e}")
        object.__setattr__(self, "_genesisHash", genesisHash)

        for k, v in fields.items():
            object.__setattr__(self, k, v)
        object.__setattr__(
            self, "_checkpointsByHeight", {c.height: c for c in self.Checkpoints}
        )
        self._validate()

    def __setattr__(self, k, v):
        raise JunkcoinError(f"Params are immutable, cannot set {k}")

    def __delattr__(self, k):
        raise JunkcoinError(f"Params are immutable, cannot delete {k}")

    def __repr__(self):
        return f"Params({self.Name}, net={self.Net:#010x})"

    @staticmethod
    def fromModule(mod):
        """
        Build Params from a network table module such as
        junkcoin.nets.mainnet. The genesis block is built from the module's
        Genesis* values, and the module's GenesisHash and GenesisMerkleRoot
        are checked against it.

        Args:
            mod (module): The network table.

        Returns:
            Params: The validated parameters.
        """
        try:
            block, blockHash = genesis.buildGenesisBlock(
                version=mod.GenesisVersion,
                timestamp=mod.GenesisTimestamp,
                bits=mod.GenesisBits,
                nonce=mod.GenesisNonce,
            )
        except AttributeError as e:
            raise InvalidParameters(f"incomplete genesis parameters: {e}")

        name = getattr(mod, "Name", repr(mod))
        merkleRoot = _parseHash(f"{name} genesis merkle root", mod.GenesisMerkleRoot)
        if block.header.merkleRoot != merkleRoot:
            _fail(
                f"{name}: genesis merkle root {block.header.merkleRoot.rhex()} "
                f"does not match configured {merkleRoot.rhex()}"
            )

        fields = {}
        for k in Params._fields:
            if k == "GenesisBlock":
                fields[k] = block
            elif k == "GenesisHash":
                fields[k] = _parseHash(f"{name} genesis hash", mod.GenesisHash)
            elif k == "Checkpoints":
                fields[k] = [
                    Checkpoint(height, _parseHash(f"{name} checkpoint {height}", h))
                    for height, h in mod.Checkpoints
                ]
            elif hasattr(mod, k):
                fields[k] = getattr(mod, k)
        return Params(**fields)

    @property
    def GenesisBlock(self):
        """A copy of the genesis block."""
        return copy.deepcopy(self._genesisBlock)

    @property
    def GenesisHash(self):
        """A copy of the genesis block hash, in internal byte order."""
        return ByteArray(self._genesisHash)

    @property
    def blocksPerRetarget(self):
        """The number of blocks between difficulty retargets."""
        return self.TargetTimespan // self.TargetTimePerBlock

    @property
    def minRetargetTimespan(self):
        """The smallest timespan a retarget window is credited with."""
        return self.TargetTimespan // self.RetargetAdjustmentFactor

    @property
    def maxRetargetTimespan(self):
        """The largest timespan a retarget window is credited with."""
        return self.TargetTimespan * self.RetargetAdjustmentFactor

    def checkpoint(self, height):
        """
        The checkpoint at the height.

        Args:
            height (int): The block height.

        Returns:
            Checkpoint or None: None if there is no checkpoint at the height.
        """
        return self._checkpointsByHeight.get(height)

    def genesisHashStr(self):
        """The genesis hash as a big-endian hex string."""
        return self.GenesisHash.rhex()

    def _validate(self):
        if not isinstance(self.Name, str) or not self.Name:
            _fail(f"network name must be a non-empty string, got {self.Name!r}")
        name = self.Name
        _checkUint(f"{name} Net", self.Net)
        if not isinstance(self.DefaultPort, str) or not self.DefaultPort.isdigit():
            _fail(f"{name} DefaultPort must be a numeric string, got {self.DefaultPort!r}")
        if not 0 < int(self.DefaultPort) <= 65535:
            _fail(f"{name} DefaultPort out of range: {self.DefaultPort}")

        self._validateGenesis()
        self._validatePow()

        for k in (
            "BIP0034Height",
            "BIP0065Height",
            "BIP0066Height",
            "CoinbaseMaturity",
            "MinDiffReductionTime",
        ):
            _checkUint(f"{name} {k}", getattr(self, k))
        if self.SubsidyReductionInterval <= 0:
            _fail(f"{name} SubsidyReductionInterval must be positive")

        self._validateRetarget()
        self._validateCheckpoints()

        _checkUint(f"{name} MinerConfirmationWindow", self.MinerConfirmationWindow)
        _checkUint(f"{name} RuleChangeActivationThreshold", self.RuleChangeActivationThreshold)
        if self.MinerConfirmationWindow == 0:
            _fail(f"{name} MinerConfirmationWindow must be positive")
        if self.RuleChangeActivationThreshold > self.MinerConfirmationWindow:
            _fail(
                f"{name} RuleChangeActivationThreshold {self.RuleChangeActivationThreshold} "
                f"exceeds MinerConfirmationWindow {self.MinerConfirmationWindow}"
            )

        self._validatePrefixes()

    def _validateGenesis(self):
        name = self.Name
        block = self._genesisBlock
        if len(self._genesisHash) != crypto.HASH_SIZE:
            _fail(f"{name} genesis hash must be {crypto.HASH_SIZE} bytes")
        if not block.header.prevBlock.iszero():
            _fail(f"{name} genesis block must not have a previous block")
        if len(block.transactions) != 1 or not block.transactions[0].isCoinBase():
            _fail(f"{name} genesis block must hold exactly one coinbase transaction")
        merkleRoot = calcMerkleRoot(block.transactions)
        if block.header.merkleRoot != merkleRoot:
            _fail(
                f"{name} genesis merkle root {block.header.merkleRoot.rhex()} "
                f"does not commit to its transactions ({merkleRoot.rhex()})"
            )
        blockHash = block.header.blockHash()
        if blockHash != self.GenesisHash:
            _fail(
                f"{name} genesis hash {self.GenesisHash.rhex()} does not match "
                f"the genesis block hash {blockHash.rhex()}"
            )

    def _validatePow(self):
        name = self.Name
        if not isinstance(self.PowLimit, int) or self.PowLimit <= 0:
            _fail(f"{name} PowLimit must be a positive integer")
        _checkUint(f"{name} PowLimitBits", self.PowLimitBits)
        limitFromBits = difficulty.compactToBig(self.PowLimitBits)
        if limitFromBits <= 0:
            _fail(f"{name} PowLimitBits {self.PowLimitBits:#010x} decodes to a non-positive target")
        if limitFromBits > self.PowLimit:
            _fail(
                f"{name} PowLimitBits {self.PowLimitBits:#010x} decodes to "
                f"{limitFromBits:064x}, above PowLimit {self.PowLimit:064x}"
            )

    def _validateRetarget(self):
        name = self.Name
        for k in ("TargetTimespan", "TargetTimePerBlock", "RetargetAdjustmentFactor"):
            v = getattr(self, k)
            if not isinstance(v, int) or v <= 0:
                _fail(f"{name} {k} must be a positive integer, got {v!r}")
        if self.TargetTimespan % self.TargetTimePerBlock:
            _fail(
                f"{name} TargetTimespan {self.TargetTimespan} is not a multiple "
                f"of TargetTimePerBlock {self.TargetTimePerBlock}"
            )
        if self.ReduceMinDifficulty and self.MinDiffReductionTime <= 0:
            _fail(f"{name} ReduceMinDifficulty requires a positive MinDiffReductionTime")

    def _validateCheckpoints(self):
        name = self.Name
        lastHeight = -1
        for c in self.Checkpoints:
            if not isinstance(c.height, int) or c.height < 0:
                _fail(f"{name} checkpoint height must be a non-negative integer, got {c.height!r}")
            if c.height == lastHeight:
                _fail(f"{name} duplicate checkpoint at height {c.height}")
            if c.height < lastHeight:
                _fail(
                    f"{name} checkpoints out of order: {c.height} follows {lastHeight}"
                )
            if len(c.hash) != crypto.HASH_SIZE:
                _fail(f"{name} checkpoint {c.height} hash must be {crypto.HASH_SIZE} bytes")
            if c.height == 0 and c._hash != self._genesisHash:
                _fail(
                    f"{name} checkpoint 0 {c.hash.rhex()} is not the genesis hash "
                    f"{self.genesisHashStr()}"
                )
            lastHeight = c.height

    def _validatePrefixes(self):
        name = self.Name
        hrp = self.Bech32HRPSegwit
        if (
            not isinstance(hrp, str)
            or not 0 < len(hrp) <= MaxHRPLength
            or any(ord(c) < 33 or ord(c) > 126 for c in hrp)
            or hrp != hrp.lower()
        ):
            _fail(f"{name} invalid bech32 human-readable part {hrp!r}")

        for k in (
            "PubKeyHashAddrID",
            "ScriptHashAddrID",
            "PrivateKeyID",
            "WitnessPubKeyHashAddrID",
            "WitnessScriptHashAddrID",
        ):
            _checkUint(f"{name} {k}", getattr(self, k), 0xFF)
        if self.PubKeyHashAddrID == self.ScriptHashAddrID:
            _fail(
                f"{name} PubKeyHashAddrID and ScriptHashAddrID are both "
                f"{self.PubKeyHashAddrID:#04x}"
            )

        for k in ("HDPrivateKeyID", "HDPublicKeyID"):
            if len(getattr(self, k)) != crypto.HD_VERSION_SIZE:
                _fail(f"{name} {k} must be {crypto.HD_VERSION_SIZE} bytes")
        if self.HDPrivateKeyID == self.HDPublicKeyID:
            _fail(f"{name} HDPrivateKeyID and HDPublicKeyID must differ")

        _checkUint(f"{name} HDCoinType", self.HDCoinType, crypto.MAX_COIN_TYPE)
