"""
Copyright (c) 2025, The Junkcoin developers
See LICENSE for details

testnet holds the Junkcoin test network parameters.
"""

Name = "junkcoin-testnet"
Net = 0x6A756E6C  # "junl"
DefaultPort = "19771"
DNSSeeds = [
    ("testnet.junk-coin.com", True),
    ("junk-testnet.s3na.xyz", True),
]

# Genesis block
# TODO: the timestamp and nonce are placeholders carried from Bitcoin's
# testnet3. Checkpoint 0 was published as
# a2effa738145e377e08a61d76179c21703e13e48910b30a2a87f0dfe794b64c6, the main
# network's deployed genesis hash. Replace GenesisHash and checkpoint 0 together
# once the test network's real genesis values are known.
GenesisVersion = 1
GenesisTimestamp = 1296688602  # 2011-02-02 23:16:42 +0000 UTC
GenesisBits = 0x1D00FFFF
GenesisNonce = 414098458
GenesisMerkleRoot = "4a5e1e4baab89f3a32518a88c31bc87f618f76673e2cc77ab2127b7afdeda33b"
GenesisHash = "000000000933ea01ad0ee984209779baaec3ced90fa3f408719526f8d77f4943"

# Chain parameters
PowLimit = 2 ** 236 - 1
PowLimitBits = 0x1E0FFFF0
BIP0034Height = 0
BIP0065Height = 0
BIP0066Height = 0
CoinbaseMaturity = 30
SubsidyReductionInterval = 518400
TargetTimespan = 60 * 60 * 4  # 4 hours
TargetTimePerBlock = 60  # 1 minute
RetargetAdjustmentFactor = 4  # 25% less, 400% more
ReduceMinDifficulty = True
MinDiffReductionTime = 60 * 2  # TargetTimePerBlock * 2
GenerateSupported = True

# Checkpoints ordered from oldest to newest.
Checkpoints = [
    (0, GenesisHash),
]

# Consensus rule change deployments.
# TODO: the window comment below does not match its value. Four hours of
# one minute blocks is 240, while the window holds 2016. Confirm the intended
# window with the testnet operators.
RuleChangeActivationThreshold = 1512  # 75% of MinerConfirmationWindow
MinerConfirmationWindow = 2016  # 4 hours worth of blocks (240 * 8.4)

# Mempool parameters
RelayNonStdTxs = True

# Human-readable part for Bech32 encoded testnet segwit addresses, as defined
# in BIP 173.
Bech32HRPSegwit = "tj"

# Address encoding magics
PubKeyHashAddrID = 0x6F  # starts with m or n
ScriptHashAddrID = 0xC4  # starts with 2
PrivateKeyID = 0xEF  # starts with 9 (uncompressed) or c (compressed)
WitnessPubKeyHashAddrID = 0x03
WitnessScriptHashAddrID = 0x28

# BIP32 hierarchical deterministic extended key magics
HDPrivateKeyID = (0x04358394).to_bytes(4, byteorder="big")  # starts with tprv
HDPublicKeyID = (0x043587CF).to_bytes(4, byteorder="big")  # starts with tpub

# BIP44 coin type used in the hierarchical deterministic path for
# address generation.
HDCoinType = 11337
