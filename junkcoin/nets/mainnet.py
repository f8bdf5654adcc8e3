"""
Copyright (c) 2025, The Junkcoin developers
See LICENSE for details

mainnet holds the Junkcoin main network parameters.
"""

Name = "junkcoin-mainnet"
Net = 0x6A756E6B  # "junk"
DefaultPort = "9771"
DNSSeeds = [
    ("mainnet.junk-coin.com", True),
    ("junk-seed.s3na.xyz", True),
    ("jkc-seed.junkiewally.xyz", True),
]

# Genesis block
# TODO: the timestamp and nonce are placeholders carried from Bitcoin. The
# deployed chain's genesis block hashes to
# a2effa738145e377e08a61d76179c21703e13e48910b30a2a87f0dfe794b64c6, and
# GenesisHash and checkpoint 0 move to it once the real values are known.
GenesisVersion = 1
GenesisTimestamp = 1231006505  # 2009-01-03 18:15:05 +0000 UTC
GenesisBits = 0x1D00FFFF
GenesisNonce = 2083236893
GenesisMerkleRoot = "4a5e1e4baab89f3a32518a88c31bc87f618f76673e2cc77ab2127b7afdeda33b"
GenesisHash = "000000000019d6689c085ae165831e934ff763ae46a2a6c172b3f1b60a8ce26f"

# Chain parameters
PowLimit = 2 ** 236 - 1
PowLimitBits = 0x1E0FFFF0
BIP0034Height = 0
BIP0065Height = 0
BIP0066Height = 0
CoinbaseMaturity = 70
SubsidyReductionInterval = 518400
TargetTimespan = 60 * 60 * 24  # 1 day
TargetTimePerBlock = 60  # 1 minute
RetargetAdjustmentFactor = 4  # 25% less, 400% more
ReduceMinDifficulty = False
MinDiffReductionTime = 0
GenerateSupported = False

# Checkpoints ordered from oldest to newest.
Checkpoints = [
    (0, GenesisHash),
    (1, "ca55073a54775a1ef78294f53f38a3e02d0654d7417f3cbbe4d28d17d50e07d0"),
    (53, "b623a39a5a0534990a59916d5803fa2bd6a6d52d8e594546936a42a2cc9b0441"),
    (117, "6cab49bd69fcce2bb48793cc064bb49e75f068e7029b5173db83654fbcb5953d"),
    (200, "45257b0f2ee6d5c55ac16a76817d7151b776d6452ae6f21426eaa42345b831f8"),
    (6452, "506562c2172d9f10e86d2b467ed3bb7b9eba40148d18d1e660c1ff692604f3fc"),
    (10978, "1c9f7f7a4702f8225df430b259ac58c387de99439be8a8789841a1c011ead7fc"),
    (17954, "6036051659e92a17cb7488040e05a94483b7a7f88b184156c136d51ff0390a7d"),
    (23978, "7924154aa896363ec9be3ca5f939602f72cf4a5396e6e1cd9139335dd1819487"),
    (33212, "448040ac454da8654d9c58ad79386aa1a88fd113be0fcc5ca39ecd3eae8c8618"),
    (45527, "f2420d964001d4d2c8bc0d9283f3f684d4d91a509a50985888458a68e08e1c82"),
    (57484, "c3e95c6fb35f4b39006c89538415b4f50a253a3ac1cad0e583fb287f6bd91be1"),
    (69240, "c34f5d113fe92f3206ef8855caf51cd6252286e3381b253bbc1237211198c22b"),
    (73892, "d05129c2d9f3e99565bf84fbceabbc61728e4d644173e194823b639f7c406b04"),
    (168312, "deea2bcecb1146ae9cd74d67b29b4d0161e9bb63beb9022ca10f3625dda6c0e6"),
]

# Consensus rule change deployments.
RuleChangeActivationThreshold = 9576  # 95% of MinerConfirmationWindow
MinerConfirmationWindow = 10080  # 24 hours worth of blocks (1440 * 7)

# Mempool parameters
RelayNonStdTxs = False

# Human-readable part for Bech32 encoded segwit addresses, as defined in
# BIP 173.
Bech32HRPSegwit = "jc"

# Address encoding magics
PubKeyHashAddrID = 0x10  # starts with 7
ScriptHashAddrID = 0x05  # starts with 3
PrivateKeyID = 0x90  # starts with N
WitnessPubKeyHashAddrID = 0x06
WitnessScriptHashAddrID = 0x0A

# BIP32 hierarchical deterministic extended key magics
HDPrivateKeyID = (0x0488ADE4).to_bytes(4, byteorder="big")  # starts with xprv
HDPublicKeyID = (0x0488B21E).to_bytes(4, byteorder="big")  # starts with xpub

# BIP44 coin type used in the hierarchical deterministic path for
# address generation.
HDCoinType = 2013
