"""
Copyright (c) 2025, The Junkcoin developers
See LICENSE for details

Configuration settings for a Junkcoin node.
"""

import argparse
import os

from appdirs import AppDirs

from junkcoin import JunkcoinError, nets
from junkcoin.util import helpers


# Set the data directory in a OS-appropriate location.
_ad = AppDirs("Junkcoin", False)
DATA_DIR = _ad.user_data_dir

# The master configuration file name.
CONFIG_NAME = "junkcoin.conf"

MAINNET = nets.mainnet.Name
TESTNET = nets.testnet.Name

log = helpers.getLogger("CONFIG")


def netConfig(netParams):
    """
    The default settings for the network.

    Args:
        netParams (Params): The network parameters.

    Returns:
        dict: The network settings.
    """
    return {
        "name": netParams.Name,
        "port": netParams.DefaultPort,
        "dnsseeds": [s.host for s in netParams.DNSSeeds],
    }


def parseArgs(args=None):
    """
    Parse the command line. Unknown arguments are returned rather than
    rejected so that a host program can add its own.

    Args:
        args (list(str)): optional. default sys.argv[1:]. The arguments.

    Returns:
        argparse.Namespace: The known arguments.
        list(str): The unknown arguments.
    """
    parser = argparse.ArgumentParser(prog="junkcoin")
    netGroup = parser.add_mutually_exclusive_group()
    netGroup.add_argument("--testnet", action="store_true", help="use testnet")
    netGroup.add_argument("--network", help="network name")
    parser.add_argument("--appdata", help="data directory")
    parser.add_argument("--loglevel", help="logging level, e.g. debug or info")
    parser.add_argument("--decode", metavar="ADDR", help="decode an address")
    return parser.parse_known_args(args)


class JunkcoinConfig:
    """
    JunkcoinConfig is configuration settings. The configuration file is JSON
    formatted. The network comes from, in order of precedence, the netName
    argument, the command line, the configuration file, and finally mainnet.
    """

    def __init__(self, netName=None, args=None):
        """
        Args:
            netName (str): optional. A network name or alias.
            args (list(str)): optional. default sys.argv[1:]. The command
                line arguments.
        """
        self.args, unknown = parseArgs(args)
        if unknown:
            log.warning(f"ignoring unknown arguments: {unknown!r}")
        self.dataDir = self.args.appdata or DATA_DIR
        if not helpers.mkdir(self.dataDir):
            raise JunkcoinError(f"data directory {self.dataDir} is a file")
        self.path = os.path.join(self.dataDir, CONFIG_NAME)
        self.file = helpers.readJSON(self.path)

        self.registry = nets.buildRegistry()

        if netName is None:
            if self.args.testnet:
                netName = TESTNET
            elif self.args.network:
                netName = self.args.network
            else:
                netName = self.file.get("network", MAINNET)
        self.netParams = self.registry.parse(netName)
        log.info(f"using network {self.netParams.Name}")
        self.normalize()

    def set(self, k, v):
        """
        Set the configuration option. The configuration is not saved, so `save`
        should be called separately.

        Args:
            k (str): The setting key.
            v (JSON-encodable): The value.
        """
        self.file[k] = v

    def get(self, *keys):
        """
        Retrieve the setting at the provided key path. Multiple keys can be
        provided, with each successive key being retrieved from the previous
        key's value.

        Args:
            *keys (str): Recursive key list.

        Returns:
            mixed: The configuration value.
        """
        d = self.file
        rVal = None
        for k in keys:
            if not isinstance(d, dict) or k not in d:
                return None
            rVal = d[k]
            d = rVal
        return rVal

    def netSetting(self, k):
        """
        The setting for the active network.

        Args:
            k (str): The setting key.

        Returns:
            mixed: The configuration value.
        """
        return self.get("networks", self.netParams.Name, k)

    def logLevel(self):
        """
        The logging level from the command line or the configuration file.

        Returns:
            int: The level. logging.INFO if unset.
        """
        return helpers.getLogLevel(self.args.loglevel or self.get("loglevel") or "info")

    def normalize(self):
        """
        Perform attribute checks and initialization.
        """
        file = self.file
        netKey = "networks"
        if netKey not in file:
            file[netKey] = {}
        for params in self.registry:
            if params.Name not in file[netKey]:
                file[netKey][params.Name] = netConfig(params)

    def save(self):
        """
        Save the file.
        """
        helpers.saveJSON(self.path, self.file, indent=4, sort_keys=True)


junkcoinConfig = None


def load(netName=None, args=None):
    """
    Load and return the current configuration.

    The configuration is only loaded once. Successive calls to the modular `load`
    function will return the same instance.

    Returns:
        JunkcoinConfig: The current configuration.
    """
    global junkcoinConfig
    if not junkcoinConfig:
        junkcoinConfig = JunkcoinConfig(netName, args)
    return junkcoinConfig
