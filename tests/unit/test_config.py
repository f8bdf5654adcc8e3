"""
Copyright (c) 2025, The Junkcoin developers
See LICENSE for details
"""

import logging
import os

import pytest

from junkcoin import JunkcoinError, config
from junkcoin import __main__ as cli
from junkcoin.util import helpers


def newConfig(tmp_path, *args, netName=None):
    return config.JunkcoinConfig(netName, ["--appdata", str(tmp_path), *args])


def test_network(tmp_path):
    cfg = newConfig(tmp_path)
    assert cfg.netParams.Name == config.MAINNET
    assert len(cfg.registry) == 2

    cfg = newConfig(tmp_path, "--testnet")
    assert cfg.netParams.Name == config.TESTNET

    cfg = newConfig(tmp_path, "--network", "junkcoin-testnet")
    assert cfg.netParams.Name == config.TESTNET

    cfg = newConfig(tmp_path, "--testnet", netName="mainnet")
    assert cfg.netParams.Name == config.MAINNET

    with pytest.raises(JunkcoinError):
        newConfig(tmp_path, "--network", "nonet")


def test_settings(tmp_path):
    cfg = newConfig(tmp_path, "--unknown-flag")
    assert cfg.path == os.path.join(str(tmp_path), config.CONFIG_NAME)
    assert cfg.netSetting("port") == "9771"
    assert cfg.get("networks", config.TESTNET, "port") == "19771"
    assert cfg.get("networks", config.MAINNET, "dnsseeds")[0] == "mainnet.junk-coin.com"
    assert cfg.get("nothing", "here") is None
    assert cfg.get("networks", config.MAINNET, "port", "deeper") is None

    cfg.set("network", "testnet")
    cfg.set("loglevel", "debug")
    cfg.save()
    assert helpers.readJSON(cfg.path)["network"] == "testnet"

    # The saved network is used when nothing else selects one.
    cfg = newConfig(tmp_path)
    assert cfg.netParams.Name == config.TESTNET
    assert cfg.logLevel() == logging.DEBUG
    cfg = newConfig(tmp_path, "--loglevel", "error")
    assert cfg.logLevel() == logging.ERROR


def test_badDataDir(tmp_path):
    path = tmp_path / "file"
    path.write_text("")
    with pytest.raises(JunkcoinError):
        config.JunkcoinConfig(None, ["--appdata", str(path)])


def test_load(tmp_path, monkeypatch):
    monkeypatch.setattr(config, "junkcoinConfig", None)
    cfg = config.load(args=["--appdata", str(tmp_path), "--testnet"])
    assert config.load() is cfg
    assert cfg.netParams.Name == config.TESTNET


def test_main(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr(config, "junkcoinConfig", None)
    args = ["--appdata", str(tmp_path), "--decode", "3QJmV3qfvL9SuYo34YihAf3sRCW3qSinyC"]
    assert cli.main(args) == 0
    out = capsys.readouterr().out
    assert "junkcoin-mainnet" in out
    assert "0x6a756e6b" in out
    assert "m/44'/2013'/0'" in out
    assert "scripthash f815b036d9bbbce5e9f2a00abd1bf3dc91e95510" in out

    monkeypatch.setattr(config, "junkcoinConfig", None)
    args = ["--appdata", str(tmp_path), "--testnet", "--decode", "3QJmV3qfvL9SuYo34YihAf3sRCW3qSinyC"]
    assert cli.main(args) == 1
    assert "UnknownPrefix" in capsys.readouterr().out


def test_mainFatal(tmp_path, monkeypatch):
    monkeypatch.setattr(config, "junkcoinConfig", None)
    assert cli.main(["--appdata", str(tmp_path), "--network", "nonet"]) == 1
    assert cli.main(["--appdata", str(tmp_path), "--loglevel", "loud"]) == 2
