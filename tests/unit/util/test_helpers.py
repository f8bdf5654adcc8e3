"""
Copyright (c) 2025, The Junkcoin developers
See LICENSE for details
"""

import logging
import os

import pytest

from junkcoin import JunkcoinError
from junkcoin.util import helpers


def test_formatTraceback():
    try:
        raise JunkcoinError("errmsg")
    except JunkcoinError as e:
        tb = helpers.formatTraceback(e)
    assert tb.startswith("Traceback")
    assert "errmsg" in tb


def test_mkdir(tmp_path):
    fpath = tmp_path / "test_file"
    f = open(fpath, "w")
    f.close()
    assert not helpers.mkdir(fpath)
    dpath = tmp_path / "test_dir"
    assert helpers.mkdir(dpath)
    assert os.path.isdir(dpath)
    assert helpers.mkdir(dpath)


def test_prepareLogging(tmp_path):
    path = tmp_path / "test.log"
    helpers.prepareLogging(filepath=path)
    logger = helpers.getLogger("1")
    logger1 = logger
    assert logger.getEffectiveLevel() == logging.INFO

    logger.info("something")
    assert path.is_file()

    helpers.prepareLogging(filepath=path, logLvl=logging.DEBUG)
    logger = helpers.getLogger("2")
    assert logger.getEffectiveLevel() == logging.DEBUG

    helpers.prepareLogging(
        filepath=path,
        logLvl=logging.INFO,
        lvlMap={"1": logging.NOTSET, "3": logging.WARNING},
    )
    logger = helpers.getLogger("3")
    assert logger.getEffectiveLevel() == logging.WARNING
    assert logger1.getEffectiveLevel() == logging.NOTSET


def test_getLogLevel():
    assert helpers.getLogLevel("debug") == logging.DEBUG
    assert helpers.getLogLevel("WARNING") == logging.WARNING
    assert helpers.getLogLevel(logging.ERROR) == logging.ERROR
    with pytest.raises(ValueError):
        helpers.getLogLevel("loud")


def test_json(tmp_path):
    path = tmp_path / "settings.json"
    assert helpers.readJSON(path) == {}
    helpers.saveJSON(path, {"a": [1, 2], "b": "c"}, indent=4)
    assert helpers.readJSON(path) == {"a": [1, 2], "b": "c"}
    helpers.saveJSON(path, {"a": 3})
    assert helpers.readJSON(path) == {"a": 3}
