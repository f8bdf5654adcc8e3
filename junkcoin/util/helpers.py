"""
Copyright (c) 2025, The Junkcoin developers
See LICENSE for details
"""

import json
import logging
from logging import Logger
from logging.handlers import RotatingFileHandler
import os
from pathlib import Path
import shutil
import sys
from tempfile import TemporaryDirectory
import traceback
from typing import Any, Dict, Optional, Union


def formatTraceback(err: Exception) -> str:
    """
    Format a traceback for an error so that it can go into logs.

    Args:
        err: The error the traceback is extracted from.

    Returns:
        The __str__() of the error, followed by the standard formatting
            of the traceback on the following lines.
    """
    return "".join(traceback.format_exception(None, err, err.__traceback__))


def mkdir(path: Union[Path, str]) -> bool:
    """
    Create the directory if it doesn't exist.

    Args:
        path: the directory path.

    Returns:
        False if a file is in the way, else True.
    """
    if os.path.isdir(path):
        return True
    if os.path.isfile(path):
        return False
    os.makedirs(path)
    return True


class LogSettings:
    """
    Used to track a few logging-related settings.
    """

    root = logging.getLogger("")
    defaultLevel = logging.INFO
    moduleLevels: Dict[str, int] = {}
    loggers: Dict[str, Logger] = {}


LogSettings.root.setLevel(logging.NOTSET)


def prepareLogging(
    filepath: Union[Path, str, None] = None,
    logLvl: int = logging.INFO,
    lvlMap: Optional[Dict[str, int]] = None,
) -> None:
    """
    Prepare for using getLogger. Logs to stdout. If filepath is provided, log
    outputs will be saved to a rotating log file at the specified location. Any
    loggers, both future loggers and those already created, will have their
    levels set according to the new logLvl and lvlMap.

    Args:
        filepath: The base name for the rotating log file.
        logLvl: The default logging level used for all new loggers without
            entries in the lvlMap.
        lvlMap: The name->level mapping will be added to the stored level dict,
            which is referenced when loggers are created using getLogger.
    """
    LogSettings.defaultLevel = logLvl
    LogSettings.moduleLevels.update(lvlMap if lvlMap else {})
    for name, logger in LogSettings.loggers.items():
        logger.setLevel(LogSettings.moduleLevels.get(name, LogSettings.defaultLevel))

    log_formatter = logging.Formatter(
        "%(asctime)s %(module)s %(levelname)s %(funcName)s(%(lineno)d) %(message)s"
    )
    if filepath:
        fileHandler = RotatingFileHandler(
            filepath,
            mode="a",
            maxBytes=5 * 1024 * 1024,
            backupCount=2,
            encoding=None,
            delay=False,
        )
        fileHandler.setFormatter(log_formatter)
        LogSettings.root.addHandler(fileHandler)
    if not sys.executable.endswith("pythonw.exe"):
        # Skip adding the stdout handler for pythonw in windows.
        printHandler = logging.StreamHandler()
        printHandler.setFormatter(log_formatter)
        LogSettings.root.addHandler(printHandler)


def getLogger(name: str) -> Logger:
    """
    Gets a named logger. If the name has a log level registered with
    prepareLogging, that level will be used, otherwise the default is used.

    Args:
        name: The logger name.
    """
    l = LogSettings.root.getChild(name)
    l.setLevel(LogSettings.moduleLevels.get(name, LogSettings.defaultLevel))
    LogSettings.loggers[name] = l
    return l


def getLogLevel(lvl: Union[int, str]) -> int:
    """
    Resolve a level name such as "debug" or "WARNING" to its logging constant.
    Integers are returned unchanged.

    Args:
        lvl: The level name or number.

    Returns:
        The logging level.
    """
    if isinstance(lvl, int):
        return lvl
    level = logging.getLevelName(lvl.upper())
    if not isinstance(level, int):
        raise ValueError(f"unknown log level {lvl}")
    return level


def readJSON(path: Union[Path, str]) -> Dict[str, Any]:
    """
    Read the JSON settings file. A missing file is an empty object.

    Args:
        path: The file path.

    Returns:
        The decoded object.
    """
    if not os.path.isfile(path):
        return {}
    with open(path) as f:
        return json.load(f)


def saveJSON(path: Union[Path, str], thing: Any, **kwargs) -> None:
    """
    Atomic JSON file save. Keyword arguments are passed to json.dumps.

    Args:
        path: The file path.
        thing: The JSON-encodable object.
    """
    with TemporaryDirectory() as tempDir:
        tmpPath = os.path.join(tempDir, "tmp.tmp")
        with open(tmpPath, "w") as f:
            f.write(json.dumps(thing, **kwargs))
            f.flush()
            os.fsync(f.fileno())
        shutil.move(tmpPath, path)
