"""
Copyright (c) 2025, The Junkcoin developers
See LICENSE for details
"""


class JunkcoinError(Exception):
    pass
