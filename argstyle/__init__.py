"""
Argstyle CLI Toolkit

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging

from .colors import Color
from .parser import DEFAULT_KEY, ArgumentParser, TokenCursor
from .store import (
    ArgumentStore,
    get_argument_store,
    reset_argument_store,
    set_argument_store,
)
from .style import PadDirection, StyleTarget, TextStyle

logger = logging.getLogger("argstyle")


__all__ = [
    "ArgumentParser",
    "ArgumentStore",
    "Color",
    "DEFAULT_KEY",
    "PadDirection",
    "StyleTarget",
    "TextStyle",
    "TokenCursor",
    "get_argument_store",
    "reset_argument_store",
    "set_argument_store",
]
