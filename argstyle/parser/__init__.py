"""
Argstyle CLI Toolkit

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .argument_parser import DEFAULT_KEY, ArgumentMap, ArgumentParser
from .cursor import TokenCursor

__all__ = [
    "ArgumentMap",
    "ArgumentParser",
    "DEFAULT_KEY",
    "TokenCursor",
]
