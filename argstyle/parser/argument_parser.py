# Argstyle CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Implements `ArgumentParser`, the token classifier behind `ArgumentStore`.

The parser turns a raw argument vector (program path at index 0) into a flat
mapping of names to values without any prior declaration of the accepted
arguments. Each token is classified once, in order, with one token of
lookahead:

- `--name=value` / `--name="value"`: explicit long value.
- `--name value`: long flag taking the following token when it does not
  start with a dash.
- `--name`: boolean long flag.
- `-p value`: single-letter short flag taking the following token.
- `-abc`: clustered short flags, each letter becoming `True`.
- The first bare token after index 0 is stored under `__default__`.

A lookahead value is not skipped: the next iteration still visits it and
classifies it on its own, so `["tool", "--name", "value"]` records both
`name` and `__default__` as "value".

Parsing is total. Every token falls into one of the branches above, and
unrecognized shapes degrade to boolean flags or are ignored.
"""
from __future__ import annotations

import re
from typing import Sequence

from argstyle.logger import logger
from argstyle.parser.cursor import TokenCursor

DEFAULT_KEY = "__default__"

LONG_VALUE_PATTERN = re.compile(r'--([0-9a-z_-]+)="?(.+?)"?\Z', re.DOTALL)

ArgumentMap = dict[str, str | bool]


class ArgumentParser:
    """
    Classifies command-line tokens into an argument mapping.

    The parser carries no state between calls: every `parse()` starts from an
    empty mapping and returns a new one.
    """

    def parse(self, tokens: Sequence[str]) -> ArgumentMap:
        """
        Parse a raw token sequence into a mapping of argument names to values.

        Args:
            tokens (Sequence[str]): The argument vector, conventionally
                `sys.argv` with the program path at index 0.

        Returns:
            dict[str, str | bool]: Argument names mapped to their string value,
            or `True` for flags given without a value.
        """
        arguments: ArgumentMap = {}
        cursor = TokenCursor(tokens)

        for current in cursor:
            following = cursor.peek_next()

            if current.startswith("--"):
                self._parse_long(current, following, arguments)
            elif current.startswith("-"):
                self._parse_short(current, following, arguments)
            elif cursor.key() != 0 and DEFAULT_KEY not in arguments:
                logger.debug("Positional argument: %r", current)
                arguments[DEFAULT_KEY] = current

        logger.debug("Parsed %d tokens into %d arguments", len(cursor), len(arguments))
        return arguments

    def _parse_long(self, current: str, following: str, arguments: ArgumentMap) -> None:
        match = LONG_VALUE_PATTERN.search(current)
        if match:
            name, value = match.group(1), match.group(2)
            logger.debug("Long argument with inline value: %s=%r", name, value)
            arguments[name] = value
            return

        name = current[2:]
        if following and not following.startswith("-"):
            logger.debug("Long argument with value: %s=%r", name, following)
            arguments[name] = following
        else:
            logger.debug("Long flag: %s", name)
            arguments[name] = True

    def _parse_short(self, current: str, following: str, arguments: ArgumentMap) -> None:
        letters = current[1:]
        if len(letters) == 1 and following and not following.startswith("-"):
            logger.debug("Short argument with value: %s=%r", letters, following)
            arguments[letters] = following
            return

        for letter in letters:
            logger.debug("Short flag: %s", letter)
            arguments[letter] = True
