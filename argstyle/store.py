# Argstyle CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Holds parsed command-line arguments for lookup by name, alias and default.

The `ArgumentStore` is a plain context object: build one, call `parse()` with
an argument vector, and pass it to whatever needs argument lookups. Each
`parse()` replaces the stored mapping wholesale; results are never merged.

For entry points that do not want to thread a store around, a process-wide
store is created lazily on first access through `get_argument_store()`.

Typical Usage:
    store = ArgumentStore().parse(sys.argv)
    if store.has("verbose", "v"):
        ...
    port = store.get_as("port", int, alias="p", default=8080)
    target = store.get("__default__")
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Any, Mapping, Sequence

from pydantic import TypeAdapter

from argstyle.logger import logger
from argstyle.parser import ArgumentMap, ArgumentParser


class ArgumentStore:
    """
    Stores the result of the most recent argument parse.

    Lookups never fail: a missing name resolves to its alias, then to the
    caller's default.
    """

    def __init__(self, parser: ArgumentParser | None = None) -> None:
        self.parser = parser or ArgumentParser()
        self.arguments: ArgumentMap = {}

    def parse(self, tokens: Sequence[str]) -> ArgumentStore:
        """Parse `tokens` and replace the stored arguments with the result."""
        self.arguments = self.parser.parse(tokens)
        logger.debug("Stored arguments: %s", sorted(self.arguments))
        return self

    parse_and_store = parse

    def add(self, name: str, value: str | bool) -> ArgumentStore:
        """Set a single argument value."""
        self.arguments[name] = value
        return self

    def _resolve(self, name: str, alias: str | None) -> str | None:
        if name in self.arguments:
            return name
        if alias and alias in self.arguments:
            return alias
        return None

    def get(self, name: str, alias: str | None = None, default: Any = None) -> Any:
        """Get the value of `name`, else of `alias`, else `default`."""
        key = self._resolve(name, alias)
        if key is None:
            return default
        return self.arguments[key]

    def has(self, name: str, alias: str | None = None) -> bool:
        """Check if `name` or `alias` was given."""
        return self._resolve(name, alias) is not None

    def get_as(
        self,
        name: str,
        type_: Any,
        alias: str | None = None,
        default: Any = None,
    ) -> Any:
        """
        Get an argument validated as `type_`.

        Values are checked in pydantic lax mode, so "8080" becomes 8080 and
        "off" becomes False. A flag given without a value is validated as `True`.

        Args:
            name (str): The argument name.
            type_ (Any): Any type pydantic can validate (`int`, `bool`, an Enum,
                a `Literal`, a union, `datetime`...).
            alias (str | None): Alternative name checked when `name` is absent.
            default (Any): Returned when the argument is absent or fails validation.

        Returns:
            Any: The validated value or `default`.
        """
        key = self._resolve(name, alias)
        if key is None:
            return default
        value = self.arguments[key]
        try:
            return TypeAdapter(type_).validate_python(value)
        except (ValueError, TypeError) as error:
            logger.warning(
                "Ignoring argument '%s' with value %r: %s", key, value, error
            )
            return default

    def get_all(self) -> Mapping[str, str | bool]:
        """Return a read-only snapshot of all stored arguments."""
        return MappingProxyType(dict(self.arguments))

    def __contains__(self, name: object) -> bool:
        return name in self.arguments

    def __len__(self) -> int:
        return len(self.arguments)

    def __repr__(self) -> str:
        return f"ArgumentStore({self.arguments!r})"


_shared_store: ArgumentStore | None = None


def get_argument_store() -> ArgumentStore:
    """Return the process-wide store, creating an empty one on first access."""
    global _shared_store
    if _shared_store is None:
        _shared_store = ArgumentStore()
    return _shared_store


def set_argument_store(store: ArgumentStore) -> None:
    """Replace the process-wide store."""
    global _shared_store
    _shared_store = store


def reset_argument_store() -> None:
    """Drop the process-wide store; the next access creates a new one."""
    global _shared_store
    _shared_store = None
