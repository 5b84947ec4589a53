# Argstyle CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the custom exception classes used by Argstyle.

Parsing, lookups and rendering are tolerant by design and never raise. These
exceptions only surface from explicit validation helpers such as
`Color.from_name`, so callers that want strict input can opt in to it.

Exception Hierarchy:
- ArgStyleError
    └── InvalidColorError
"""


class ArgStyleError(Exception):
    """Base exception for Argstyle."""


class InvalidColorError(ArgStyleError, ValueError):
    """Exception raised when a color name is not part of the palette."""
