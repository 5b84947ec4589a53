"""
Argstyle CLI Toolkit

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging
import os
import sys
from typing import Sequence

from argstyle.console import console
from argstyle.settings import Settings
from argstyle.store import ArgumentStore, set_argument_store
from argstyle.style import PadDirection, TextStyle
from argstyle.table import build_argument_table
from argstyle.utils import setup_logging


def main(argv: Sequence[str] | None = None) -> int:
    """Parse `argv`, show the resulting arguments and a styled sample line."""
    argv = sys.argv if argv is None else argv
    store = ArgumentStore().parse(argv)
    set_argument_store(store)

    settings = Settings.from_store(store)
    setup_logging(
        mode=settings.log_mode,
        log_filename=settings.log_file,
        console_log_level=logging.DEBUG if settings.verbose else logging.WARNING,
    )

    title = os.path.basename(argv[0]) if argv else "argstyle"
    console.print(build_argument_table(store.get_all(), title=title))

    sample = (
        TextStyle(" argstyle ", enabled=settings.color)
        .bold()
        .color_foreground(settings.foreground)
        .color_background(settings.background)
        .pad(24, "·", PadDirection.BOTH)
    )
    sys.stdout.write(f"{sample}\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
