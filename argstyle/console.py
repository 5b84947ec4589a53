# Argstyle CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global console instance for Argstyle command-line tools."""
from rich.console import Console

console = Console(highlight=False)
