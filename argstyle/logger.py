# Argstyle CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global logger instance for Argstyle."""
import logging

logger = logging.getLogger("argstyle")
