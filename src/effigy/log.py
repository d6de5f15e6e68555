"""
Logging setup.

Every module logs through logging.getLogger(__name__). The entry points call
configure_logging once, at INFO by default or DEBUG with --verbose.
"""

from __future__ import annotations

import logging


def configure_logging(verbose: bool = False) -> None:
    """Configure logging for the extension. Output goes to stderr."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
