"""Logging setup for the command-line entry points."""

from __future__ import annotations

import logging


def configure_logging(*, level: int = logging.WARNING, force: bool = False) -> None:
    """Initialise the root logger once.

    Library modules only log at DEBUG through ``logging.getLogger(__name__)``;
    the CLI calls this with ``level=logging.DEBUG`` under ``--verbose``. Pass
    ``force=True`` to reconfigure during tests.
    """

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
        force=force,
    )
