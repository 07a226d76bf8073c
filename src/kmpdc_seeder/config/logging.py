"""Shared logging helpers for the registry seeder."""

from __future__ import annotations

import logging
import os

LOG_LEVEL_ENV = "KMPDC_LOG_LEVEL"


def configure_logging(*, level: int | None = None, force: bool = False) -> None:
    """Initialise the root logger once with sensible defaults.

    Parameters mirror ``logging.basicConfig`` with a simplified contract: we default
    to INFO (or ``KMPDC_LOG_LEVEL`` when set) and a terse format suitable for CLI
    output. Pass ``force=True`` to reconfigure during tests or specialised entry points.
    """

    logging.basicConfig(
        level=level if level is not None else _level_from_environment(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
        force=force,
    )


def _level_from_environment() -> int:
    name = (os.getenv(LOG_LEVEL_ENV) or "").strip().upper()
    if not name:
        return logging.INFO
    value = logging.getLevelNamesMapping().get(name)
    return value if value is not None else logging.INFO
