"""Logging helpers for library users and examples."""

from __future__ import annotations

import logging

TIRE_DIAGNOSTICS_LOGGER = "cornersim.vehicle.cornering"


def configure_logging(
    level: int = logging.INFO,
    tire_diagnostics_level: int | None = None,
) -> None:
    """Configure a minimal logging setup for examples and scripts.

    Args:
        level: Root logging level.
        tire_diagnostics_level: Optional level for per-wheel saturation
            warnings, e.g. ``logging.ERROR`` to silence them during sweeps.
    """
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )
    if tire_diagnostics_level is not None:
        logging.getLogger(TIRE_DIAGNOSTICS_LOGGER).setLevel(tire_diagnostics_level)
