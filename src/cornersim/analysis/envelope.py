"""Cornering speed limit over a grid of acceleration demands."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from cornersim.utils.exceptions import ConfigurationError
from cornersim.vehicle.cornering import max_cornering_speed
from cornersim.vehicle.load_transfer import apply_load_transfer
from cornersim.vehicle.params import VehicleParameters
from cornersim.vehicle.state import VehicleState


@dataclass(frozen=True)
class CorneringEnvelope:
    """Cornering speed limit sampled on an acceleration grid.

    Args:
        longitudinal_accel: Longitudinal acceleration samples [m/s^2].
        lateral_accel: Lateral acceleration samples [m/s^2].
        speed: Cornering speed limit with shape
            ``(len(longitudinal_accel), len(lateral_accel))`` [m/s].
    """

    longitudinal_accel: np.ndarray
    lateral_accel: np.ndarray
    speed: np.ndarray

    def to_numpy(self) -> np.ndarray:
        """Flatten the envelope into ``(a_long, a_lat, speed)`` rows.

        Returns:
            Array with shape ``(n_long * n_lat, 3)``.
        """
        long_grid, lat_grid = np.meshgrid(
            self.longitudinal_accel,
            self.lateral_accel,
            indexing="ij",
        )
        return np.column_stack((long_grid.ravel(), lat_grid.ravel(), self.speed.ravel()))


def _validate_grid(name: str, values: np.ndarray) -> None:
    """Validate one acceleration sample vector.

    Args:
        name: Grid name used in error messages.
        values: One-dimensional sample vector.

    Raises:
        cornersim.utils.exceptions.ConfigurationError: If the grid is empty,
            not one-dimensional, or contains non-finite values.
    """
    if values.ndim != 1 or values.size == 0:
        msg = f"{name} must be a non-empty one-dimensional sequence"
        raise ConfigurationError(msg)
    if not np.all(np.isfinite(values)):
        msg = f"{name} must contain only finite values"
        raise ConfigurationError(msg)


def compute_cornering_envelope(
    state: VehicleState,
    params: VehicleParameters,
    longitudinal_accels: np.ndarray | list[float],
    lateral_accels: np.ndarray | list[float],
) -> CorneringEnvelope:
    """Evaluate the cornering speed limit for every acceleration pair.

    Each sample works on its own copy of ``state``; the input state is left
    untouched. Committed longitudinal forces and path curvature are taken
    from ``state`` unchanged.

    Args:
        state: Reference vehicle state.
        params: Vehicle parameter set.
        longitudinal_accels: Longitudinal acceleration samples [m/s^2].
        lateral_accels: Lateral acceleration samples [m/s^2].

    Returns:
        Sampled cornering envelope.

    Raises:
        cornersim.utils.exceptions.ConfigurationError: If a sample grid is
            empty or non-finite.
    """
    longitudinal = np.asarray(longitudinal_accels, dtype=float)
    lateral = np.asarray(lateral_accels, dtype=float)
    _validate_grid("longitudinal_accels", longitudinal)
    _validate_grid("lateral_accels", lateral)

    speed = np.empty((longitudinal.size, lateral.size), dtype=float)
    for i, a_long in enumerate(longitudinal):
        for j, a_lat in enumerate(lateral):
            candidate = state.copy()
            apply_load_transfer(candidate, params, float(a_long), float(a_lat))
            speed[i, j] = max_cornering_speed(candidate, params)

    return CorneringEnvelope(
        longitudinal_accel=longitudinal,
        lateral_accel=lateral,
        speed=speed,
    )
