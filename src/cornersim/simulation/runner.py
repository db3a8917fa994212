"""Fixed-step driving loop built on the integrator and tire models."""

from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np

from cornersim.simulation.integrator import advance
from cornersim.utils.exceptions import ConfigurationError
from cornersim.vehicle.cornering import max_cornering_speed
from cornersim.vehicle.load_transfer import apply_load_transfer
from cornersim.vehicle.params import VehicleParameters
from cornersim.vehicle.state import VehicleState

logger = logging.getLogger(__name__)

TRAJECTORY_LINE_FORMAT = "t={time:f} x={x:f} y={y:f}"


@dataclass(frozen=True)
class DriveResult:
    """Trajectory samples and final cornering limit of one drive.

    Args:
        time: Simulation time after each step [s].
        x: Global x position after each step [m].
        y: Global y position after each step [m].
        yaw: Heading after each step [rad].
        cornering_speed: Cornering speed limit at the final state [m/s].
    """

    time: np.ndarray
    x: np.ndarray
    y: np.ndarray
    yaw: np.ndarray
    cornering_speed: float

    def trajectory_lines(self) -> list[str]:
        """Render one ``t=<time> x=<x> y=<y>`` line per step.

        Returns:
            Console lines with six decimals per value.
        """
        return [
            TRAJECTORY_LINE_FORMAT.format(time=t, x=x, y=y)
            for t, x, y in zip(self.time, self.x, self.y)
        ]


def simulate_drive(
    state: VehicleState,
    params: VehicleParameters,
    steps: int,
    longitudinal_accel: float | None = None,
    lateral_accel: float | None = None,
) -> DriveResult:
    """Advance the vehicle for a fixed number of steps.

    When both accelerations are given, wheel loads are updated after every
    position step. ``state`` is mutated in place.

    Args:
        state: Vehicle state to drive.
        params: Vehicle parameter set.
        steps: Number of integration steps.
        longitudinal_accel: Optional longitudinal acceleration [m/s^2].
        lateral_accel: Optional lateral acceleration [m/s^2].

    Returns:
        Per-step trajectory samples and the final cornering speed.

    Raises:
        cornersim.utils.exceptions.ConfigurationError: If ``steps`` is not
            a positive integer or only one acceleration is given.
    """
    if isinstance(steps, bool) or not isinstance(steps, int) or steps < 1:
        msg = f"steps must be an integer of at least 1, got: {steps!r}"
        raise ConfigurationError(msg)
    if (longitudinal_accel is None) != (lateral_accel is None):
        msg = "longitudinal_accel and lateral_accel must be given together"
        raise ConfigurationError(msg)

    time = np.empty(steps, dtype=float)
    x = np.empty(steps, dtype=float)
    y = np.empty(steps, dtype=float)
    yaw = np.empty(steps, dtype=float)
    for idx in range(steps):
        advance(state, params)
        if longitudinal_accel is not None and lateral_accel is not None:
            apply_load_transfer(state, params, longitudinal_accel, lateral_accel)
        time[idx] = state.position.time
        x[idx] = state.position.x
        y[idx] = state.position.y
        yaw[idx] = state.position.yaw

    cornering_speed = max_cornering_speed(state, params)
    logger.debug("Drive finished after %d steps, cornering speed %.3f m/s", steps, cornering_speed)
    return DriveResult(time=time, x=x, y=y, yaw=yaw, cornering_speed=cornering_speed)
