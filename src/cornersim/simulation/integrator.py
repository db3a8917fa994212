"""Explicit position integration of the kinematic bicycle model."""

from __future__ import annotations

import numpy as np

from cornersim.vehicle.params import VehicleParameters
from cornersim.vehicle.state import VehicleState


def position_rates(state: VehicleState) -> tuple[float, float]:
    """Rotate body-frame velocity into the global frame.

    Args:
        state: Vehicle state providing heading and body-frame velocity.

    Returns:
        Tuple ``(x_dot, y_dot)`` [m/s].
    """
    yaw = state.position.yaw
    v_long = state.dynamics.v_long
    v_lat = state.dynamics.v_lat
    cos_yaw = np.cos(yaw)
    sin_yaw = np.sin(yaw)
    x_dot = v_long * cos_yaw - v_lat * sin_yaw
    y_dot = v_long * sin_yaw + v_lat * cos_yaw
    return float(x_dot), float(y_dot)


def advance(state: VehicleState, params: VehicleParameters) -> None:
    """Run a single explicit Euler step on the vehicle position.

    Updates ``x``, ``y``, ``yaw`` and ``time`` in place. Dynamics and path
    curvature are read-only here.

    Args:
        state: Vehicle state to advance.
        params: Vehicle parameter set providing the timestep.
    """
    dtime = params.solver.timestep
    x_dot, y_dot = position_rates(state)
    position = state.position
    position.x += x_dot * dtime
    position.y += y_dot * dtime
    position.yaw += state.dynamics.yaw_rate * dtime
    position.time += dtime
