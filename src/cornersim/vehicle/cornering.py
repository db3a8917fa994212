"""Friction-circle lateral capacity and cornering speed limit."""

from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np

from cornersim.vehicle.params import VehicleParameters
from cornersim.vehicle.state import WHEEL_NAMES, VehicleState

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LateralCapacity:
    """Remaining lateral force capacity of all four wheels.

    Args:
        front_left: Front-left lateral capacity [N].
        front_right: Front-right lateral capacity [N].
        rear_left: Rear-left lateral capacity [N].
        rear_right: Rear-right lateral capacity [N].
        saturated_wheels: Wheels whose longitudinal force exceeds the
            friction circle.
        lifted_wheels: Wheels with a non-positive normal load.
    """

    front_left: float
    front_right: float
    rear_left: float
    rear_right: float
    saturated_wheels: tuple[str, ...] = ()
    lifted_wheels: tuple[str, ...] = ()

    @property
    def total(self) -> float:
        """Return summed lateral capacity of all wheels [N]."""
        return self.front_left + self.front_right + self.rear_left + self.rear_right


def friction_circle_lateral_capacity_numpy(
    *,
    normal_load: np.ndarray | float,
    longitudinal_force: np.ndarray | float,
    mu_long: float,
    mu_lat: float,
) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Return per-wheel lateral capacity left by committed longitudinal force.

    Args:
        normal_load: Wheel normal loads [N].
        longitudinal_force: Committed longitudinal tire forces [N].
        mu_long: Longitudinal friction coefficient [-].
        mu_lat: Lateral friction coefficient [-].

    Returns:
        Tuple ``(capacity, saturated, lifted)``. Saturated and lifted wheels
        contribute exactly zero capacity.
    """
    normal, longitudinal = np.broadcast_arrays(
        np.asarray(normal_load, dtype=float),
        np.asarray(longitudinal_force, dtype=float),
    )
    lifted = normal <= 0.0
    safe_normal = np.where(lifted, 1.0, normal)
    ratio = longitudinal / (mu_long * safe_normal)
    remaining = 1.0 - ratio * ratio
    saturated = (remaining < 0.0) & ~lifted
    capacity = mu_lat * normal * np.sqrt(np.maximum(remaining, 0.0))
    capacity = np.where(lifted | saturated, 0.0, capacity)
    return np.asarray(capacity, dtype=float), saturated, lifted


def lateral_capacity(state: VehicleState, params: VehicleParameters) -> LateralCapacity:
    """Evaluate the friction circle of every wheel.

    Over-saturated and lifted wheels are reported through the module logger
    and contribute zero capacity; the evaluation always continues.

    Args:
        state: Vehicle state providing normal loads and longitudinal forces.
        params: Vehicle parameter set.

    Returns:
        Per-wheel lateral capacities and diagnostics.
    """
    capacity, saturated, lifted = friction_circle_lateral_capacity_numpy(
        normal_load=state.loads.normal.as_array(),
        longitudinal_force=state.loads.longitudinal.as_array(),
        mu_long=params.effective_mu_long,
        mu_lat=params.effective_mu_lat,
    )
    saturated_wheels = tuple(name for name, flag in zip(WHEEL_NAMES, saturated) if flag)
    lifted_wheels = tuple(name for name, flag in zip(WHEEL_NAMES, lifted) if flag)
    for name in saturated_wheels:
        logger.warning("Tire saturated on %s wheel; lateral capacity set to zero", name)
    for name in lifted_wheels:
        logger.warning("Wheel %s has no normal load; lateral capacity set to zero", name)

    return LateralCapacity(
        front_left=float(capacity[0]),
        front_right=float(capacity[1]),
        rear_left=float(capacity[2]),
        rear_right=float(capacity[3]),
        saturated_wheels=saturated_wheels,
        lifted_wheels=lifted_wheels,
    )


def max_cornering_speed(state: VehicleState, params: VehicleParameters) -> float:
    """Return the highest speed sustainable at the current path curvature.

    The limit is reached when the centripetal force ``m * v^2 * |kappa|``
    equals the summed lateral capacity. Left and right turns give the same
    limit. Zero curvature returns ``params.constants.infinite_speed``.
    Per-wheel capacity is evaluated first, so saturation warnings are logged
    on straights too.

    Args:
        state: Vehicle state; only loads and curvature are read.
        params: Vehicle parameter set.

    Returns:
        Cornering speed limit [m/s].
    """
    capacity = lateral_capacity(state, params)
    curvature = state.position.curvature
    if curvature == 0.0:
        return params.constants.infinite_speed
    return float(np.sqrt(capacity.total / (params.inertial.mass * abs(curvature))))
