"""Quasi-static normal-load estimation from longitudinal and lateral acceleration.

Sign convention:

* ``longitudinal_accel > 0`` accelerates the vehicle and unloads the front
  axle; ``< 0`` brakes and loads the front axle.
* ``lateral_accel > 0`` is a right turn and moves load onto the right-hand
  wheels; ``< 0`` is a left turn and loads the left-hand wheels.

Loads are linear in both accelerations and are not clamped, so the four wheel
loads always sum to the static weight. A wheel load can become negative under
extreme transfer; the cornering solver treats such a wheel as lifted off.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from cornersim.vehicle.params import VehicleParameters
from cornersim.vehicle.state import VehicleState


@dataclass(frozen=True)
class NormalLoadState:
    """Axle loads, transfer terms and wheel normal loads.

    Args:
        front_axle_load: Front-axle normal load incl. longitudinal transfer [N].
        rear_axle_load: Rear-axle normal load incl. longitudinal transfer [N].
        front_lateral_transfer: Front-axle lateral transfer term [N].
        rear_lateral_transfer: Rear-axle lateral transfer term [N].
        front_left_load: Front-left wheel normal load [N].
        front_right_load: Front-right wheel normal load [N].
        rear_left_load: Rear-left wheel normal load [N].
        rear_right_load: Rear-right wheel normal load [N].
    """

    front_axle_load: float
    rear_axle_load: float
    front_lateral_transfer: float
    rear_lateral_transfer: float
    front_left_load: float
    front_right_load: float
    rear_left_load: float
    rear_right_load: float


def axle_lateral_transfer_numpy(
    *,
    lateral_accel: np.ndarray | float,
    mass: float,
    cg_height: float,
    roll_stiffness: float,
    total_roll_stiffness: float,
    roll_center_height: float,
    track: float,
) -> np.ndarray:
    """Return one axle's lateral load-transfer term.

    The term is the sum of a sprung component, proportioned by the axle's
    share of roll stiffness, and a geometric component acting through the
    axle's roll center.

    Args:
        lateral_accel: Lateral acceleration [m/s^2].
        mass: Vehicle mass [kg].
        cg_height: CoG height [m].
        roll_stiffness: Roll stiffness of this axle [N*m/rad].
        total_roll_stiffness: Front plus rear roll stiffness [N*m/rad].
        roll_center_height: Roll-center height of this axle [m].
        track: Track width of this axle [m].

    Returns:
        Signed lateral transfer term [N].
    """
    lateral = np.asarray(lateral_accel, dtype=float)
    sprung = roll_stiffness * mass * lateral * cg_height / (total_roll_stiffness * track)
    geometric = mass * lateral * roll_center_height / track
    return np.asarray(geometric + sprung, dtype=float)


def wheel_normal_loads_numpy(
    params: VehicleParameters,
    *,
    longitudinal_accel: np.ndarray | float,
    lateral_accel: np.ndarray | float,
) -> tuple[np.ndarray, ...]:
    """Estimate axle and wheel normal loads for scalar or array input.

    Args:
        params: Vehicle parameter set.
        longitudinal_accel: Longitudinal acceleration [m/s^2].
        lateral_accel: Lateral acceleration [m/s^2].

    Returns:
        Tuple ``(front_axle, rear_axle, front_transfer, rear_transfer,
        front_left, front_right, rear_left, rear_right)`` [N].
    """
    longitudinal_array, lateral_array = np.broadcast_arrays(
        np.asarray(longitudinal_accel, dtype=float),
        np.asarray(lateral_accel, dtype=float),
    )
    mass = params.inertial.mass
    cg_height = params.inertial.cg_height
    roll = params.roll

    longitudinal_transfer = -mass * longitudinal_array * cg_height / params.geometry.wheelbase
    front_axle_load = params.static_front_axle_load + longitudinal_transfer
    rear_axle_load = params.static_rear_axle_load - longitudinal_transfer

    front_transfer = axle_lateral_transfer_numpy(
        lateral_accel=lateral_array,
        mass=mass,
        cg_height=cg_height,
        roll_stiffness=roll.front_roll_stiffness,
        total_roll_stiffness=roll.total_roll_stiffness,
        roll_center_height=roll.front_roll_center_height,
        track=params.geometry.front_track,
    )
    rear_transfer = axle_lateral_transfer_numpy(
        lateral_accel=lateral_array,
        mass=mass,
        cg_height=cg_height,
        roll_stiffness=roll.rear_roll_stiffness,
        total_roll_stiffness=roll.total_roll_stiffness,
        roll_center_height=roll.rear_roll_center_height,
        track=params.geometry.rear_track,
    )

    front_left = 0.5 * (front_axle_load - front_transfer)
    front_right = 0.5 * (front_axle_load + front_transfer)
    rear_left = 0.5 * (rear_axle_load - rear_transfer)
    rear_right = 0.5 * (rear_axle_load + rear_transfer)
    return (
        np.asarray(front_axle_load, dtype=float),
        np.asarray(rear_axle_load, dtype=float),
        front_transfer,
        rear_transfer,
        np.asarray(front_left, dtype=float),
        np.asarray(front_right, dtype=float),
        np.asarray(rear_left, dtype=float),
        np.asarray(rear_right, dtype=float),
    )


def estimate_normal_loads(
    params: VehicleParameters,
    longitudinal_accel: float,
    lateral_accel: float,
) -> NormalLoadState:
    """Estimate the normal load distribution for one acceleration pair.

    Args:
        params: Vehicle parameter set.
        longitudinal_accel: Longitudinal acceleration [m/s^2].
        lateral_accel: Lateral acceleration [m/s^2].

    Returns:
        Axle and wheel normal loads [N].
    """
    (
        front_axle_load,
        rear_axle_load,
        front_transfer,
        rear_transfer,
        front_left_load,
        front_right_load,
        rear_left_load,
        rear_right_load,
    ) = wheel_normal_loads_numpy(
        params,
        longitudinal_accel=longitudinal_accel,
        lateral_accel=lateral_accel,
    )
    return NormalLoadState(
        front_axle_load=float(front_axle_load),
        rear_axle_load=float(rear_axle_load),
        front_lateral_transfer=float(front_transfer),
        rear_lateral_transfer=float(rear_transfer),
        front_left_load=float(front_left_load),
        front_right_load=float(front_right_load),
        rear_left_load=float(rear_left_load),
        rear_right_load=float(rear_right_load),
    )


def apply_load_transfer(
    state: VehicleState,
    params: VehicleParameters,
    longitudinal_accel: float,
    lateral_accel: float,
) -> None:
    """Overwrite the state's wheel normal loads for the given accelerations.

    Only ``state.loads.normal`` is modified.

    Args:
        state: Vehicle state to update in place.
        params: Vehicle parameter set.
        longitudinal_accel: Longitudinal acceleration, positive accelerating
            [m/s^2].
        lateral_accel: Lateral acceleration, positive turning right [m/s^2].
    """
    loads = estimate_normal_loads(params, longitudinal_accel, lateral_accel)
    normal = state.loads.normal
    normal.front_left = loads.front_left_load
    normal.front_right = loads.front_right_load
    normal.rear_left = loads.rear_left_load
    normal.rear_right = loads.rear_right_load
