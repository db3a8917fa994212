"""Mutable simulation state of a single vehicle."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field

import numpy as np

from cornersim.vehicle.params import VehicleParameters

WHEEL_NAMES = ("front_left", "front_right", "rear_left", "rear_right")
DEFAULT_LONGITUDINAL_SPEED = 1.0
DEFAULT_WHEEL_NORMAL_LOAD = 100.0
DEFAULT_CURVATURE_FRACTION_OF_PI = 0.25


@dataclass
class Position:
    """Pose in the global planar frame.

    Args:
        x: Global x position [m].
        y: Global y position [m].
        yaw: Heading angle [rad].
        curvature: Signed path curvature [1/m].
        time: Elapsed simulation time [s].
    """

    x: float = 0.0
    y: float = 0.0
    yaw: float = 0.0
    curvature: float = 0.0
    time: float = 0.0


@dataclass
class Dynamics:
    """Body-frame velocities and roll motion.

    Args:
        v_long: Longitudinal velocity in body frame [m/s].
        v_lat: Lateral velocity in body frame [m/s].
        yaw_rate: Yaw rate [rad/s].
        roll_angle: Body roll angle [rad].
        roll_rate: Body roll rate [rad/s].
    """

    v_long: float = 0.0
    v_lat: float = 0.0
    yaw_rate: float = 0.0
    roll_angle: float = 0.0
    roll_rate: float = 0.0


@dataclass
class WheelValues:
    """One scalar per wheel [N]."""

    front_left: float = 0.0
    front_right: float = 0.0
    rear_left: float = 0.0
    rear_right: float = 0.0

    def as_array(self) -> np.ndarray:
        """Return values ordered as ``WHEEL_NAMES``.

        Returns:
            Array ``[front_left, front_right, rear_left, rear_right]``.
        """
        return np.array(
            [self.front_left, self.front_right, self.rear_left, self.rear_right],
            dtype=float,
        )


@dataclass
class Loads:
    """Tire normal loads and tire forces of all four wheels.

    Args:
        normal: Wheel normal loads [N].
        longitudinal: Committed longitudinal tire forces [N].
        lateral: Lateral tire forces [N].
    """

    normal: WheelValues = field(default_factory=WheelValues)
    longitudinal: WheelValues = field(default_factory=WheelValues)
    lateral: WheelValues = field(default_factory=WheelValues)


@dataclass
class VehicleState:
    """Complete mutable state of one simulated vehicle."""

    position: Position = field(default_factory=Position)
    dynamics: Dynamics = field(default_factory=Dynamics)
    loads: Loads = field(default_factory=Loads)

    def copy(self) -> VehicleState:
        """Return an independently owned copy of this state."""
        return copy.deepcopy(self)


def initialize_state(params: VehicleParameters) -> VehicleState:
    """Build the default initial state.

    The vehicle starts at the origin heading along ``+x`` at unit speed, on a
    path of curvature ``pi / 4``, with a 100 N placeholder load on every wheel
    and no committed tire forces.

    Args:
        params: Parameter set supplying the model constants.

    Returns:
        Fresh vehicle state.
    """
    normal = WheelValues(
        front_left=DEFAULT_WHEEL_NORMAL_LOAD,
        front_right=DEFAULT_WHEEL_NORMAL_LOAD,
        rear_left=DEFAULT_WHEEL_NORMAL_LOAD,
        rear_right=DEFAULT_WHEEL_NORMAL_LOAD,
    )
    return VehicleState(
        position=Position(curvature=DEFAULT_CURVATURE_FRACTION_OF_PI * params.constants.pi),
        dynamics=Dynamics(v_long=DEFAULT_LONGITUDINAL_SPEED),
        loads=Loads(normal=normal),
    )
