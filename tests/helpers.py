"""Shared test helpers."""

from __future__ import annotations

from cornersim.vehicle.params import VehicleParameters, initialize_parameters
from cornersim.vehicle.state import VehicleState, WheelValues, initialize_state


def sample_vehicle_parameters() -> VehicleParameters:
    """Create the default small-vehicle parameter set.

    Returns:
        Vehicle parameter set used by unit and integration tests.
    """
    return initialize_parameters()


def sample_vehicle_state(params: VehicleParameters) -> VehicleState:
    """Create the default state with 100 N on every wheel and no tire forces.

    Args:
        params: Parameter set supplying the default curvature.

    Returns:
        Fresh vehicle state.
    """
    return initialize_state(params)


def uniform_wheel_values(value: float) -> WheelValues:
    """Return the same value on all four wheels.

    Args:
        value: Per-wheel value.

    Returns:
        Wheel value record.
    """
    return WheelValues(front_left=value, front_right=value, rear_left=value, rear_right=value)
