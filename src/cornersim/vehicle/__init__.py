"""Vehicle parameters, state and quasi-static tire models."""

from cornersim.vehicle.cornering import LateralCapacity, lateral_capacity, max_cornering_speed
from cornersim.vehicle.load_transfer import (
    NormalLoadState,
    apply_load_transfer,
    estimate_normal_loads,
)
from cornersim.vehicle.params import (
    EnvironmentParameters,
    GeometryParameters,
    InertialParameters,
    ModelConstants,
    RollParameters,
    SolverParameters,
    TireParameters,
    VehicleParameters,
    initialize_parameters,
)
from cornersim.vehicle.state import (
    WHEEL_NAMES,
    Dynamics,
    Loads,
    Position,
    VehicleState,
    WheelValues,
    initialize_state,
)

__all__ = [
    "WHEEL_NAMES",
    "Dynamics",
    "EnvironmentParameters",
    "GeometryParameters",
    "InertialParameters",
    "LateralCapacity",
    "Loads",
    "ModelConstants",
    "NormalLoadState",
    "Position",
    "RollParameters",
    "SolverParameters",
    "TireParameters",
    "VehicleParameters",
    "VehicleState",
    "WheelValues",
    "apply_load_transfer",
    "estimate_normal_loads",
    "initialize_parameters",
    "initialize_state",
    "lateral_capacity",
    "max_cornering_speed",
]
