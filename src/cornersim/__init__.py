"""Quasi-static cornering capability model."""

from cornersim.simulation.integrator import advance
from cornersim.simulation.runner import DriveResult, simulate_drive
from cornersim.vehicle.cornering import max_cornering_speed
from cornersim.vehicle.load_transfer import apply_load_transfer
from cornersim.vehicle.params import VehicleParameters, initialize_parameters
from cornersim.vehicle.state import VehicleState, initialize_state

__all__ = [
    "DriveResult",
    "VehicleParameters",
    "VehicleState",
    "advance",
    "apply_load_transfer",
    "initialize_parameters",
    "initialize_state",
    "max_cornering_speed",
    "simulate_drive",
]
