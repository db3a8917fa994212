"""Position integration and driving loop."""

from cornersim.simulation.integrator import advance, position_rates
from cornersim.simulation.runner import DriveResult, simulate_drive

__all__ = ["DriveResult", "advance", "position_rates", "simulate_drive"]
