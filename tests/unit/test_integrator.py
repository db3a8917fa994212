"""Unit tests for explicit position integration."""

from __future__ import annotations

import math
import unittest
from dataclasses import replace

import numpy as np

from cornersim.simulation.integrator import advance, position_rates
from cornersim.vehicle.params import SolverParameters
from tests.helpers import sample_vehicle_parameters, sample_vehicle_state


class IntegratorTests(unittest.TestCase):
    """Euler position update checks."""

    def test_straight_line_integration(self) -> None:
        """Move along the heading by ``n * dt * v`` without yaw or slip."""
        params = sample_vehicle_parameters()
        for heading in (0.0, 0.3, math.pi / 2.0, -2.1):
            with self.subTest(heading=heading):
                state = sample_vehicle_state(params)
                state.position.yaw = heading
                state.dynamics.v_long = 2.0
                steps = 50
                for _ in range(steps):
                    advance(state, params)
                distance = steps * params.solver.timestep * 2.0
                self.assertAlmostEqual(state.position.x, distance * math.cos(heading), delta=1e-9)
                self.assertAlmostEqual(state.position.y, distance * math.sin(heading), delta=1e-9)
                self.assertAlmostEqual(state.position.yaw, heading, delta=1e-15)
                self.assertAlmostEqual(state.position.time, steps * params.solver.timestep)

    def test_rotation_preserves_speed(self) -> None:
        """Keep global speed equal to body-frame speed for any heading."""
        state = sample_vehicle_state(sample_vehicle_parameters())
        state.dynamics.v_long = 3.0
        state.dynamics.v_lat = -1.2
        expected = math.hypot(3.0, -1.2)
        for heading in np.linspace(-math.pi, math.pi, 13):
            state.position.yaw = float(heading)
            x_dot, y_dot = position_rates(state)
            self.assertAlmostEqual(math.hypot(x_dot, y_dot), expected, delta=1e-12)

    def test_lateral_velocity_moves_left_of_heading(self) -> None:
        """Map positive body lateral velocity to global ``+y`` at zero heading."""
        state = sample_vehicle_state(sample_vehicle_parameters())
        state.dynamics.v_long = 0.0
        state.dynamics.v_lat = 1.0
        x_dot, y_dot = position_rates(state)
        self.assertAlmostEqual(x_dot, 0.0, delta=1e-15)
        self.assertAlmostEqual(y_dot, 1.0, delta=1e-15)

    def test_yaw_rate_and_timestep(self) -> None:
        """Integrate heading with the configured timestep."""
        params = replace(sample_vehicle_parameters(), solver=SolverParameters(timestep=0.05))
        state = sample_vehicle_state(params)
        state.dynamics.yaw_rate = 0.4
        advance(state, params)
        advance(state, params)
        self.assertAlmostEqual(state.position.yaw, 0.04, delta=1e-12)
        self.assertAlmostEqual(state.position.time, 0.1, delta=1e-12)

    def test_advance_leaves_curvature_and_dynamics_untouched(self) -> None:
        """Only update position, heading and time."""
        params = sample_vehicle_parameters()
        state = sample_vehicle_state(params)
        state.dynamics.yaw_rate = 0.2
        curvature = state.position.curvature
        dynamics = replace(state.dynamics)
        loads = state.copy().loads
        advance(state, params)
        self.assertEqual(state.position.curvature, curvature)
        self.assertEqual(state.dynamics, dynamics)
        self.assertEqual(state.loads, loads)


if __name__ == "__main__":
    unittest.main()
