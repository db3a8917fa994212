"""Unit tests for vehicle state defaults and copies."""

from __future__ import annotations

import math
import unittest

import numpy as np

from cornersim.vehicle.state import WHEEL_NAMES, WheelValues, initialize_state
from tests.helpers import sample_vehicle_parameters


class VehicleStateTests(unittest.TestCase):
    """State construction checks."""

    def test_initial_state_defaults(self) -> None:
        """Start at the origin with unit forward speed and 100 N wheel loads."""
        state = initialize_state(sample_vehicle_parameters())
        self.assertEqual((state.position.x, state.position.y), (0.0, 0.0))
        self.assertEqual(state.position.yaw, 0.0)
        self.assertEqual(state.position.time, 0.0)
        self.assertAlmostEqual(state.position.curvature, math.pi / 4.0, delta=1e-12)
        self.assertEqual(state.dynamics.v_long, 1.0)
        self.assertEqual(state.dynamics.v_lat, 0.0)
        self.assertEqual(state.dynamics.yaw_rate, 0.0)
        self.assertEqual(state.dynamics.roll_angle, 0.0)
        self.assertEqual(state.dynamics.roll_rate, 0.0)
        np.testing.assert_array_equal(state.loads.normal.as_array(), np.full(4, 100.0))
        np.testing.assert_array_equal(state.loads.longitudinal.as_array(), np.zeros(4))
        np.testing.assert_array_equal(state.loads.lateral.as_array(), np.zeros(4))

    def test_wheel_values_array_order(self) -> None:
        """Order wheel arrays front-left, front-right, rear-left, rear-right."""
        values = WheelValues(front_left=1.0, front_right=2.0, rear_left=3.0, rear_right=4.0)
        np.testing.assert_array_equal(values.as_array(), np.array([1.0, 2.0, 3.0, 4.0]))
        self.assertEqual(WHEEL_NAMES, ("front_left", "front_right", "rear_left", "rear_right"))

    def test_copy_is_independent(self) -> None:
        """Mutating a copied state leaves the original untouched."""
        state = initialize_state(sample_vehicle_parameters())
        clone = state.copy()
        clone.position.x = 5.0
        clone.loads.normal.front_left = 0.0
        self.assertEqual(state.position.x, 0.0)
        self.assertEqual(state.loads.normal.front_left, 100.0)
        self.assertEqual(clone.dynamics, state.dynamics)


if __name__ == "__main__":
    unittest.main()
