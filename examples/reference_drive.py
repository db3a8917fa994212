"""Drive a short straight run and report the cornering speed limit."""

from __future__ import annotations

import logging
import math

from cornersim import initialize_parameters, initialize_state, simulate_drive
from cornersim.analysis import compute_cornering_envelope
from cornersim.utils import configure_logging

STEP_COUNT = 10


def main() -> None:
    """Run the reference drive and print trajectory samples."""
    configure_logging(logging.INFO)
    logger = logging.getLogger("reference_drive_example")

    params = initialize_parameters()
    state = initialize_state(params)
    state.position.yaw = 0.5 * math.pi
    state.dynamics.v_long = 1.0

    result = simulate_drive(state, params, STEP_COUNT)
    for line in result.trajectory_lines():
        print(line)
    print(f"{result.cornering_speed:f}")

    envelope = compute_cornering_envelope(
        state,
        params,
        longitudinal_accels=[-5.0, 0.0, 5.0],
        lateral_accels=[-10.0, 0.0, 10.0],
    )
    logger.info(
        "Cornering speed at curvature %.3f 1/m: %.3f m/s",
        state.position.curvature,
        result.cornering_speed,
    )
    logger.info(
        "Envelope min/max cornering speed: %.3f / %.3f m/s",
        float(envelope.speed.min()),
        float(envelope.speed.max()),
    )


if __name__ == "__main__":
    main()
