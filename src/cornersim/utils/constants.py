"""Physical and numerical constants used across the library."""

GRAVITY: float = 9.81
INFINITE_SPEED: float = 99999.0
