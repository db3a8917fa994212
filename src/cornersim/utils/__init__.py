"""Utility helpers."""

from cornersim.utils.constants import GRAVITY, INFINITE_SPEED
from cornersim.utils.logging import configure_logging

__all__ = ["GRAVITY", "INFINITE_SPEED", "configure_logging"]
