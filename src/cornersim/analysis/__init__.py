"""Analysis utilities."""

from cornersim.analysis.envelope import CorneringEnvelope, compute_cornering_envelope

__all__ = ["CorneringEnvelope", "compute_cornering_envelope"]
