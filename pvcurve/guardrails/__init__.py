"""
PVCURVE Guardrails Module.

Invariant checks run between shaping stages, so a broken sequence
fails loudly instead of producing a silently wrong curve.
"""

from pvcurve.guardrails.validators import (
    validate_dense,
    validate_ordering,
)

__all__ = [
    "validate_dense",
    "validate_ordering",
]
