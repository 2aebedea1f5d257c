"""
Common infrastructure shared by the bolt analyzers and the limit-state checks.
"""

from .log import configure_logging

ZERO_TOLERANCE = 1e-12

__all__ = [
    "ZERO_TOLERANCE",
    "configure_logging",
]
