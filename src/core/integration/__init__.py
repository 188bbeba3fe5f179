"""
Fixed-step numerical integrators.
"""

from src.core.integration.integration2d import euler, rk2

__all__ = [
    "euler",
    "rk2",
]
