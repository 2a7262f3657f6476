"""
Force-directed layout engines.

This module provides the interactive force-directed layout:
- EadesLayout: Logarithmic springs, inverse-square repulsion and wall forces
  with damped velocity integration
"""

from .eades import EadesLayout

__all__ = [
    "EadesLayout",
]
