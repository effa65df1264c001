"""
dataset/
--------
Core data layer.  Public API:

    from dataset import WorkingArray, Distribution
"""

from dataset.array import WorkingArray, Distribution, generate

__all__ = [
    "WorkingArray",
    "Distribution",
    "generate",
]
