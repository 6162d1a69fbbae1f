"""Data models for bounded top-N selection."""

from .max_values import MaxValues
from .ranked import RankedItem

__all__ = [
    "MaxValues",
    "RankedItem",
]
