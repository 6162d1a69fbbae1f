"""Utility modules for streaming input and iterator helpers."""

from .iter_ext import max_values, max_values_by
from .loader import iter_records, iter_values, parse_value

__all__ = [
    "max_values",
    "max_values_by",
    "iter_records",
    "iter_values",
    "parse_value",
]
