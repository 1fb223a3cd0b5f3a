"""User-facing text for standings."""

from .formatting import (
    NOT_APPLICABLE,
    format_count,
    format_points_cell,
    format_population_ratio,
    format_weight_label,
)

__all__ = [
    "NOT_APPLICABLE",
    "format_count",
    "format_points_cell",
    "format_population_ratio",
    "format_weight_label",
]
