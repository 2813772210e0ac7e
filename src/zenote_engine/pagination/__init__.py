"""Multi-page export pagination."""

from .paginator import (
    LAYOUT_CAPACITY,
    WEIGHT_PRESETS,
    PageLayout,
    WeightPreset,
    line_weight,
    paginate,
)

__all__ = [
    "PageLayout",
    "WeightPreset",
    "WEIGHT_PRESETS",
    "LAYOUT_CAPACITY",
    "line_weight",
    "paginate",
]
