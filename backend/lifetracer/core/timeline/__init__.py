"""
Timeline layout engine.

Pure functions from (events, categories, view settings) to view models.
"""
from lifetracer.core.timeline.bands import layout_global, partition_years, position_percent
from lifetracer.core.timeline.columns import layout_columns, visible_events
from lifetracer.core.timeline.linear import layout_linear, vertical_offset

__all__ = [
    "layout_linear",
    "layout_global",
    "layout_columns",
    "visible_events",
    "vertical_offset",
    "partition_years",
    "position_percent",
]
