"""
Life Tracer - Personal life timeline backend

Records life events ("souvenirs") into user-defined categories and lays
them out on two timelines:

- Linear view: one vertical column per category, zoomable in pixels-per-year
- Global view: every event folded into 25-year bands, serpentine order
"""

__version__ = "0.1.0"
