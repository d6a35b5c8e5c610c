"""Diagnostics package.

Plotting helpers for eyeballing split ranges. Requires the diagnostics extra (matplotlib).
"""

__all__ = ["axis_plot"]
