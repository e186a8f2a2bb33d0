"""Diagnostics package.

Light-weight checks and tables run through ``calcopt diag`` / ``calcopt pretty-month``.
Plotting tools need the diagnostics extras: pip install "calcopt[diagnostics]"
"""

__all__ = ["pretty_month", "round_trip", "leap_years"]
