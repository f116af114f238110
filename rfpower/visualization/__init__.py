"""Plotly figures for the browser view."""

from .plotly_viz import plot_power_curve, power_curve
