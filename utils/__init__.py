"""Plotting and timing helpers for simulation runs."""

from .utils import plot_q_values, plot_selection_share

__all__ = ["plot_q_values", "plot_selection_share"]
