"""Diagnostics for generated setups."""

from .histograms import Histogram, SetupHistograms, setup_histograms

__all__ = ["Histogram", "SetupHistograms", "setup_histograms"]
