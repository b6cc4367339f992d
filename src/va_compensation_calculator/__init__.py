"""Console calculator for combined VA disability ratings and sample pay."""

__version__ = "0.1.0"
