"""Number theory, base conversions, statistics, matrix and arithmetic routines, with a small command."""

__version__ = "0.1.0"