"""Calorie-balance weight projection and progress tracking."""

__version__ = "0.1.0"
