"""Sellaporter - time-aware sales pages."""

__version__ = "0.1.0"
