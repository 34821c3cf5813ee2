"""Chord chart transposition, Nashville numbers and chord diagrams."""

__version__ = "0.1.0"
