"""Deterministic turn-based simulation core for a grid roguelike."""

__version__ = "0.1.0"

__all__ = ["__version__"]
