"""Diagnostic fault manager parts: operation cycles, enabling conditions, catalogs, DTC status, fault codes and timestamps."""

__version__ = "0.0.1"