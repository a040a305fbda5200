"""Bit-packed readers, replay details, filters, file discovery and selection helpers for StarCraft II replay data."""

__version__ = "0.1.0"