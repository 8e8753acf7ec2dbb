"""Animated cartoon avatar faces drawn into Pillow images."""

__version__ = "0.1.0"