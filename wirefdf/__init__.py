"""Wireframe rendering of .fdf height maps into in-memory images, with XPM reading and printf-style formatting."""

__version__ = "0.1.0"