"""Screens and parts of Escape from Biringan City, a pygame visual novel."""

__version__ = "0.1.0"