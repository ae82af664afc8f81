"""Shobdo: Bengali word-origin checker."""

__version__ = "0.1.0"
