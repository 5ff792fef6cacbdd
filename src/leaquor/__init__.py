"""Leaquor — find leaked credentials in a checkout before they ship."""

__version__ = "0.3.0"
