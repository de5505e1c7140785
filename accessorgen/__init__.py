"""Accessor generation for Go struct declarations."""

__version__ = "1.0.6"

__all__ = ["__version__"]
