"""Stores shared across pipeline stages."""

from .resolution_cache import ResolutionCache

__all__ = ["ResolutionCache"]
