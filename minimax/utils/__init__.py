"""Utility methods used throughout the library."""

from . import pylogging


__all__ = ["pylogging"]
