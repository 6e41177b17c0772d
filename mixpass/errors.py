"""
Exceptions raised by the MixPass generator.
"""

from __future__ import annotations


class MixPassError(Exception):
    """Base class for all MixPass errors."""


class InvalidLengthError(MixPassError, ValueError):
    """Requested password length is negative or not an integer."""


class RandomSourceError(MixPassError, ValueError):
    """A random source produced an unusable value or ran out of values."""


class ConfigError(MixPassError, ValueError):
    """Generator configuration is inconsistent or unsupported."""
