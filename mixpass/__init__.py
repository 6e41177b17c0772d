"""
MixPass password generator package.
"""

from .charset import CharacterClass, classes_from_flags
from .config import GeneratorConfig, DEFAULT_CONFIG
from .entropy import FixedSequenceSource, SystemRandomSource
from .errors import InvalidLengthError, MixPassError
from .generator import generate, generate_with_meta
from .cli import generate_password

__all__ = [
    "CharacterClass",
    "classes_from_flags",
    "GeneratorConfig",
    "DEFAULT_CONFIG",
    "FixedSequenceSource",
    "SystemRandomSource",
    "InvalidLengthError",
    "MixPassError",
    "generate",
    "generate_with_meta",
    "generate_password",
]
