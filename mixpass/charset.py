"""
Character classes: each class owns a fixed alphabet and knows how to draw
one character from it with a supplied random source.
"""

from __future__ import annotations

from enum import Enum
from typing import Iterable, Tuple

from .entropy import RandomSource, uniform_index

LOWERCASE_ALPHABET = "abcdefghijklmnopqrstuvwxyz"
UPPERCASE_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
DIGIT_ALPHABET = "0123456789"
SYMBOL_ALPHABET = "!@#$%^&*(){}[]=<>/,."


class CharacterClass(Enum):
    LOWERCASE = "lower"
    UPPERCASE = "upper"
    DIGIT = "number"
    SYMBOL = "symbol"

    @property
    def alphabet(self) -> str:
        return _ALPHABETS[self]

    def draw(self, source: RandomSource) -> str:
        """
        Pick one character uniformly from this class's alphabet.
        """
        alphabet = self.alphabet
        return alphabet[uniform_index(source, len(alphabet))]

    def __contains__(self, ch: object) -> bool:
        return isinstance(ch, str) and len(ch) == 1 and ch in self.alphabet


_ALPHABETS = {
    CharacterClass.LOWERCASE: LOWERCASE_ALPHABET,
    CharacterClass.UPPERCASE: UPPERCASE_ALPHABET,
    CharacterClass.DIGIT: DIGIT_ALPHABET,
    CharacterClass.SYMBOL: SYMBOL_ALPHABET,
}

# Order in which the four toggles are read.
CANONICAL_ORDER: Tuple[CharacterClass, ...] = (
    CharacterClass.LOWERCASE,
    CharacterClass.UPPERCASE,
    CharacterClass.DIGIT,
    CharacterClass.SYMBOL,
)


def classes_from_flags(
    lower: bool,
    upper: bool,
    number: bool,
    symbol: bool,
) -> Tuple[CharacterClass, ...]:
    """
    Turn the four boolean toggles into an ordered tuple of enabled classes.
    """
    flags = (lower, upper, number, symbol)
    return tuple(cls for cls, on in zip(CANONICAL_ORDER, flags) if on)


def ordered_classes(classes: Iterable[CharacterClass]) -> Tuple[CharacterClass, ...]:
    """
    Normalize the caller's classes into the fill order.

    Unordered collections (set / frozenset) follow CANONICAL_ORDER.
    Sequences keep the caller's order; repeats are dropped.
    """
    seen: list[CharacterClass] = []
    for cls in classes:
        if not isinstance(cls, CharacterClass):
            raise TypeError(f"Expected CharacterClass, got {cls!r}")
        if cls not in seen:
            seen.append(cls)

    if isinstance(classes, (set, frozenset)):
        return tuple(cls for cls in CANONICAL_ORDER if cls in seen)
    return tuple(seen)
