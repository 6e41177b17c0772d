"""
Core password generation.

Three stages, each exposed on its own:

1. fill_round_robin: cycle through the enabled classes drawing one
   character per class per cycle until the buffer reaches the target length.
2. truncate to exactly `length` characters.
3. shuffle_chars: Fisher-Yates, so class order leaves no positional trace.

When length < number of enabled classes, only the first `length` classes
(in fill order) make it into the password.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, List, Tuple

from .charset import CharacterClass, ordered_classes
from .entropy import RandomSource, as_random_source, uniform_index
from .errors import InvalidLengthError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GenerationResult:
    """
    Full result of one generation, for inspection and tests.
    """

    password: str

    # Round-robin buffer before and after truncation
    raw_buffer: str
    truncated_buffer: str

    classes: Tuple[CharacterClass, ...]

    # Draws spent on filling and on shuffling
    fill_draws: int
    shuffle_draws: int


def check_length(length: object) -> int:
    if isinstance(length, bool) or not isinstance(length, int):
        raise InvalidLengthError(f"length must be an integer, got {length!r}")
    if length < 0:
        raise InvalidLengthError(f"length must be >= 0, got {length}")
    return length


def fill_round_robin(
    classes: Tuple[CharacterClass, ...],
    length: int,
    source: RandomSource,
) -> List[str]:
    """
    Draw whole cycles over `classes` until at least `length` characters exist.
    """
    buffer: List[str] = []
    if not classes:
        return buffer

    while len(buffer) < length:
        for cls in classes:
            buffer.append(cls.draw(source))
    return buffer


def shuffle_chars(chars: List[str], source: RandomSource) -> int:
    """
    Fisher-Yates shuffle of `chars` in place. Returns the number of draws.
    """
    draws = 0
    for i in range(len(chars) - 1, 0, -1):
        j = uniform_index(source, i + 1)
        chars[i], chars[j] = chars[j], chars[i]
        draws += 1
    return draws


def generate_with_meta(
    enabled_classes: Iterable[CharacterClass],
    length: int,
    random_source: object,
) -> GenerationResult:
    length = check_length(length)
    source = as_random_source(random_source)
    classes = ordered_classes(enabled_classes)

    if not classes:
        logger.debug("No character classes enabled; returning empty password")
        return GenerationResult(
            password="",
            raw_buffer="",
            truncated_buffer="",
            classes=classes,
            fill_draws=0,
            shuffle_draws=0,
        )

    raw = fill_round_robin(classes, length, source)
    chars = raw[:length]
    truncated = "".join(chars)
    shuffle_draws = shuffle_chars(chars, source)

    logger.debug(
        "Generated %d chars from %d classes (%d fill draws, %d shuffle draws)",
        length,
        len(classes),
        len(raw),
        shuffle_draws,
    )

    return GenerationResult(
        password="".join(chars),
        raw_buffer="".join(raw),
        truncated_buffer=truncated,
        classes=classes,
        fill_draws=len(raw),
        shuffle_draws=shuffle_draws,
    )


def generate(
    enabled_classes: Iterable[CharacterClass],
    length: int,
    random_source: object,
) -> str:
    """
    Generate a password of exactly `length` characters.

    Args:
        enabled_classes: classes to mix in. A set is walked in canonical
            order (lower, upper, digit, symbol); a sequence in its own order.
            Empty yields "".
        length: non-negative integer.
        random_source: object with ``random() -> float`` in [0, 1), or a
            zero-argument callable returning such a float.

    Raises:
        InvalidLengthError: length is negative or not an int.
    """
    return generate_with_meta(enabled_classes, length, random_source).password
