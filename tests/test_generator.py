"""Tests for the round-robin / truncate / shuffle generator."""

import itertools
import random

import pytest

from mixpass.charset import CharacterClass
from mixpass.entropy import FixedSequenceSource, SystemRandomSource
from mixpass.errors import InvalidLengthError, RandomSourceError
from mixpass.generator import (
    fill_round_robin,
    generate,
    generate_with_meta,
    shuffle_chars,
)

LOWER = CharacterClass.LOWERCASE
UPPER = CharacterClass.UPPERCASE
DIGIT = CharacterClass.DIGIT
SYMBOL = CharacterClass.SYMBOL

ALL_COMBOS = [
    frozenset(combo)
    for k in range(1, 5)
    for combo in itertools.combinations(CharacterClass, k)
]


@pytest.mark.parametrize("length", [0, 1, 10, 64])
def test_no_classes_gives_empty_password(length):
    assert generate(set(), length, SystemRandomSource(1)) == ""


@pytest.mark.parametrize("classes", ALL_COMBOS)
def test_zero_length_gives_empty_password(classes):
    source = FixedSequenceSource([0.3])
    assert generate(classes, 0, source) == ""
    assert source.calls == 0


@pytest.mark.parametrize("classes", ALL_COMBOS)
@pytest.mark.parametrize("extra", [0, 3, 37])
def test_every_enabled_class_present(classes, extra):
    length = len(classes) + extra
    pw = generate(classes, length, SystemRandomSource(len(classes) * 100 + extra))

    assert len(pw) == length
    for cls in classes:
        assert any(ch in cls for ch in pw), cls

    union = "".join(cls.alphabet for cls in classes)
    assert all(ch in union for ch in pw)


def test_lowercase_and_digits_example():
    pw = generate({LOWER, DIGIT}, 10, SystemRandomSource(2024))

    assert len(pw) == 10
    assert any(ch.islower() for ch in pw)
    assert any(ch.isdigit() for ch in pw)
    assert all(ch.islower() or ch.isdigit() for ch in pw)


def test_uppercase_with_zero_source_is_all_a():
    assert generate({UPPER}, 5, FixedSequenceSource([0.0])) == "AAAAA"


def test_accepts_plain_callable_source():
    assert generate({UPPER}, 5, lambda: 0.0) == "AAAAA"

    rng = random.Random(9)
    pw = generate({LOWER, SYMBOL}, 8, rng.random)
    assert len(pw) == 8


def test_known_sequence_gives_known_password():
    # fill: a, 0, n, 9 (whole cycle), truncate to "a0n", shuffle i=2 j=0, i=1 j=0
    source = FixedSequenceSource([0.0, 0.0, 0.5, 0.9, 0.0, 0.0], cycle=False)

    result = generate_with_meta([LOWER, DIGIT], 3, source)

    assert result.raw_buffer == "a0n9"
    assert result.truncated_buffer == "a0n"
    assert result.password == "0na"
    assert result.fill_draws == 4
    assert result.shuffle_draws == 2
    assert source.calls == 6


def test_same_source_sequence_same_password():
    classes = {LOWER, UPPER, DIGIT, SYMBOL}
    first = generate(classes, 24, SystemRandomSource(42))
    second = generate(classes, 24, SystemRandomSource(42))
    assert first == second

    values = [0.11, 0.52, 0.93, 0.27, 0.68]
    assert generate(classes, 9, FixedSequenceSource(values)) == generate(
        classes, 9, FixedSequenceSource(values)
    )


def test_short_length_keeps_first_classes_only():
    result = generate_with_meta({SYMBOL, DIGIT, UPPER, LOWER}, 2, SystemRandomSource(5))

    assert result.classes == (LOWER, UPPER, DIGIT, SYMBOL)
    assert len(result.raw_buffer) == 4
    assert sum(ch in LOWER for ch in result.password) == 1
    assert sum(ch in UPPER for ch in result.password) == 1


def test_sequence_order_is_fill_order():
    assert generate([DIGIT, LOWER], 1, FixedSequenceSource([0.0])) == "0"
    assert generate({DIGIT, LOWER}, 1, FixedSequenceSource([0.0])) == "a"


def test_duplicate_classes_are_collapsed():
    result = generate_with_meta([UPPER, UPPER], 3, FixedSequenceSource([0.0]))

    assert result.password == "AAA"
    assert result.classes == (UPPER,)
    assert result.fill_draws == 3


@pytest.mark.parametrize("length", [-1, -20])
def test_negative_length_rejected(length):
    with pytest.raises(InvalidLengthError):
        generate({LOWER}, length, SystemRandomSource(0))
    with pytest.raises(ValueError):
        generate(set(), length, SystemRandomSource(0))


@pytest.mark.parametrize("length", [3.5, "5", None, True])
def test_non_integer_length_rejected(length):
    with pytest.raises(InvalidLengthError):
        generate({LOWER}, length, SystemRandomSource(0))


def test_out_of_range_source_value_rejected():
    with pytest.raises(RandomSourceError):
        generate({LOWER}, 4, lambda: 1.0)


def test_fill_draws_whole_cycles():
    source = FixedSequenceSource([0.0])
    buffer = fill_round_robin((LOWER, UPPER, DIGIT), 4, source)

    assert buffer == ["a", "A", "0", "a", "A", "0"]
    assert source.calls == 6


def test_fill_with_no_classes_is_empty():
    assert fill_round_robin((), 10, FixedSequenceSource([0.0])) == []


def test_shuffle_follows_fisher_yates_indices():
    # i=3 -> j=0, i=2 -> j=floor(0.5 * 3)=1, i=1 -> j=0
    chars = list("abcd")
    source = FixedSequenceSource([0.0, 0.5, 0.0], cycle=False)

    draws = shuffle_chars(chars, source)

    assert "".join(chars) == "cdba"
    assert draws == 3


def test_shuffle_with_top_values_keeps_order():
    # j == i at every step means no element moves
    chars = list("wxyz")
    shuffle_chars(chars, FixedSequenceSource([0.999]))
    assert "".join(chars) == "wxyz"


@pytest.mark.parametrize("length", [1, 2, 7, 30])
def test_shuffle_draw_count(length):
    result = generate_with_meta({LOWER, DIGIT}, length, SystemRandomSource(length))
    assert result.shuffle_draws == length - 1
    assert sorted(result.password) == sorted(result.truncated_buffer)


def test_shuffle_reaches_every_permutation():
    source = SystemRandomSource(0)
    seen = set()
    for _ in range(600):
        chars = list("abc")
        shuffle_chars(chars, source)
        seen.add("".join(chars))
    assert seen == {"".join(p) for p in itertools.permutations("abc")}
