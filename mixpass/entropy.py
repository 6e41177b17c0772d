"""
Random sources for the generator.

A random source is anything with a ``random()`` method returning a uniform
float in [0, 1). Three are provided:

- SystemRandomSource: Python's Mersenne Twister, optionally seeded.
- FixedSequenceSource: replays a fixed list of values (tests, demos).
- QuantumRandomSource: bits measured from a superposition circuit, XOR-mixed
  across streams and amplified with SHA-256.
"""

from __future__ import annotations

import hashlib
import itertools
import logging
import random
from typing import TYPE_CHECKING, Callable, Iterator, List, Optional, Protocol, Sequence

from .errors import ConfigError, RandomSourceError

if TYPE_CHECKING:
    from .config import GeneratorConfig

logger = logging.getLogger(__name__)

# Bits consumed per float, same precision as random.random().
BITS_PER_FLOAT = 53


class RandomSource(Protocol):
    def random(self) -> float:
        ...


class _CallableSource:
    """Adapt a bare ``() -> float`` function to the RandomSource shape."""

    def __init__(self, func: Callable[[], float]) -> None:
        self._func = func

    def random(self) -> float:
        return self._func()


def as_random_source(source: object) -> RandomSource:
    """
    Accept either a RandomSource or a zero-argument callable.
    """
    if callable(getattr(source, "random", None)):
        return source  # type: ignore[return-value]
    if callable(source):
        return _CallableSource(source)  # type: ignore[arg-type]
    raise TypeError(
        f"Random source must have a random() method or be callable, got {source!r}"
    )


def uniform_index(source: RandomSource, n: int) -> int:
    """
    Draw an index uniformly from range(n) using one value from `source`.
    """
    if n <= 0:
        raise ValueError(f"n must be positive, got {n}")

    value = source.random()
    if not 0.0 <= value < 1.0:
        raise RandomSourceError(f"Random source returned {value!r}, expected [0, 1).")

    # value * n can round up to n for values just below 1.0
    return min(int(value * n), n - 1)


# ---------- concrete sources ----------


class SystemRandomSource:
    """
    Pseudo-random source backed by ``random.Random``.

    Pass a seed for reproducible output. Not suitable where cryptographic
    strength is required.
    """

    def __init__(self, seed: Optional[int] = None) -> None:
        self.seed = seed
        self._rng = random.Random(seed)

    def random(self) -> float:
        return self._rng.random()


class FixedSequenceSource:
    """
    Replay a fixed sequence of floats. Counts every draw in ``calls``.
    """

    def __init__(self, values: Sequence[float], cycle: bool = True) -> None:
        if not values:
            raise RandomSourceError("FixedSequenceSource needs at least one value.")
        self.values = list(values)
        self.cycle = cycle
        self.calls = 0
        self._it: Iterator[float] = (
            itertools.cycle(self.values) if cycle else iter(self.values)
        )

    def random(self) -> float:
        try:
            value = next(self._it)
        except StopIteration:
            raise RandomSourceError(
                f"Fixed sequence exhausted after {self.calls} draws."
            ) from None
        self.calls += 1
        return value


# ---------- bit helpers ----------


def bits_to_bytes(bits: List[int]) -> bytes:
    """
    Pack bits (MSB first) into bytes, zero-padding the last byte.
    """
    if not bits:
        return b""

    pad_len = (8 - (len(bits) % 8)) % 8
    bits_padded = bits + [0] * pad_len

    byte_values = []
    for i in range(0, len(bits_padded), 8):
        byte = 0
        for bit in bits_padded[i : i + 8]:
            byte = (byte << 1) | bit
        byte_values.append(byte)

    return bytes(byte_values)


def bytes_to_bits(data: bytes) -> List[int]:
    out_bits: List[int] = []
    for byte in data:
        for i in range(8):
            out_bits.append((byte >> (7 - i)) & 1)
    return out_bits


def amplify_entropy(bits: List[int], rounds: int = 1) -> List[int]:
    """
    Hash the bitstream with SHA-256 `rounds` times.

    rounds <= 0 returns the input unchanged; otherwise the output is always
    256 bits.
    """
    if rounds <= 0:
        return bits

    data = bits_to_bytes(bits)
    for _ in range(rounds):
        data = hashlib.sha256(data).digest()

    return bytes_to_bits(data)


def bits_to_unit_float(bits: Sequence[int]) -> float:
    """
    Interpret exactly BITS_PER_FLOAT bits as a float in [0, 1).
    """
    if len(bits) != BITS_PER_FLOAT:
        raise ValueError(f"Need {BITS_PER_FLOAT} bits, got {len(bits)}")
    value = 0
    for bit in bits:
        value = (value << 1) | bit
    return value / (1 << BITS_PER_FLOAT)


# ---------- quantum source ----------


class QuantumRandomSource:
    """
    Random source fed by a quantum circuit.

    Every refill runs the engine once per stream, XORs the streams bit by
    bit, amplifies the result and appends it to a bit pool. Each call to
    random() consumes BITS_PER_FLOAT bits from the pool.

    `engine` only needs a ``get_raw_bits() -> list[int]`` method; the
    default is a QuantumEngine built from `config`.
    """

    def __init__(
        self,
        config: "GeneratorConfig | None" = None,
        engine: object | None = None,
    ) -> None:
        from .config import DEFAULT_CONFIG

        self.config = config or DEFAULT_CONFIG
        if self.config.quantum_streams < 1:
            raise ConfigError("quantum_streams must be at least 1.")

        if engine is None:
            from .quantum_engine import QuantumEngine  # pulls in qiskit

            engine = QuantumEngine(self.config)
        self.engine = engine

        self._pool: List[int] = []
        self.blocks_sampled = 0

    def _sample_block(self) -> List[int]:
        combined: List[int] | None = None

        for _ in range(self.config.quantum_streams):
            bits = list(self.engine.get_raw_bits())  # type: ignore[attr-defined]
            if combined is None:
                combined = bits
            else:
                if len(bits) != len(combined):
                    raise RandomSourceError(
                        "Quantum streams produced different bit-lengths "
                        f"({len(bits)} vs {len(combined)})."
                    )
                combined = [b ^ c for b, c in zip(bits, combined)]

        if not combined:
            raise RandomSourceError("Quantum engine returned no bits.")

        self.blocks_sampled += 1
        return amplify_entropy(combined, self.config.entropy_rounds)

    def random(self) -> float:
        while len(self._pool) < BITS_PER_FLOAT:
            self._pool.extend(self._sample_block())
            logger.debug(
                "Quantum pool refilled: %d bits after %d blocks",
                len(self._pool),
                self.blocks_sampled,
            )

        chunk = self._pool[:BITS_PER_FLOAT]
        del self._pool[:BITS_PER_FLOAT]
        return bits_to_unit_float(chunk)


SOURCE_KINDS = ("system", "quantum")


def source_from_config(config: "GeneratorConfig") -> RandomSource:
    """
    Build the random source named by ``config.source``.
    """
    kind = config.source
    if kind == "system":
        return SystemRandomSource(config.seed)
    if kind == "quantum":
        if config.seed is not None:
            logger.warning("Seed %r ignored: quantum source cannot be seeded", config.seed)
        return QuantumRandomSource(config)
    raise ConfigError(
        f"Unknown random source {kind!r}; expected one of {', '.join(SOURCE_KINDS)}."
    )
