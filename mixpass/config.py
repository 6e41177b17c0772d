"""
Configuration for the MixPass generator.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from .charset import CharacterClass, classes_from_flags
from .errors import ConfigError, InvalidLengthError


@dataclass
class GeneratorConfig:
    # Desired password length in characters.
    length: int = 16

    # Character class toggles.
    lowercase: bool = True
    uppercase: bool = True
    digits: bool = True
    symbols: bool = True

    # "system" (seedable PRNG) or "quantum" (qiskit simulator).
    source: str = "system"
    seed: Optional[int] = None

    # Quantum source only.
    # NOTE: keep num_qubits <= the simulator limit (often 20-29 locally).
    num_qubits: int = 20
    entropy_rounds: int = 2
    quantum_streams: int = 2

    # GUI behaviour.
    auto_copy: bool = True
    clipboard_clear_ms: int = 15000

    def enabled_classes(self) -> Tuple[CharacterClass, ...]:
        return classes_from_flags(
            self.lowercase, self.uppercase, self.digits, self.symbols
        )

    def validate(self) -> None:
        """
        Raise if the configuration cannot drive a generation.
        """
        if isinstance(self.length, bool) or not isinstance(self.length, int):
            raise InvalidLengthError(f"length must be an integer, got {self.length!r}")
        if self.length < 0:
            raise InvalidLengthError(f"length must be >= 0, got {self.length}")
        if self.num_qubits < 1:
            raise ConfigError("num_qubits must be at least 1.")
        if self.quantum_streams < 1:
            raise ConfigError("quantum_streams must be at least 1.")
        if self.entropy_rounds < 0:
            raise ConfigError("entropy_rounds must be >= 0.")
        if self.clipboard_clear_ms < 0:
            raise ConfigError("clipboard_clear_ms must be >= 0.")


# Default configuration instance you can import elsewhere
DEFAULT_CONFIG = GeneratorConfig()
