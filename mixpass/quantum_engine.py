"""
Quantum engine: builds a circuit, puts qubits in superposition,
measures them in alternating bases, and returns raw bitstrings.
"""

from __future__ import annotations

import logging
from typing import List

from qiskit import QuantumCircuit, transpile
from qiskit_aer import AerSimulator

from .config import GeneratorConfig, DEFAULT_CONFIG
from .errors import ConfigError

logger = logging.getLogger(__name__)


def build_superposition_circuit(
    num_qubits: int,
    measure: bool = True,
) -> tuple[QuantumCircuit, list[str]]:
    """
    Put every qubit in an equal superposition of the basis it is measured in,
    alternating bases (Z, X, Z, X, ...).

    Z-measured qubits are prepared as |+>. X-measured qubits are prepared as
    |+i> (H then S), which is unbiased in X as well; |+> would always read 0.

    Returns the circuit and the basis used for each qubit. With
    measure=False the measurements are left off so the state can be inspected.
    """
    qc = QuantumCircuit(num_qubits, num_qubits)
    measurement_basis: list[str] = []

    for i in range(num_qubits):
        qc.h(i)
        if i % 2 == 1:
            qc.s(i)

    for i in range(num_qubits):
        if i % 2 == 1:
            # H rotates the X basis onto the computational basis
            measurement_basis.append("X")
            qc.h(i)
        else:
            measurement_basis.append("Z")
        if measure:
            qc.measure(i, i)

    return qc, measurement_basis


class QuantumEngine:
    """
    Runs the superposition circuit on a local Aer simulator, one shot per call.
    """

    def __init__(self, config: GeneratorConfig | None = None) -> None:
        self.config = config or DEFAULT_CONFIG
        self.backend = AerSimulator()

        self.last_measurement_basis: list[str] | None = None

        backend_cfg = self.backend.configuration()
        max_qubits = getattr(backend_cfg, "num_qubits", None)

        if max_qubits is not None and self.config.num_qubits > max_qubits:
            raise ConfigError(
                f"Configured num_qubits={self.config.num_qubits} exceeds "
                f"backend limit ({max_qubits})."
            )

        self._circuit, self._basis = build_superposition_circuit(self.config.num_qubits)
        self._compiled = transpile(self._circuit, self.backend)

    def get_raw_bits(self) -> List[int]:
        """
        Run the circuit once and return the measured bits, qubit 0 first.
        """
        result = self.backend.run(self._compiled, shots=1).result()
        counts = result.get_counts()

        # counts is a dict like {'0101...': 1}
        bitstring = next(iter(counts.keys()))

        # Qiskit orders bits as [q_(n-1) ... q_0]
        bitstring = bitstring[::-1]

        self.last_measurement_basis = self._basis
        logger.debug("Sampled %d raw bits", len(bitstring))
        return [int(b) for b in bitstring]
