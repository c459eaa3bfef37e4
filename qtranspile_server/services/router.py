"""Connectivity routing.

Inserts a ``swap`` placeholder in front of every two-qubit gate whose qubit
pair is not a coupling edge of the backend. The qubit permutation implied by
the swap is not tracked: later gates keep their original indices.
"""

import logging
from typing import List

from ..models import BackendSpec, Circuit, Gate

logger = logging.getLogger(__name__)


class SimpleRouter:
    """Single forward pass, no backtracking."""

    SWAP = "swap"

    def route(self, circuit: Circuit, backend: BackendSpec) -> Circuit:
        edges = backend.edge_set()
        out: List[Gate] = []

        for gate in circuit.gates:
            if len(gate.qubits) == 2 and gate.qubits not in edges:
                logger.debug(
                    "No %s edge for %s on %s, inserting swap",
                    backend.name, gate.name, gate.qubits,
                )
                out.append(Gate(name=self.SWAP, qubits=gate.qubits))
            out.append(gate)

        return circuit.with_gates(out)
