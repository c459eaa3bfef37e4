"""Local rewrite passes applied after routing.

Each pass maps a circuit to a new circuit without touching its input. The
transpiler applies them in list order, and the order matters: merging
rotations before cancelling can give a different circuit than the reverse.
"""

import logging
from abc import ABC, abstractmethod
from typing import List

from ..models import Circuit, Gate

logger = logging.getLogger(__name__)

ROTATION_EPSILON = 1e-10


class OptimizationPass(ABC):
    """Base class for circuit optimization passes."""

    @property
    def name(self) -> str:
        return self.__class__.__name__

    @abstractmethod
    def optimize(self, circuit: Circuit) -> Circuit:
        """Return a new, optimized circuit built from ``circuit``."""
        ...

    def __call__(self, circuit: Circuit) -> Circuit:
        result = self.optimize(circuit)
        removed = len(circuit.gates) - len(result.gates)
        if removed:
            logger.debug("%s removed %d gate(s)", self.name, removed)
        return result


class GateCancellationPass(OptimizationPass):
    """Drop adjacent pairs of identical gates (x x, h h, cx cx on the same qubits).

    Purely positional: only literally adjacent gates with the same name and
    the same ordered qubits cancel. Scanning resumes after a cancelled pair.
    Parametrized gates are left to :class:`RotationMergingPass`.
    """

    @staticmethod
    def _cancels(g1: Gate, g2: Gate) -> bool:
        return not (g1.params or g2.params) and g1.name == g2.name and g1.qubits == g2.qubits

    def optimize(self, circuit: Circuit) -> Circuit:
        gates = circuit.gates
        out: List[Gate] = []
        i = 0
        while i < len(gates):
            if i + 1 < len(gates) and self._cancels(gates[i], gates[i + 1]):
                i += 2
                continue
            out.append(gates[i])
            i += 1
        return circuit.with_gates(out)


class RotationMergingPass(OptimizationPass):
    """Merge contiguous ``rz`` rotations on the same qubit into one.

    A run whose summed angle is within ``epsilon`` of zero is dropped. Any
    other gate breaks a run, even one acting on an unrelated qubit.
    """

    def __init__(self, epsilon: float = ROTATION_EPSILON):
        self.epsilon = epsilon

    @staticmethod
    def _is_rz(gate: Gate) -> bool:
        return gate.name == "rz" and len(gate.qubits) == 1 and bool(gate.params)

    def optimize(self, circuit: Circuit) -> Circuit:
        gates = circuit.gates
        out: List[Gate] = []
        i = 0
        while i < len(gates):
            gate = gates[i]
            if not self._is_rz(gate):
                out.append(gate)
                i += 1
                continue

            angle = gate.params[0]
            j = i + 1
            while j < len(gates) and self._is_rz(gates[j]) and gates[j].qubits == gate.qubits:
                angle += gates[j].params[0]
                j += 1

            if abs(angle) > self.epsilon:
                out.append(Gate(name="rz", qubits=gate.qubits, params=(angle,)))
            i = j
        return circuit.with_gates(out)


def default_passes() -> List[OptimizationPass]:
    """Cancellation first, then rotation merging."""
    return [GateCancellationPass(), RotationMergingPass()]
