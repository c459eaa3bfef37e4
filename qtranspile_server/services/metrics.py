"""Gate-count and depth statistics over a :class:`Circuit`.

Depth keeps one clock per qubit: a gate starts at the latest clock among its
qubits and advances all of them by one step. Only qubits that gates actually
touch get a clock, so a large declared register costs nothing.
"""

from collections import defaultdict
from typing import Dict

from ..models import Circuit


def count_ops(circuit: Circuit) -> Dict[str, int]:
    """Count gate operations by name."""
    counts: Dict[str, int] = defaultdict(int)
    for gate in circuit.gates:
        counts[gate.name] += 1
    return dict(counts)


def gate_count(circuit: Circuit) -> int:
    return len(circuit.gates)


def depth(circuit: Circuit) -> int:
    """Critical-path length in gate steps.

    Gates sharing a qubit run one after another. Qubit indices outside the
    register count as time 0 and are not tracked.
    """
    # Clock per touched in-range qubit
    qubit_layer: Dict[int, int] = {}

    for gate in circuit.gates:
        in_range = [q for q in gate.qubits if q < circuit.num_qubits]
        start = max((qubit_layer.get(q, 0) for q in in_range), default=0)
        for q in in_range:
            qubit_layer[q] = start + 1

    return max(qubit_layer.values(), default=0)


def reduction(original: int, final: int) -> float:
    """Percentage reduction from ``original`` to ``final``.

    Never negative; 0.0 when ``original`` is 0.
    """
    if original == 0:
        return 0.0
    return max(original - final, 0) / original * 100.0
