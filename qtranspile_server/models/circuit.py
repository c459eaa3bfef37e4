"""Circuit, gate and device models used by the transpilation pipeline.

All models here are frozen: pipeline stages build new circuits rather than
mutating the ones they receive.
"""

from typing import FrozenSet, Set, Tuple

from pydantic import BaseModel, ConfigDict, Field


class Gate(BaseModel):
    """A single gate operation."""
    model_config = ConfigDict(frozen=True)

    name: str
    qubits: Tuple[int, ...] = ()  # first index is the control for 2q gates
    params: Tuple[float, ...] = ()

    def to_qasm(self, register: str = "q") -> str:
        head = self.name
        if self.params:
            head += "(" + ", ".join(repr(p) for p in self.params) + ")"
        operands = ", ".join(f"{register}[{q}]" for q in self.qubits)
        return f"{head} {operands};"


class Circuit(BaseModel):
    """Ordered gate sequence over a fixed number of qubits and clbits."""
    model_config = ConfigDict(frozen=True)

    num_qubits: int = Field(default=0, ge=0)
    num_clbits: int = Field(default=0, ge=0)
    gates: Tuple[Gate, ...] = ()

    def with_gates(self, gates) -> "Circuit":
        """Return a new circuit with the same registers and different gates."""
        return Circuit(
            num_qubits=self.num_qubits,
            num_clbits=self.num_clbits,
            gates=tuple(gates),
        )

    def to_qasm(self) -> str:
        """Render as OpenQASM 2.0 text."""
        lines = ["OPENQASM 2.0;", 'include "qelib1.inc";']
        lines.append(f"qreg q[{self.num_qubits}];")
        if self.num_clbits:
            lines.append(f"creg c[{self.num_clbits}];")
        lines.extend(gate.to_qasm() for gate in self.gates)
        return "\n".join(lines) + "\n"


class BackendSpec(BaseModel):
    """Target device description.

    ``native_gates`` is reported on but never used for decomposition.
    """
    model_config = ConfigDict(frozen=True)

    name: str
    num_qubits: int = Field(ge=0)
    coupling_map: Tuple[Tuple[int, int], ...] = ()
    native_gates: FrozenSet[str] = frozenset()

    def edge_set(self) -> Set[Tuple[int, int]]:
        """Connectivity edges in both orientations."""
        edges: Set[Tuple[int, int]] = set()
        for a, b in self.coupling_map:
            edges.add((a, b))
            edges.add((b, a))
        return edges


class TranspilationStats(BaseModel):
    """Before/after statistics for one transpilation."""
    original_depth: int
    final_depth: int
    original_gate_count: int
    final_gate_count: int
    depth_reduction: float
    gate_reduction: float


class TranspilationResult(BaseModel):
    """Final circuit bundled with its statistics."""
    circuit: Circuit
    stats: TranspilationStats
    swaps_inserted: int = 0
