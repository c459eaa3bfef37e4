"""Transpilation pipeline: parse, route, optimize, measure."""

import logging
from datetime import datetime, timezone
from typing import List, Optional, Sequence

from ..models import (
    BackendSpec,
    Circuit,
    Provenance,
    TranspilationResult,
    TranspilationStats,
    TranspileReport,
    TranspileRequest,
    TranspileResponse,
)
from ..config import settings
from . import metrics
from .backends import get_registry
from .parser import QasmParser
from .passes import OptimizationPass, default_passes
from .router import SimpleRouter

logger = logging.getLogger(__name__)


class UniversalTranspiler:
    """Parse -> route -> optimization passes (in order) -> statistics."""

    def __init__(
        self,
        parser: Optional[QasmParser] = None,
        router: Optional[SimpleRouter] = None,
        passes: Optional[Sequence[OptimizationPass]] = None,
    ):
        self.parser = parser or QasmParser()
        self.router = router or SimpleRouter()
        self.passes: List[OptimizationPass] = list(passes) if passes is not None else default_passes()

    def transpile(self, source: str, backend: BackendSpec) -> TranspilationResult:
        """Transpile ``source`` for ``backend``.

        A :class:`~.parser.ParseError` propagates before routing runs.
        """
        circuit = self.parser.parse(source)
        original_depth = metrics.depth(circuit)
        original_gate_count = metrics.gate_count(circuit)

        routed = self.router.route(circuit, backend)
        swaps_inserted = len(routed.gates) - len(circuit.gates)

        circuit = routed
        for optimization_pass in self.passes:
            circuit = optimization_pass(circuit)

        final_depth = metrics.depth(circuit)
        final_gate_count = metrics.gate_count(circuit)

        stats = TranspilationStats(
            original_depth=original_depth,
            final_depth=final_depth,
            original_gate_count=original_gate_count,
            final_gate_count=final_gate_count,
            depth_reduction=metrics.reduction(original_depth, final_depth),
            gate_reduction=metrics.reduction(original_gate_count, final_gate_count),
        )
        logger.info(
            "Transpiled for %s: depth %d -> %d, gates %d -> %d, %d swap(s) inserted",
            backend.name, original_depth, final_depth,
            original_gate_count, final_gate_count, swaps_inserted,
        )
        return TranspilationResult(circuit=circuit, stats=stats, swaps_inserted=swaps_inserted)


class TranspilerService:
    """Service turning API requests into transpilation responses."""

    def __init__(self, transpiler: Optional[UniversalTranspiler] = None):
        self.transpiler = transpiler or UniversalTranspiler()

    def resolve_backend(self, request: TranspileRequest) -> BackendSpec:
        """Inline spec, else named backend, else the configured default."""
        if request.backend_spec is not None:
            return request.backend_spec
        return get_registry().get(request.backend or settings.default_backend)

    def transpile(self, request: TranspileRequest) -> TranspileResponse:
        backend = self.resolve_backend(request)
        result = self.transpiler.transpile(request.qasm, backend)

        report = TranspileReport(
            stats=result.stats,
            swaps_inserted=result.swaps_inserted,
            ops=metrics.count_ops(result.circuit),
            warnings=self._warnings(result.circuit, backend),
        )

        provenance = Provenance(
            backend=backend.name,
            transpiled_at=datetime.now(timezone.utc),
            transpiler_version=settings.transpiler_version,
        )

        return TranspileResponse(
            circuit=result.circuit,
            transpiled_qasm=result.circuit.to_qasm(),
            report=report,
            provenance=provenance,
        )

    @staticmethod
    def _warnings(circuit: Circuit, backend: BackendSpec) -> List[str]:
        """Informational notes; they never change the result."""
        warnings: List[str] = []
        if circuit.num_qubits > backend.num_qubits:
            warnings.append(
                f"Circuit declares {circuit.num_qubits} qubits but backend "
                f"{backend.name} has {backend.num_qubits}"
            )
        for name in sorted({g.name for g in circuit.gates} - backend.native_gates):
            warnings.append(f"Gate {name} is not native to backend {backend.name}")
        return warnings


# Global singleton
_transpiler: Optional[TranspilerService] = None


def get_transpiler() -> TranspilerService:
    """Get the global transpiler service instance."""
    global _transpiler
    if _transpiler is None:
        _transpiler = TranspilerService()
    return _transpiler
