from .circuit import (
    BackendSpec,
    Circuit,
    Gate,
    TranspilationResult,
    TranspilationStats,
)
from .schemas import (
    BackendSummary,
    ParseErrorDetail,
    Provenance,
    TranspileReport,
    TranspileRequest,
    TranspileResponse,
)

__all__ = [
    "BackendSpec",
    "BackendSummary",
    "Circuit",
    "Gate",
    "ParseErrorDetail",
    "Provenance",
    "TranspilationResult",
    "TranspilationStats",
    "TranspileReport",
    "TranspileRequest",
    "TranspileResponse",
]
