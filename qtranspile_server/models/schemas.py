from datetime import datetime
from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from .circuit import BackendSpec, Circuit, TranspilationStats


class BackendSummary(BaseModel):
    """Summary of a backend for listings."""
    name: str
    num_qubits: int
    num_edges: int
    native_gates: List[str] = Field(default_factory=list)


# Transpile models

class TranspileRequest(BaseModel):
    """Transpilation request.

    ``backend_spec`` takes precedence over ``backend``; with neither, the
    configured default backend is used.
    """
    qasm: str
    backend: Optional[str] = None
    backend_spec: Optional[BackendSpec] = None


class TranspileReport(BaseModel):
    """Transpilation report."""
    stats: TranspilationStats
    swaps_inserted: int = 0
    ops: Dict[str, int] = Field(default_factory=dict)
    warnings: List[str] = Field(default_factory=list)


class Provenance(BaseModel):
    """Provenance information for transpiled output."""
    backend: str
    transpiled_at: datetime
    transpiler_version: str


class TranspileResponse(BaseModel):
    """Transpilation response."""
    circuit: Circuit
    transpiled_qasm: str
    report: TranspileReport
    provenance: Provenance


class ParseErrorDetail(BaseModel):
    """Body of a 422 response for source text that failed to parse."""
    message: str
    line: str
    line_number: Optional[int] = None
