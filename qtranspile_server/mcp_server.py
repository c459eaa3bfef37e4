"""MCP server for the circuit transpiler.

Exposes transpilation and the backend registry as MCP tools for use with
desktop assistants and other MCP clients.

Uses STDIO transport.
"""

import json

from mcp.server.fastmcp import FastMCP
from pydantic import ValidationError

from qtranspile_server.models import BackendSpec, TranspileRequest, TranspileResponse
from qtranspile_server.services.backends import BackendNotFoundError, get_registry
from qtranspile_server.services.parser import ParseError
from qtranspile_server.services.transpiler import get_transpiler

mcp = FastMCP("qtranspile")


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _format_report(response: TranspileResponse) -> str:
    """Format a transpile response as readable text."""
    stats = response.report.stats
    lines = [
        f"Transpilation successful on backend {response.provenance.backend}!",
        f"Depth: {stats.original_depth} -> {stats.final_depth} "
        f"(reduction {stats.depth_reduction:.2f}%)",
        f"Gate count: {stats.original_gate_count} -> {stats.final_gate_count} "
        f"(reduction {stats.gate_reduction:.2f}%)",
        f"Swaps inserted: {response.report.swaps_inserted}",
        "Final circuit gates:",
    ]
    for i, g in enumerate(response.circuit.gates):
        lines.append(f"{i:3}: {g.name:4} qubits={list(g.qubits)} params={list(g.params)}")

    if response.report.warnings:
        lines.append("\n## Warnings")
        for w in response.report.warnings:
            lines.append(f"  - {w}")

    lines.append("\n## Transpiled QASM")
    lines.append(f"```qasm\n{response.transpiled_qasm}```")
    return "\n".join(lines)


# ---------------------------------------------------------------------------
# Tools
# ---------------------------------------------------------------------------


@mcp.tool()
def transpile_circuit(qasm: str, backend: str = "", backend_json: str = "") -> str:
    """Transpile a quantum circuit for a target device.

    Parses the circuit, inserts swaps for two-qubit gates outside the device
    coupling map, cancels adjacent identical gates and merges rz rotations.

    Args:
        qasm: OpenQASM 2.0 circuit code (qreg/creg, h, x, cx, rz).
        backend: Name of a registered backend. Leave empty for the default.
        backend_json: Inline device as JSON, overriding `backend`. Example:
            {"name": "line3", "num_qubits": 3, "coupling_map": [[0, 1], [1, 2]],
             "native_gates": ["h", "cx", "rz"]}
    """
    backend_spec = None
    if backend_json:
        try:
            backend_spec = BackendSpec.model_validate_json(backend_json)
        except ValidationError as e:
            return f"Error parsing backend_json: {e}"

    request = TranspileRequest(qasm=qasm, backend=backend or None, backend_spec=backend_spec)

    try:
        response = get_transpiler().transpile(request)
    except BackendNotFoundError as e:
        return f"Transpilation failed: {e}"
    except ParseError as e:
        where = f" (line {e.line_number})" if e.line_number else ""
        return f"Transpilation failed{where}: {e}"

    return _format_report(response)


@mcp.tool()
def list_backends() -> str:
    """List the registered target devices."""
    summaries = get_registry().summaries()
    if not summaries:
        return "No backends registered."

    lines = [f"Found {len(summaries)} backend(s):"]
    for s in summaries:
        gates = ", ".join(s.native_gates) if s.native_gates else "none"
        lines.append(f"  {s.name}  ({s.num_qubits} qubits, {s.num_edges} edges)  [native: {gates}]")
    return "\n".join(lines)


@mcp.tool()
def get_backend(name: str) -> str:
    """Get the full description of a backend.

    Args:
        name: Backend name (e.g. "ibm_demo").
    """
    try:
        backend = get_registry().get(name)
    except BackendNotFoundError as e:
        return str(e)
    return json.dumps(backend.model_dump(mode="json"), indent=2)


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def main():
    """Run the transpiler MCP server on STDIO transport."""
    get_registry()
    mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
