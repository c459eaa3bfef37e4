import pytest


def test_health(client):
    """GET /health reports healthy."""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


def test_transpile_demo_circuit(client, demo_qasm):
    """POST /transpile returns the optimized circuit, stats and provenance."""
    response = client.post("/transpile", json={"qasm": demo_qasm, "backend": "ibm_demo"})
    assert response.status_code == 200

    result = response.json()
    assert "circuit" in result
    assert "transpiled_qasm" in result
    assert "report" in result
    assert "provenance" in result

    gates = result["circuit"]["gates"]
    assert [g["name"] for g in gates] == ["h", "cx", "cx", "rz"]
    assert gates[1]["qubits"] == [0, 1]
    assert gates[3]["params"][0] == pytest.approx(3.1416)

    stats = result["report"]["stats"]
    assert stats["original_gate_count"] == 5
    assert stats["final_gate_count"] == 4
    assert stats["original_depth"] == 5
    assert stats["final_depth"] == 4
    assert stats["gate_reduction"] == pytest.approx(20.0)

    assert result["provenance"]["backend"] == "ibm_demo"
    assert "transpiled_at" in result["provenance"]
    assert "transpiler_version" in result["provenance"]


def test_transpile_with_inline_backend(client):
    """An inline backend_spec is used for routing."""
    request = {
        "qasm": "qreg q[3];\ncx q[0], q[2];\n",
        "backend_spec": {
            "name": "triangle",
            "num_qubits": 3,
            "coupling_map": [[0, 1], [1, 2], [2, 0]],
            "native_gates": ["cx"],
        },
    }
    response = client.post("/transpile", json=request)
    assert response.status_code == 200

    result = response.json()
    assert [g["name"] for g in result["circuit"]["gates"]] == ["cx"]
    assert result["report"]["swaps_inserted"] == 0
    assert result["provenance"]["backend"] == "triangle"


def test_transpile_inserts_swap(client):
    """A cx outside the coupling map gets a swap and a native-gate warning."""
    response = client.post("/transpile", json={"qasm": "qreg q[5];\ncx q[0], q[3];\n"})
    assert response.status_code == 200

    result = response.json()
    assert [g["name"] for g in result["circuit"]["gates"]] == ["swap", "cx"]
    assert result["report"]["swaps_inserted"] == 1
    assert result["report"]["ops"] == {"swap": 1, "cx": 1}
    assert "Gate swap is not native to backend ibm_demo" in result["report"]["warnings"]


def test_transpile_unknown_backend(client):
    """Unknown backend names give 404."""
    response = client.post("/transpile", json={"qasm": "h q[0];", "backend": "nope"})
    assert response.status_code == 404
    assert "nope" in response.json()["detail"]


def test_transpile_parse_error(client):
    """A gate line without qubits gives 422 with the offending line."""
    response = client.post("/transpile", json={"qasm": "qreg q[1];\nh;\n"})
    assert response.status_code == 422

    detail = response.json()["detail"]
    assert detail["line"] == "h;"
    assert detail["line_number"] == 2
    assert "Failed to parse qubits" in detail["message"]


def test_transpile_missing_qasm(client):
    """Request validation rejects a body without qasm."""
    response = client.post("/transpile", json={"backend": "ibm_demo"})
    assert response.status_code == 422


def test_transpile_not_under_backends_path(client):
    """POST /transpile is at root, not under /backends."""
    response = client.post("/backends/transpile", json={"qasm": "h q[0];"})
    assert response.status_code in (404, 405)


def test_transpile_oversized_register(client):
    """An overflowing register size is read as 0 and the request succeeds."""
    response = client.post("/transpile", json={"qasm": "qreg q[99999999999999999999];\nh q[0];\n"})
    assert response.status_code == 200

    result = response.json()
    assert result["circuit"]["num_qubits"] == 0
    assert result["report"]["stats"]["original_depth"] == 0
    assert [g["name"] for g in result["circuit"]["gates"]] == ["h"]
