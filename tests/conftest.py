import pytest
from fastapi.testclient import TestClient

import qtranspile_server.services.backends as backends_module
import qtranspile_server.services.transpiler as transpiler_module
from qtranspile_server.models import BackendSpec
from qtranspile_server.services.backends import BackendRegistry
from qtranspile_server.main import app


DEMO_QASM = """OPENQASM 2.0;
include "qelib1.inc";
qreg q[3];
creg c[3];
h q[0];
cx q[0], q[1];
cx q[1], q[2];
rz(1.5708) q[2];
rz(1.5708) q[2];
"""


@pytest.fixture
def demo_qasm():
    """3-qubit circuit with two mergeable rz rotations."""
    return DEMO_QASM


def _reset_singletons():
    """Reset all service singletons."""
    backends_module._registry = None
    transpiler_module._transpiler = None


@pytest.fixture
def line_backend():
    """5-qubit line: (0,1), (1,2), (2,3), (3,4)."""
    return BackendSpec(
        name="line5",
        num_qubits=5,
        coupling_map=[(0, 1), (1, 2), (2, 3), (3, 4)],
        native_gates={"x", "h", "cx", "rz"},
    )


@pytest.fixture
def backends_dir(tmp_path):
    """Empty device directory."""
    path = tmp_path / "backends"
    path.mkdir()
    return path


@pytest.fixture
def registry(backends_dir):
    """Backend registry reading from an isolated device directory."""
    _reset_singletons()

    reg = BackendRegistry(backends_dir)
    backends_module._registry = reg

    yield reg

    _reset_singletons()


@pytest.fixture
def client(registry):
    """Test client with isolated services."""
    with TestClient(app) as c:
        yield c
