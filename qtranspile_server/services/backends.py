"""Registry of target device descriptions.

Built-in presets are always available; additional devices are loaded from
``settings.backends_dir`` (one JSON file per device, BackendSpec fields).
"""

import json
import logging
from pathlib import Path
from typing import Dict, List, Optional

from ..models import BackendSpec, BackendSummary
from ..config import settings

logger = logging.getLogger(__name__)


# 5-qubit line coupling.
IBM_DEMO = BackendSpec(
    name="ibm_demo",
    num_qubits=5,
    coupling_map=((0, 1), (1, 2), (2, 3), (3, 4)),
    native_gates=frozenset({"x", "h", "cx", "rz"}),
)

BUILTIN_BACKENDS = (IBM_DEMO,)


class BackendNotFoundError(KeyError):
    """Raised when a backend name is not registered."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(name)

    def __str__(self) -> str:
        return f"Backend not found: {self.name}"


class BackendRegistry:
    """Named backends: built-in presets plus device files."""

    def __init__(self, backends_dir: Optional[Path] = None):
        self._backends: Dict[str, BackendSpec] = {b.name: b for b in BUILTIN_BACKENDS}
        self._load_from_dir(backends_dir if backends_dir is not None else settings.backends_dir)

    def _load_from_dir(self, backends_dir: Path) -> None:
        """Load ``*.json`` device descriptions; a file with the same name as a preset replaces it."""
        if not backends_dir.exists():
            return

        loaded = 0
        for path in sorted(backends_dir.glob("*.json")):
            try:
                with open(path) as f:
                    backend = BackendSpec(**json.load(f))
            except (OSError, ValueError, TypeError) as e:
                logger.warning("Failed to load backend from %s: %s", path, e)
                continue
            self._backends[backend.name] = backend
            loaded += 1

        if loaded:
            logger.info("Loaded %d backend(s) from %s", loaded, backends_dir)

    def get(self, name: str) -> BackendSpec:
        """Get a backend by name, raising :class:`BackendNotFoundError`."""
        try:
            return self._backends[name]
        except KeyError:
            raise BackendNotFoundError(name) from None

    def names(self) -> List[str]:
        return sorted(self._backends)

    def summaries(self) -> List[BackendSummary]:
        return [
            BackendSummary(
                name=b.name,
                num_qubits=b.num_qubits,
                num_edges=len(b.coupling_map),
                native_gates=sorted(b.native_gates),
            )
            for b in (self._backends[n] for n in self.names())
        ]


# Global singleton
_registry: Optional[BackendRegistry] = None


def get_registry() -> BackendRegistry:
    """Get the global backend registry instance."""
    global _registry
    if _registry is None:
        _registry = BackendRegistry()
    return _registry
