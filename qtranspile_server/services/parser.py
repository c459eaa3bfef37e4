"""Line-oriented parser for a small OpenQASM 2.0 subset.

Recognized lines:
    qreg q[3];            -> number of qubits
    creg c[3];            -> number of classical bits
    h q[0];  x q[1];      -> single-qubit gates
    cx q[0], q[1];        -> two-qubit gate (control first)
    rz(1.5708) q[2];      -> parametrized rotation

Anything else is ignored. Malformed sizes and angles become 0 instead of
failing; the only error is a gate line without any qubit index.
"""

import logging
import re
from typing import List, Optional, Tuple

from ..models import Circuit, Gate

logger = logging.getLogger(__name__)


class ParseError(Exception):
    """Raised when a gate line has no extractable qubit indices."""

    def __init__(self, line: str, line_number: Optional[int] = None):
        self.line = line
        self.line_number = line_number
        super().__init__(f"Failed to parse qubits from line: {line}")


class QasmParser:
    """Parser turning source text into a :class:`Circuit`."""

    GATE_KEYWORDS: Tuple[str, ...] = ("cx", "h", "x", "rz")

    REGISTER_SPLIT_PATTERN = re.compile(r"[\[\]]")
    QUBIT_SPLIT_PATTERN = re.compile(r"[\[\] ;,]")
    INDEX_PATTERN = re.compile(r"[0-9]+")
    MAX_INDEX = 2**63 - 1

    def parse(self, source: str) -> Circuit:
        """Parse source text, raising :class:`ParseError` on a bad gate line."""
        gates: List[Gate] = []
        num_qubits = 0
        num_clbits = 0
        ignored = 0

        for line_number, raw in enumerate(source.splitlines(), start=1):
            line = raw.strip()
            if not line or line.startswith("//"):
                continue

            if line.startswith("qreg"):
                num_qubits = self._register_size(line, num_qubits)
            elif line.startswith("creg"):
                num_clbits = self._register_size(line, num_clbits)
            elif line.startswith(self.GATE_KEYWORDS):
                gates.append(self._parse_gate(line, line_number))
            else:
                ignored += 1

        if ignored:
            logger.debug("Ignored %d unrecognized line(s)", ignored)

        return Circuit(num_qubits=num_qubits, num_clbits=num_clbits, gates=gates)

    def _register_size(self, line: str, current: int) -> int:
        """Size from ``qreg name[N];``; keeps ``current`` if there are no brackets."""
        parts = self.REGISTER_SPLIT_PATTERN.split(line)
        if len(parts) < 2:
            return current
        return self._parse_index(parts[1]) or 0

    def _parse_gate(self, line: str, line_number: int) -> Gate:
        tokens = line.split()
        first = tokens[0].rstrip(";")

        # Name and optional parameter, e.g. "rz(1.57)"
        params: Tuple[float, ...] = ()
        name = first
        if "(" in first:
            idx = first.index("(")
            name = first[:idx]
            params = (self._parse_angle(first[idx + 1:].rstrip(")")),)

        qubits = []
        for part in self.QUBIT_SPLIT_PATTERN.split(" ".join(tokens[1:])):
            index = self._parse_index(part)
            if index is not None:
                qubits.append(index)

        if not qubits:
            raise ParseError(line, line_number)

        return Gate(name=name, qubits=qubits, params=params)

    @classmethod
    def _parse_index(cls, text: str) -> Optional[int]:
        if cls.INDEX_PATTERN.fullmatch(text):
            value = int(text)
            if value <= cls.MAX_INDEX:
                return value
        return None

    @staticmethod
    def _parse_angle(text: str) -> float:
        try:
            return float(text)
        except ValueError:
            return 0.0
