"""Quantum circuit transpiler: parse, route, optimize, measure."""

__version__ = "0.1.0"
