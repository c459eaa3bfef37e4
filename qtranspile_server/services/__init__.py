from .backends import BackendNotFoundError, BackendRegistry, get_registry
from .parser import ParseError, QasmParser
from .passes import GateCancellationPass, OptimizationPass, RotationMergingPass
from .router import SimpleRouter
from .transpiler import TranspilerService, UniversalTranspiler, get_transpiler

__all__ = [
    "BackendNotFoundError",
    "BackendRegistry",
    "GateCancellationPass",
    "OptimizationPass",
    "ParseError",
    "QasmParser",
    "RotationMergingPass",
    "SimpleRouter",
    "TranspilerService",
    "UniversalTranspiler",
    "get_registry",
    "get_transpiler",
]
