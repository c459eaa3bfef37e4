from .backends import router as backends_router
from .transpile import router as transpile_router

__all__ = ["backends_router", "transpile_router"]
