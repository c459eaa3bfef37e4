"""Transpile endpoint."""

from fastapi import APIRouter, HTTPException

from ..models import ParseErrorDetail, TranspileRequest, TranspileResponse
from ..services.backends import BackendNotFoundError
from ..services.parser import ParseError
from ..services.transpiler import get_transpiler

router = APIRouter()


@router.post("/transpile", response_model=TranspileResponse)
async def transpile_circuit(request: TranspileRequest):
    """Parse, route and optimize a circuit for a backend.

    POST /transpile - 404 for an unknown backend, 422 if the source fails to parse
    """
    transpiler = get_transpiler()
    try:
        return transpiler.transpile(request)
    except BackendNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ParseError as e:
        detail = ParseErrorDetail(message=str(e), line=e.line, line_number=e.line_number)
        raise HTTPException(status_code=422, detail=detail.model_dump())
