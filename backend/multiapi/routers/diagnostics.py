from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from ..dependencies import get_model_client
from ..schemas.models import ErrorResponse, ModelProbeResult
from ..services.diagnostics import probe_model


router = APIRouter()

MISSING_MODEL_MESSAGE = "Forneça um nome de modelo na query string, ex: ?modelo=gemini-pro"


@router.get(
    "/verificar-modelo",
    response_model=ModelProbeResult,
    response_model_exclude_none=True,
    responses={400: {"model": ErrorResponse}, 500: {"model": ModelProbeResult}},
)
def check_model(modelo: Optional[str] = None, client=Depends(get_model_client)):
    """Probe a model name; on failure the backend's raw message is echoed back."""
    if not modelo:
        return JSONResponse(status_code=400, content={"erro": MISSING_MODEL_MESSAGE})
    result = probe_model(client, modelo)
    if not result.ok:
        return JSONResponse(status_code=500, content=result.model_dump(mode="json"))
    return result
