from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Query

from ..schemas.models import ConversionResult, ErrorResponse
from ..services.converter import convert


router = APIRouter()


@router.get(
    "/convert",
    response_model=ConversionResult,
    responses={400: {"model": ErrorResponse}},
)
def convert_units(
    from_unit: Optional[str] = Query(None, alias="from"),
    to_unit: Optional[str] = Query(None, alias="to"),
    value: Optional[str] = Query(None),
):
    # ConversionError is turned into 400 {erro} by the app's exception handler
    return convert(from_unit, to_unit, value)
