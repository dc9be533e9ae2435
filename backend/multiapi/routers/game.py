from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from ..config import Settings
from ..dependencies import get_model_client, get_settings
from ..schemas.models import CelebrityResult, ErrorResponse
from ..services.trivia import GENERIC_FAILURE_MESSAGE, play_famous_people


router = APIRouter()


@router.get(
    "/jogo/famosos-da-ia",
    response_model=List[CelebrityResult],
    responses={500: {"model": ErrorResponse}},
)
def famous_people(client=Depends(get_model_client), settings: Settings = Depends(get_settings)):
    outcome = play_famous_people(client, settings.gemini_model)
    if not outcome.ok:
        # Details were logged by the service; clients only get the generic message
        return JSONResponse(status_code=500, content={"erro": GENERIC_FAILURE_MESSAGE})
    return outcome.celebrities
