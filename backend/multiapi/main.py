from __future__ import annotations

import logging
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from .config import Settings, load_settings
from .observability import setup_logging
from .routers import convert, game, diagnostics
from .schemas.models import ConversionPair, DiscoveryDocument
from .services.converter import supported_conversions
from .services.errors import ConversionError
from .services.gemini_client import GeminiClient


logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None, model_client: Optional[GeminiClient] = None) -> FastAPI:
    settings = settings or load_settings()
    setup_logging(settings.log_level, settings.log_format)

    app = FastAPI(title="API multifuncional", version="0.1.0")
    app.state.settings = settings
    app.state.model_client = model_client or GeminiClient.from_settings(settings)

    if not settings.gemini_api_key:
        logger.warning("GEMINI_API_KEY not set; AI endpoints will fail until it is configured")

    @app.exception_handler(ConversionError)
    async def conversion_error_handler(request: Request, exc: ConversionError):
        logger.info("Conversion rejected on %s: %s", request.url.path, exc.message)
        return JSONResponse(status_code=400, content={"erro": exc.message})

    app.include_router(convert.router, tags=["conversao"])
    app.include_router(game.router, tags=["jogo"])
    app.include_router(diagnostics.router, prefix="/diagnostico", tags=["diagnostico"])

    @app.get("/", response_model=DiscoveryDocument)
    def root():
        return DiscoveryDocument(
            message="API multifuncional está rodando!",
            endpoints={
                "conversao": "/convert?from=cm&to=inch&value=10",
                "jogo_ia": "/jogo/famosos-da-ia",
                "diagnostico": "/diagnostico/verificar-modelo?modelo=gemini-2.5-flash",
            },
            conversoes_suportadas=[ConversionPair(de=a, para=b) for a, b in supported_conversions()],
        )

    return app


app = create_app()


def run() -> None:
    settings: Settings = app.state.settings
    logger.info("API rodando em http://localhost:%s", settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
