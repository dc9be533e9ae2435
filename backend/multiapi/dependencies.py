from __future__ import annotations

from fastapi import Request

from .config import Settings
from .services.gemini_client import GeminiClient


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_model_client(request: Request) -> GeminiClient:
    return request.app.state.model_client
