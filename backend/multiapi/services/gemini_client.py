from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import requests

from ..config import DEFAULT_BASE_URL, Settings
from .errors import ModelError


logger = logging.getLogger(__name__)


def _model_path(model_name: str) -> str:
    return model_name if model_name.startswith("models/") else f"models/{model_name}"


def _backend_error_message(r: requests.Response) -> str:
    """Prefer the backend's own `error.message`; fall back to the raw body."""
    try:
        data = r.json()
    except ValueError:
        data = None
    if isinstance(data, dict):
        err = data.get("error")
        if isinstance(err, dict) and err.get("message"):
            return str(err["message"])
    return r.text[:2000] or f"HTTP {r.status_code}"


def _response_text(model_name: str, data: Dict[str, Any]) -> str:
    candidates = data.get("candidates") or []
    if not candidates:
        block = (data.get("promptFeedback") or {}).get("blockReason")
        if block:
            raise ModelError(model_name, f"Response was blocked: {block}")
        raise ModelError(model_name, "Response contained no candidates")
    first = candidates[0] or {}
    parts = (first.get("content") or {}).get("parts") or []
    text = "".join(p.get("text", "") for p in parts if isinstance(p, dict))
    if not text:
        reason = first.get("finishReason") or "unknown"
        raise ModelError(model_name, f"Response contained no text (finishReason: {reason})")
    return text


class GeminiClient:
    """Thin adapter over the Gemini `generateContent` REST endpoint.

    One POST per call: no retries, no caching. Backend failures surface as
    ModelError carrying the backend's message unchanged.
    """

    def __init__(self, api_key: Optional[str], base_url: str = DEFAULT_BASE_URL, timeout: Optional[float] = None):
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    @classmethod
    def from_settings(cls, settings: Settings) -> "GeminiClient":
        return cls(settings.gemini_api_key, settings.gemini_base_url, settings.gemini_timeout)

    def generate(self, model_name: str, prompt: str) -> str:
        if not self.api_key:
            raise ModelError(model_name, "GEMINI_API_KEY not set")

        url = f"{self.base_url}/{_model_path(model_name)}:generateContent"
        headers = {"x-goog-api-key": self.api_key, "Content-Type": "application/json"}
        payload = {"contents": [{"role": "user", "parts": [{"text": prompt}]}]}

        logger.debug("POST %s", url, extra={"model": model_name})
        try:
            r = requests.post(url, json=payload, headers=headers, timeout=self.timeout)
        except requests.RequestException as e:
            raise ModelError(model_name, str(e)) from e

        if not r.ok:
            raise ModelError(model_name, _backend_error_message(r), status_code=r.status_code)
        try:
            data = r.json()
        except ValueError as e:
            raise ModelError(model_name, f"Invalid JSON from backend: {r.text[:2000]}", status_code=r.status_code) from e
        if not isinstance(data, dict):
            raise ModelError(model_name, "Unexpected response body from backend", status_code=r.status_code)
        return _response_text(model_name, data)
