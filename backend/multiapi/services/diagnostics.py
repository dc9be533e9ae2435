from __future__ import annotations

import logging

from ..schemas.models import ModelProbeResult, ProbeStatus
from .errors import ModelError


logger = logging.getLogger(__name__)

PROBE_PROMPT = "Olá"


def probe_model(client, model_name: str) -> ModelProbeResult:
    """Make one trivial generateContent call to see if `model_name` is usable."""
    logger.info("Testando o modelo: %s", model_name, extra={"model": model_name})
    try:
        client.generate(model_name, PROBE_PROMPT)
    except ModelError as e:
        logger.error("Erro ao testar o modelo %s: %s", model_name, e.message, extra={"model": model_name})
        return ModelProbeResult(modelo=model_name, status=ProbeStatus.ERROR, mensagem_original=e.message)
    return ModelProbeResult(modelo=model_name, status=ProbeStatus.AVAILABLE)
