from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Union

from ..schemas.models import CelebrityResult
from .errors import ModelError, ExtractionError
from .extraction import extract_celebrities


logger = logging.getLogger(__name__)

GENERIC_FAILURE_MESSAGE = "Falha ao obter dados da IA."

# Sent to the model as-is, whitespace included
FAMOUS_PEOPLE_PROMPT = (
    "\n"
    "            Me retorne um JSON válido, e nada mais, contendo um array com dois objetos.\n"
    "            Cada objeto deve representar uma pessoa viva de fama internacional e ter as chaves \"nome\", \"anoNascimento\" e \"principaisConquistas\".\n"
    "            As conquistas devem ser um array de strings não maior que 3.\n"
    "            Não inclua explicações ou texto antes ou depois, apenas o JSON puro.\n"
    "        "
)


@dataclass
class TriviaOutcome:
    celebrities: List[CelebrityResult] = field(default_factory=list)
    error: Optional[Union[ModelError, ExtractionError]] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def play_famous_people(client, model_name: str, current_year: Optional[int] = None) -> TriviaOutcome:
    logger.info("Consultando a IA para o jogo dos famosos", extra={"model": model_name})
    try:
        text = client.generate(model_name, FAMOUS_PEOPLE_PROMPT)
    except ModelError as e:
        logger.error("Erro ao consultar o modelo: %s", e, extra={"model": model_name})
        return TriviaOutcome(error=e)

    logger.info("Resposta recebida da IA: %s", text, extra={"model": model_name})

    try:
        celebrities = extract_celebrities(text, current_year=current_year)
    except ExtractionError as e:
        logger.error("Falha ao extrair dados da resposta: %s", e.message, extra={"model": model_name})
        return TriviaOutcome(error=e)
    return TriviaOutcome(celebrities=celebrities)
