from __future__ import annotations

from enum import Enum
from typing import List, Optional, Dict

from pydantic import BaseModel, ConfigDict, Field, StrictStr, field_validator


class ErrorResponse(BaseModel):
    erro: str


# ---- Unit conversion ----

class ConversionResult(BaseModel):
    unidade_de_origem: str
    unidade_de_destino: str
    valor_de_entrada: float
    resultado: float  # rounded to 2 decimals


class ConversionPair(BaseModel):
    de: str
    para: str


# ---- AI trivia ----

class CelebrityRecord(BaseModel):
    """One person as emitted by the model (Portuguese keys)."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    name: StrictStr = Field(alias="nome")
    birth_year: int = Field(alias="anoNascimento")
    # Accepted as input only; never echoed
    achievements: Optional[List[str]] = Field(default=None, alias="principaisConquistas")

    @field_validator("birth_year", mode="before")
    @classmethod
    def reject_bool(cls, v):
        # lax int would read true/false as 1/0
        if isinstance(v, bool):
            raise ValueError("anoNascimento must be a number, not a boolean")
        return v


class CelebrityResult(BaseModel):
    nome: str
    idade: int


# ---- Diagnostics ----

class ProbeStatus(str, Enum):
    AVAILABLE = "Disponível e funcionando!"
    ERROR = "ERRO"


class ModelProbeResult(BaseModel):
    modelo: str
    status: ProbeStatus
    mensagem_original: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status == ProbeStatus.AVAILABLE


class DiscoveryDocument(BaseModel):
    message: str
    endpoints: Dict[str, str]
    conversoes_suportadas: List[ConversionPair] = []
