from __future__ import annotations

from typing import Optional


class MultiApiError(Exception):
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


# ---- Conversion (client input, 400) ----

class ConversionError(MultiApiError):
    pass


class MissingParameter(ConversionError):
    def __init__(self, message: str = "Parâmetros 'from', 'to', e 'value' são obrigatórios."):
        super().__init__(message)


class InvalidNumber(ConversionError):
    def __init__(self, message: str = "O parâmetro 'value' deve ser um número válido."):
        super().__init__(message)


class UnsupportedConversion(ConversionError):
    def __init__(self, from_unit: str, to_unit: str):
        super().__init__(f"A conversão de '{from_unit}' para '{to_unit}' não é suportada.")
        self.from_unit = from_unit
        self.to_unit = to_unit


# ---- Model backend (upstream, 500) ----

class ModelError(MultiApiError):
    """Failure calling the model backend. `message` is the backend's own text."""

    def __init__(self, model_name: str, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.model_name = model_name
        self.status_code = status_code

    def __str__(self) -> str:
        prefix = f"[{self.model_name}]"
        if self.status_code is not None:
            prefix += f" HTTP {self.status_code}"
        return f"{prefix}: {self.message}"


# ---- Extraction (upstream, 500) ----

class ExtractionError(MultiApiError):
    pass


class NoJsonFound(ExtractionError):
    def __init__(self, message: str = "A resposta da IA não contém um JSON válido."):
        super().__init__(message)


class MalformedJson(ExtractionError):
    def __init__(self, details: str):
        super().__init__(f"JSON malformado na resposta da IA: {details}")
        self.details = details


class UnexpectedShape(ExtractionError):
    def __init__(self, details: str):
        super().__init__(f"Formato inesperado na resposta da IA: {details}")
        self.details = details
