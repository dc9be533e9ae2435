from __future__ import annotations

import math
import re
from typing import Callable, Dict, List, Optional, Tuple

from ..schemas.models import ConversionResult
from .errors import MissingParameter, InvalidNumber, UnsupportedConversion


CM_PER_INCH = 2.54

# (from_unit, to_unit) -> factor function; add new pairs here
CONVERSIONS: Dict[Tuple[str, str], Callable[[float], float]] = {
    ("cm", "inch"): lambda x: x / CM_PER_INCH,
    ("inch", "cm"): lambda x: x * CM_PER_INCH,
}


def supported_conversions() -> List[Tuple[str, str]]:
    return list(CONVERSIONS.keys())


# Plain ASCII decimals only: float() alone would also take "1_000", "nan" or non-ASCII digits
NUMBER_RE = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)


def _parse_value(value: str) -> float:
    text = value.strip()
    if not NUMBER_RE.fullmatch(text):
        raise InvalidNumber()
    number = float(text)
    if not math.isfinite(number):
        raise InvalidNumber()
    return number


def convert(from_unit: Optional[str], to_unit: Optional[str], value: Optional[str]) -> ConversionResult:
    """Convert `value` between two units.

    Checks run in a fixed order: presence of all parameters, then the number,
    then the unit pair. Results use Python's round() (half-even) to 2 places.
    """
    if not from_unit or not to_unit or not value:
        raise MissingParameter()

    number = _parse_value(value)

    fn = CONVERSIONS.get((from_unit, to_unit))
    if fn is None:
        raise UnsupportedConversion(from_unit, to_unit)

    return ConversionResult(
        unidade_de_origem=from_unit,
        unidade_de_destino=to_unit,
        valor_de_entrada=number,
        resultado=round(fn(number), 2),
    )
