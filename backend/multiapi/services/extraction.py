from __future__ import annotations

import json
import re
from datetime import date
from typing import List, Optional

from pydantic import ValidationError

from ..schemas.models import CelebrityRecord, CelebrityResult
from .errors import NoJsonFound, MalformedJson, UnexpectedShape


# Greedy first-to-last match: from the first '{' (or '[') to the last '}' (or ']').
# Prose containing stray braces around the payload will fool it.
JSON_CANDIDATE_RE = re.compile(r"\{[\s\S]*\}|\[[\s\S]*\]")


def find_json_candidate(text: str) -> Optional[str]:
    if not text:
        return None
    m = JSON_CANDIDATE_RE.search(text)
    return m.group(0) if m else None


def _parse_records(payload) -> List[CelebrityRecord]:
    if not isinstance(payload, list):
        raise UnexpectedShape(f"expected a JSON array, got {type(payload).__name__}")
    records: List[CelebrityRecord] = []
    for i, item in enumerate(payload):
        if not isinstance(item, dict):
            raise UnexpectedShape(f"item {i} is not an object")
        try:
            records.append(CelebrityRecord.model_validate(item))
        except ValidationError as e:
            raise UnexpectedShape(f"item {i}: {e.errors(include_url=False)}")
    return records


def extract_celebrities(raw_text: str, current_year: Optional[int] = None) -> List[CelebrityResult]:
    """Turn free-text model output into [{nome, idade}].

    All-or-nothing: any extraction failure raises an ExtractionError and
    nothing is returned. Ages depend on the calendar year at call time unless
    `current_year` is given.
    """
    candidate = find_json_candidate(raw_text)
    if candidate is None:
        raise NoJsonFound()

    # huge integers fail with a plain ValueError, deep nesting with RecursionError
    try:
        payload = json.loads(candidate)
    except (ValueError, RecursionError) as e:
        raise MalformedJson(str(e) or type(e).__name__)

    records = _parse_records(payload)
    year = current_year if current_year is not None else date.today().year
    return [CelebrityResult(nome=r.name, idade=year - r.birth_year) for r in records]
