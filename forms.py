from __future__ import annotations

import os
import re
from typing import List, Optional, Tuple

MAX_QUESTIONS = int(os.getenv("QA_MAX_QUESTIONS", "100"))

NO_CONCEPTS_MSG = "Please enter at least one concept."
BAD_COUNT_MSG = "Number of questions must be a positive number."
TOO_MANY_MSG = f"Number of questions cannot exceed {MAX_QUESTIONS}."

# Leading optional sign and digits; anything after is ignored ("5 questions" -> 5).
_LEADING_INT_RE = re.compile(r"^\s*([+-]?[0-9]+)")


def parse_concepts(text: Optional[str]) -> List[str]:
    if not text:
        return []
    return [c.strip() for c in text.split(",") if c.strip()]


def parse_count(text: Optional[str | int]) -> Optional[int]:
    if isinstance(text, bool):
        return None
    if isinstance(text, int):
        return text
    if not text:
        return None
    m = _LEADING_INT_RE.match(text)
    if not m:
        return None
    return int(m.group(1), 10)


def validate_form(
    concepts_text: Optional[str], count_text: Optional[str | int]
) -> Tuple[List[str], Optional[int], Optional[str]]:
    """
    Parse the raw form fields.
    Returns (concepts, count, error); when error is set nothing should be generated.
    """
    concepts = parse_concepts(concepts_text)
    if not concepts:
        return concepts, None, NO_CONCEPTS_MSG

    count = parse_count(count_text)
    if count is None or count <= 0:
        return concepts, count, BAD_COUNT_MSG
    if count > MAX_QUESTIONS:
        return concepts, count, TOO_MANY_MSG

    return concepts, count, None
