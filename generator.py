from __future__ import annotations

import random
from collections.abc import Iterable
from typing import Any, List, Mapping, Optional, Protocol

from pydantic import BaseModel, ConfigDict

from bank import TEMPLATE_BANK, LevelSpec
from level_templates import PLACEHOLDER


class RandomSource(Protocol):
    def randrange(self, stop: int) -> int: ...


class GeneratedQA(BaseModel):
    model_config = ConfigDict(frozen=True)

    question: str
    answer_hint: str


def _concept_pool(concepts: Any) -> List[str]:
    # a bare string is one concept name, not a sequence of letters
    if isinstance(concepts, str) or not isinstance(concepts, Iterable):
        return []
    return [c for c in concepts if isinstance(c, str)]


def generate(
    concepts: Iterable[str],
    level: str,
    count: int,
    rng: Optional[RandomSource] = None,
    *,
    bank: Optional[Mapping[str, LevelSpec]] = None,
) -> List[GeneratedQA]:
    """
    Build `count` question/hint pairs for `level`, each using a randomly
    chosen template and concept (both with replacement).

    Unknown level, no concepts or a non-positive count give an empty list;
    this function does not raise on bad input.
    """
    if not isinstance(level, str):
        return []
    if not isinstance(count, int) or isinstance(count, bool) or count <= 0:
        return []

    spec = (TEMPLATE_BANK if bank is None else bank).get(level)
    pool = _concept_pool(concepts)
    if spec is None or not pool:
        return []

    rng = rng or random
    entries = spec.entries

    indices = [rng.randrange(len(entries)) for _ in range(count)]

    out: List[GeneratedQA] = []
    for idx in indices:
        entry = entries[idx]
        concept = pool[rng.randrange(len(pool))]
        # first occurrence only
        question = entry.template.replace(PLACEHOLDER, concept, 1)
        out.append(GeneratedQA(question=question, answer_hint=entry.answer_hint))
    return out
