from __future__ import annotations

from typing import Dict, Iterable, List, Sequence, Tuple

from pydantic import BaseModel

from generator import GeneratedQA

COPY_HEADER = "Generated Q&A Set:\n\n"
COPY_OK_MSG = "Questions and Answers copied to clipboard!"
COPY_FAILED_MSG = "Failed to copy. Please manually select and copy the text."


class RenderedQA(BaseModel):
    ordinal: int
    question: str
    answer_hint: str


def render(qas: Iterable[GeneratedQA]) -> List[RenderedQA]:
    return [
        RenderedQA(ordinal=i, question=qa.question, answer_hint=qa.answer_hint)
        for i, qa in enumerate(qas, 1)
    ]


def to_clipboard_text(qas: Sequence[GeneratedQA]) -> str:
    """Plain-text form of a generated set, built from the records themselves."""
    parts = [COPY_HEADER]
    for i, qa in enumerate(qas, 1):
        parts.append(f"{i}. Q: {qa.question}\n   A: {qa.answer_hint}\n---\n")
    return "".join(parts)


def level_label(level: str, description: str) -> str:
    return f"{level} - {description}"


def level_options(levels: Iterable[Tuple[str, str]]) -> List[Dict[str, str]]:
    """Selector entries for (level, description) pairs, e.g. from bank.list_levels()."""
    return [
        {"level": name, "description": desc, "label": level_label(name, desc)}
        for name, desc in levels
    ]
