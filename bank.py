# qa-generator/bank.py

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator, model_validator

from level_templates import PLACEHOLDER, QA_TEMPLATES

logger = logging.getLogger(__name__)

TEMPLATES_FILE = os.getenv("QA_TEMPLATES_FILE", "")


class TemplateEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    template: str
    answer_hint: str

    @field_validator("template")
    @classmethod
    def _one_placeholder(cls, v: str) -> str:
        if v.count(PLACEHOLDER) != 1:
            raise ValueError(f"template must contain exactly one {PLACEHOLDER} placeholder")
        return v

    @field_validator("answer_hint")
    @classmethod
    def _plain_hint(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("answer hint must not be blank")
        if PLACEHOLDER in v:
            raise ValueError("answer hint must not contain a placeholder")
        return v


class LevelSpec(BaseModel):
    model_config = ConfigDict(frozen=True)

    entries: Tuple[TemplateEntry, ...]
    description: str

    @field_validator("entries")
    @classmethod
    def _not_empty(cls, v: Tuple[TemplateEntry, ...]) -> Tuple[TemplateEntry, ...]:
        if not v:
            raise ValueError("a level needs at least one template")
        return v


class RawLevel(BaseModel):
    """
    The on-disk shape: two parallel lists plus a description.
    Converted into a LevelSpec so the template/hint pairing is fixed per entry.
    """

    templates: List[str]
    answer_hints: List[str]
    description: str = ""

    @model_validator(mode="after")
    def _same_length(self) -> "RawLevel":
        if len(self.templates) != len(self.answer_hints):
            raise ValueError(
                f"templates ({len(self.templates)}) and answer_hints "
                f"({len(self.answer_hints)}) must be the same length"
            )
        return self

    def to_spec(self) -> LevelSpec:
        return LevelSpec(
            entries=tuple(
                TemplateEntry(template=t, answer_hint=h)
                for t, h in zip(self.templates, self.answer_hints)
            ),
            description=self.description,
        )


def _parse_levels(raw: Mapping[str, Any], strict: bool) -> Dict[str, LevelSpec]:
    levels: Dict[str, LevelSpec] = {}
    for name, body in raw.items():
        try:
            if not isinstance(body, dict):
                raise ValueError("level body must be an object")
            levels[name] = RawLevel(**body).to_spec()
        except (ValidationError, ValueError) as e:
            if strict:
                raise ValueError(f"invalid level {name!r}: {e}") from e
            logger.warning("Skipping invalid template level %r: %s", name, e)
            continue
    return levels


def build_bank(raw: Mapping[str, Any]) -> Mapping[str, LevelSpec]:
    """Validate raw template data; any bad level raises ValueError."""
    return MappingProxyType(_parse_levels(raw, strict=True))


def _iter_json(p: Path) -> Iterable[Tuple[str, Any]]:
    with p.open("r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError):
            # Treat a broken JSON file as empty
            logger.warning("Template file %s is not valid UTF-8 JSON", p)
            data = {}
    if isinstance(data, dict):
        yield from data.items()
    else:
        # Non-object root -> ignore
        logger.warning("Template file %s does not hold a JSON object", p)
        return


def load_bank_file(path: str | Path) -> Mapping[str, LevelSpec]:
    """Load a JSON template file, skipping levels that fail validation."""
    p = Path(path)
    if not p.is_file():
        return MappingProxyType({})
    try:
        raw = dict(_iter_json(p))
    except OSError as e:
        logger.warning("Could not read template file %s: %s", p, e)
        return MappingProxyType({})
    return MappingProxyType(_parse_levels(raw, strict=False))


def _initial_bank() -> Mapping[str, LevelSpec]:
    if TEMPLATES_FILE:
        bank = load_bank_file(TEMPLATES_FILE)
        if bank:
            logger.info("Loaded %d template levels from %s", len(bank), TEMPLATES_FILE)
            return bank
        logger.warning("No valid levels in %s; using built-in templates", TEMPLATES_FILE)
    return build_bank(QA_TEMPLATES)


# Built once per process; never mutated afterwards.
TEMPLATE_BANK: Mapping[str, LevelSpec] = _initial_bank()


# Public API
def get_bank() -> Mapping[str, LevelSpec]:
    return TEMPLATE_BANK


def list_levels(bank: Optional[Mapping[str, LevelSpec]] = None) -> List[Tuple[str, str]]:
    """(level, description) pairs in definition order."""
    source = TEMPLATE_BANK if bank is None else bank
    return [(name, spec.description) for name, spec in source.items()]
