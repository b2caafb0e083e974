# qa-generator/schemas/qa.py
from __future__ import annotations

from typing import List, Optional, Union

from pydantic import BaseModel, Field

# ---------- Generate ----------


class GenerateRequest(BaseModel):
    # raw form text; split and trimmed server-side
    concepts: str = ""
    level: str
    # accepted as text so the boundary can apply its own parsing rules
    num_questions: Union[int, str, None] = None


class QAItemOut(BaseModel):
    ordinal: int
    question: str
    answer_hint: str


class GenerateResponse(BaseModel):
    ok: bool
    level: Optional[str] = None
    items: List[QAItemOut] = Field(default_factory=list)
    error: Optional[str] = None


# ---------- Copy ----------


class QAItemIn(BaseModel):
    question: str
    answer_hint: str


class CopyRequest(BaseModel):
    items: List[QAItemIn]


class CopyResponse(BaseModel):
    ok: bool
    text: Optional[str] = None
    error: Optional[str] = None


# ---------- Levels ----------


class LevelOut(BaseModel):
    level: str
    description: str
    label: str
