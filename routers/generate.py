from __future__ import annotations

import logging

from fastapi import APIRouter, Depends

from bank import get_bank
from deps.rng import get_rng
from forms import validate_form
from generator import GeneratedQA, RandomSource, generate
from render import render, to_clipboard_text
from schemas.qa import CopyRequest, CopyResponse, GenerateRequest, GenerateResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["generate"])

_UNEXPECTED_MSG = "An unexpected error occurred: {}"


@router.post("/generate", response_model=GenerateResponse)
def generate_set(req: GenerateRequest, rng: RandomSource = Depends(get_rng)):
    concepts, count, err = validate_form(req.concepts, req.num_questions)
    if err:
        logger.info("Rejected generate request: %s", err)
        return {"ok": False, "level": req.level, "items": [], "error": err}

    try:
        qas = generate(concepts, req.level, count, rng, bank=get_bank())
        items = [r.model_dump() for r in render(qas)]
    except Exception as e:
        logger.exception("Generation failed for level %r", req.level)
        return {"ok": False, "level": req.level, "items": [], "error": _UNEXPECTED_MSG.format(e)}

    return {"ok": True, "level": req.level, "items": items}


@router.post("/copy", response_model=CopyResponse)
def copy_text(req: CopyRequest):
    try:
        qas = [GeneratedQA(question=it.question, answer_hint=it.answer_hint) for it in req.items]
        return {"ok": True, "text": to_clipboard_text(qas)}
    except Exception as e:
        logger.exception("Could not serialize Q&A set for copying")
        return {"ok": False, "text": None, "error": _UNEXPECTED_MSG.format(e)}
