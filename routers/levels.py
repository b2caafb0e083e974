from __future__ import annotations

from typing import List

from fastapi import APIRouter

from bank import list_levels
from render import level_options
from schemas.qa import LevelOut

router = APIRouter(tags=["levels"])


@router.get("/levels", response_model=List[LevelOut])
def levels_catalog():
    return level_options(list_levels())
