"""
Lexicon routes: /api/dict, /api/words
"""

import re
from itertools import islice

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from wortschatz.core.categories import parse_categories
from wortschatz.server.deps import get_dictionary


router = APIRouter(prefix="/api", tags=["words"])


class FilterRequest(BaseModel):
    pattern: str | None = None
    categories: list[str] | None = None
    limit: int | None = 100


@router.get("/dict/stats")
async def dict_stats():
    """Word and entry counts."""
    dictionary = await get_dictionary()
    return await dictionary.stats()


@router.get("/dict/words/{word}")
async def get_word(word: str):
    """All analyses of one surface form."""
    dictionary = await get_dictionary()
    entries = await dictionary.lookup(word)
    if not entries:
        raise HTTPException(status_code=404, detail="Word not found")
    return {"word": word, "analyses": [e.analysis.to_dict() for e in entries]}


@router.post("/words/filter")
async def filter_words(req: FilterRequest):
    """Entries matching a regex and/or categories."""
    try:
        categories = parse_categories(req.categories)
        pattern = re.compile(req.pattern) if req.pattern else None
    except (ValueError, re.error) as e:
        raise HTTPException(status_code=400, detail=str(e))

    dictionary = await get_dictionary()
    entries = dictionary.iter_words(pattern, categories)
    if req.limit:
        entries = islice(entries, req.limit)

    results = [e.to_dict() for e in entries]
    return {"count": len(results), "entries": results}
