"""
Password routes: /api/passwords
"""

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from wortschatz.core.categories import Gender
from wortschatz.core.password import NoPasswordsGeneratedError, NoValidWordsError, PasswordMode
from wortschatz.server.deps import get_generator


router = APIRouter(prefix="/api/passwords", tags=["passwords"])


class GenerateRequest(BaseModel):
    mode: PasswordMode = PasswordMode.SIMPLE
    count: int = Field(10, ge=1, le=1000)
    seed: int | None = None


class GenerateOneRequest(BaseModel):
    mode: PasswordMode = PasswordMode.SIMPLE
    gender: Gender | None = None
    seed: int | None = None


@router.post("")
async def generate_passwords(req: GenerateRequest):
    """Batch of unique passwords."""
    generator = await get_generator(req.seed)
    try:
        passwords = await generator.generate_passwords(req.mode, req.count)
    except NoPasswordsGeneratedError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return {"mode": req.mode.value, "passwords": passwords}


@router.post("/one")
async def generate_password(req: GenerateOneRequest):
    """Single password, optionally for a fixed gender."""
    generator = await get_generator(req.seed)
    try:
        password = await generator.generate_password(req.mode, req.gender)
    except NoValidWordsError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return {"mode": req.mode.value, "password": password}
