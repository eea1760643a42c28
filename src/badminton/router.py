import logging
import random

from fastapi import APIRouter, Depends, HTTPException

import settings
from badminton.functions import apply_generated_matches, generate_matches
from badminton.models import MATCH_MODES, InsufficientResources
from badminton.schemas import (
    GenerateMatchesRequest, GenerateMatchesResponse, MatchSchema, PlayerSchema,
)
from settings import get_rng

logger = logging.getLogger(__name__)

router = APIRouter(prefix='/badminton', tags=['Badminton'])


@router.get("/modes")
async def list_modes():
    return {"modes": list(MATCH_MODES), "default": settings.DEFAULT_MATCH_MODE}


@router.post("/generate-matches", response_model=GenerateMatchesResponse)
async def create_matches(
    body: GenerateMatchesRequest,
    rng: random.Random = Depends(get_rng),
):
    """Pair the queued players onto the active courts.

    Nothing is stored: the response carries the matches and the roster with
    the matched players moved to Playing, for the caller to persist.
    """
    players = [p.to_player() for p in body.players]
    courts = [c.to_court() for c in body.courts]
    mode = body.mode or settings.DEFAULT_MATCH_MODE

    try:
        matches = generate_matches(players, courts, mode, rng)
    except InsufficientResources as e:
        logger.info("Match generation refused: %s", e.message)
        raise HTTPException(status_code=400, detail=e.message)

    roster = apply_generated_matches(players, matches)
    return GenerateMatchesResponse(
        matches=[MatchSchema.from_match(m) for m in matches],
        players=[PlayerSchema.from_player(p) for p in roster],
    )
