"""Leaderboard endpoints."""

from __future__ import annotations

from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, Request
from sqlmodel import Session

from ...core import get_session
from ...services import get_best, record_to_dict, submit_score, top_scores

router = APIRouter(tags=["leaderboard"])


@router.get("/leaderboard")
def get_leaderboard(
    limit: Optional[str] = None, session: Session = Depends(get_session)
):
    """Top players by best score."""

    records = top_scores(session, limit)
    return {"items": [record_to_dict(record) for record in records]}


@router.get("/best")
def get_player_best(
    name: Optional[str] = None, session: Session = Depends(get_session)
):
    """A single player's best, or ``null`` if they have never submitted."""

    record = get_best(session, name)
    return {"item": record_to_dict(record) if record else None}


async def json_object_body(request: Request) -> Dict[str, Any]:
    """The request body as a JSON object; anything else reads as ``{}``."""

    try:
        payload = await request.json()
    except ValueError:
        return {}
    return payload if isinstance(payload, dict) else {}


@router.post("/score")
def post_score(
    body: Dict[str, Any] = Depends(json_object_body),
    session: Session = Depends(get_session),
):
    """Submit a score; responds with the player's post-merge record."""

    record = submit_score(session, body.get("name"), body.get("score"))
    return record_to_dict(record)


__all__ = ["router"]
