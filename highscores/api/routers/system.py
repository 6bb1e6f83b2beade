"""System-level API endpoints."""

from __future__ import annotations

from typing import Dict

from fastapi import APIRouter

router = APIRouter(tags=["system"])


@router.get("/health")
def health() -> Dict[str, bool]:
    """Simple liveness probe; the store is not checked."""

    return {"ok": True}


__all__ = ["router"]
