"""
Liveness endpoint.
"""

from __future__ import annotations

import time

from fastapi import APIRouter, Request
from pydantic import BaseModel

router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    status: str
    uptime: float


@router.get("/health", response_model=HealthResponse)
async def health(request: Request) -> HealthResponse:
    """Report that the process is up and for how many seconds."""
    started_at = getattr(request.app.state, "started_at", time.monotonic())
    return HealthResponse(status="ok", uptime=round(time.monotonic() - started_at, 3))
