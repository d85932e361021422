"""Health route reporting whether the local repository opened."""

from __future__ import annotations

from typing import Dict, Optional

from fastapi import APIRouter, Request

router = APIRouter(tags=["health"])


@router.get("/health", summary="Service and repository status")
async def health(request: Request) -> Dict[str, Optional[str]]:
    container = getattr(request.app.state, "container", None)
    finder = container.artifact_finder if container is not None else None
    if finder is None or finder.closed:
        # The service itself is up; only lookups are unavailable.
        return {"status": "ok", "repository": "unavailable", "absolutePath": None}
    return {"status": "ok", "repository": "ok", "absolutePath": str(finder.absolute_path)}
