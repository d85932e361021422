"""FastAPI routes exposing read-only artifact lookups."""

from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter, Depends, HTTPException, Request

from mvnlocal.modules.artifactfinder.domain import ArtifactCoordinate
from mvnlocal.modules.artifactfinder.exceptions import ArtifactNotFound
from mvnlocal.modules.artifactfinder.service import ArtifactFinder

router = APIRouter(prefix="/artifactfinder", tags=["artifact-finder"])


def get_finder(request: Request) -> ArtifactFinder:
    container = getattr(request.app.state, "container", None)
    if not container:
        raise HTTPException(status_code=500, detail="Service container not initialized.")
    if container.startup_error is not None:
        raise HTTPException(status_code=503, detail=str(container.startup_error))
    if container.artifact_finder is None:
        raise HTTPException(status_code=503, detail="Artifact finder not initialized.")
    return container.artifact_finder


def _not_found_detail(exc: ArtifactNotFound) -> Dict[str, Any]:
    return {
        "message": str(exc),
        "coordinate": str(exc.coordinate),
        "givenRepositoryPath": exc.given_repository_path,
        "absoluteRepositoryPath": str(exc.absolute_repository_path),
    }


@router.get("/repository")
async def repository(finder: ArtifactFinder = Depends(get_finder)) -> Dict[str, str]:
    return finder.root.as_dict()


@router.get("/plugins/{groupid}/{artifactid}/{version}")
async def find_plugin(
    groupid: str,
    artifactid: str,
    version: str,
    classifier: str | None = None,
    finder: ArtifactFinder = Depends(get_finder),
) -> Dict[str, Any]:
    try:
        resolution = finder.find_plugin(groupid, artifactid, classifier, version)
    except ArtifactNotFound as exc:
        raise HTTPException(status_code=404, detail=_not_found_detail(exc)) from exc
    return resolution.as_dict()


@router.get("/artifacts/{groupid}/{artifactid}/{version}")
async def find_artifact(
    groupid: str,
    artifactid: str,
    version: str,
    classifier: str | None = None,
    extension: str = "jar",
    finder: ArtifactFinder = Depends(get_finder),
) -> Dict[str, str]:
    coordinate = ArtifactCoordinate(
        groupid=groupid,
        artifactid=artifactid,
        version=version,
        classifier=classifier,
        extension=extension,
    )
    try:
        path = finder.find_artifact(coordinate)
    except ArtifactNotFound as exc:
        raise HTTPException(status_code=404, detail=_not_found_detail(exc)) from exc
    return {"artifactPath": str(path)}
