"""Artifact finder module exports."""

from .domain import ArtifactCoordinate, PluginResolution, RepositoryRoot
from .exceptions import ArtifactNotFound, RepositoryNotFound
from .service import ArtifactFinder
from .controller import router as artifactfinder_router

__all__ = [
    "ArtifactCoordinate",
    "ArtifactFinder",
    "ArtifactNotFound",
    "PluginResolution",
    "RepositoryNotFound",
    "RepositoryRoot",
    "artifactfinder_router",
]
