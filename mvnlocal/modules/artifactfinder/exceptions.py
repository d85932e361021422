"""Error types raised while locating artifacts in a local repository.

Every error keeps the lower-level cause chained (``raise ... from exc``) so
``__cause__`` carries the original filesystem or parsing failure.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from .domain import ArtifactCoordinate


class ArtifactFinderError(Exception):
    """Base class for artifact finder failures."""


class RepositoryNotFound(ArtifactFinderError):
    """Raised when the given repository path cannot be used as a local repository."""

    def __init__(
        self,
        given_path: str,
        absolute_path: Optional[Path] = None,
        reason: Optional[str] = None,
    ) -> None:
        self.given_path = given_path
        self.absolute_path = absolute_path
        self.reason = reason
        message = f'Maven repository specified is not found at "{given_path}"'
        if absolute_path is not None:
            message += f' ("{absolute_path}")'
        if reason:
            message += f": {reason}"
        else:
            message += "."
        super().__init__(message)


class ArtifactNotFound(ArtifactFinderError):
    """Raised when an artifact or its descriptor is missing from the repository."""

    def __init__(
        self,
        coordinate: ArtifactCoordinate,
        given_repository_path: str,
        absolute_repository_path: Path,
    ) -> None:
        self.coordinate = coordinate
        self.given_repository_path = given_repository_path
        self.absolute_repository_path = absolute_repository_path
        super().__init__(
            f'Maven artifact "{coordinate}" is not found: '
            f'at "{given_repository_path}" ("{absolute_repository_path}").'
        )


class RepoBackendError(ArtifactFinderError):
    """Base class for failures reported by a repository backend."""

    def __init__(self, coordinate: ArtifactCoordinate, message: str) -> None:
        self.coordinate = coordinate
        super().__init__(f"{coordinate}: {message}")


class ArtifactDescriptorError(RepoBackendError):
    """The repository has no readable descriptor (POM) for the artifact."""


class ArtifactResolutionError(RepoBackendError):
    """The artifact's backing file is not present in the repository."""


class BackendClosedError(RuntimeError):
    """Raised when a closed backend session is used."""
