"""Repository backend contract used by the artifact finder."""

from __future__ import annotations

from pathlib import Path

from mvnlocal.modules.artifactfinder.domain import ArtifactCoordinate, ArtifactDescriptor
from mvnlocal.modules.artifactfinder.exceptions import BackendClosedError


class RepoBackend:
    """A session bound to one local repository root.

    ``read_descriptor`` raises ``ArtifactDescriptorError`` and
    ``resolve_artifact`` raises ``ArtifactResolutionError`` on a miss.
    """

    def __init__(self, root: Path) -> None:
        self.root = root
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def read_descriptor(self, coordinate: ArtifactCoordinate) -> ArtifactDescriptor:
        raise NotImplementedError

    def resolve_artifact(self, coordinate: ArtifactCoordinate) -> Path:
        raise NotImplementedError

    def close(self) -> None:
        self._closed = True

    def _ensure_open(self) -> None:
        if self._closed:
            raise BackendClosedError(f"Repository session for {self.root} is closed.")

    def __enter__(self) -> "RepoBackend":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
