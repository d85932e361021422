"""Locate plugin archives and their direct dependencies in a local repository."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Callable, Iterable, List, Optional, Union

from mvnlocal.modules.artifactfinder.backend import LocalRepositoryBackend, RepoBackend
from mvnlocal.modules.artifactfinder.domain import (
    ArtifactCoordinate,
    ArtifactDescriptor,
    PluginResolution,
    RepositoryRoot,
)
from mvnlocal.modules.artifactfinder.domain.constants import PLUGIN_EXTENSION
from mvnlocal.modules.artifactfinder.exceptions import (
    ArtifactDescriptorError,
    ArtifactNotFound,
    RepoBackendError,
)
from mvnlocal.modules.artifactfinder.repository import validate_repository_root

BackendFactory = Callable[[Path], RepoBackend]


class ArtifactFinder:
    """Finds artifacts in one validated local repository.

    The finder owns its backend session exclusively. Use it as a context
    manager, or call ``close()``, to release the session.
    """

    def __init__(self, root: RepositoryRoot, backend: RepoBackend) -> None:
        self.root = root
        self._backend = backend
        self.log = logging.getLogger(self.__class__.__name__)

    @classmethod
    def create(
        cls,
        path: Union[str, os.PathLike],
        *,
        backend_factory: Optional[BackendFactory] = None,
        scopes: Optional[Iterable[str]] = None,
    ) -> "ArtifactFinder":
        root = validate_repository_root(path)
        if backend_factory is None:
            backend = LocalRepositoryBackend(root.absolute_path, scopes=scopes)
        else:
            backend = backend_factory(root.absolute_path)
        try:
            finder = cls(root, backend)
            finder.log.info(
                "Opened local repository given=%s absolute=%s",
                root.given_path,
                root.absolute_path,
            )
        except Exception:
            backend.close()
            raise
        return finder

    @property
    def given_path(self) -> str:
        return self.root.given_path

    @property
    def absolute_path(self) -> Path:
        return self.root.absolute_path

    @property
    def closed(self) -> bool:
        return self._backend.closed

    def find_plugin(
        self,
        groupid: str,
        artifactid: str,
        classifier: Optional[str],
        version: str,
    ) -> PluginResolution:
        """Find a plugin archive together with its direct dependencies.

        Dependencies are resolved in declaration order and the first missing
        one aborts the lookup; no partial result is ever returned.
        """
        try:
            descriptor = self._describe(groupid, artifactid, classifier, PLUGIN_EXTENSION, version)
        except ArtifactDescriptorError as exc:
            requested = ArtifactCoordinate(
                groupid=groupid,
                artifactid=artifactid,
                version=version,
                classifier=classifier,
                extension=PLUGIN_EXTENSION,
            )
            raise self._not_found(requested) from exc

        dependency_paths: List[Path] = []
        for dependency in descriptor.dependencies:
            dependency_paths.append(self.find_artifact(dependency.artifact))
        artifact_path = self.find_artifact(descriptor.artifact)

        self.log.debug(
            "Resolved plugin %s with %d direct dependencies",
            descriptor.artifact,
            len(dependency_paths),
        )
        return PluginResolution.of(artifact_path, dependency_paths)

    def find_plugin_by_coordinate(self, text: str) -> PluginResolution:
        coordinate = ArtifactCoordinate.parse(text)
        return self.find_plugin(
            coordinate.groupid, coordinate.artifactid, coordinate.classifier, coordinate.version
        )

    def find_artifact(self, coordinate: ArtifactCoordinate) -> Path:
        try:
            return self._backend.resolve_artifact(coordinate)
        except RepoBackendError as exc:
            raise self._not_found(coordinate) from exc

    def _describe(
        self,
        groupid: str,
        artifactid: str,
        classifier: Optional[str],
        extension: str,
        version: str,
    ) -> ArtifactDescriptor:
        # classifier may be None, which differs from an empty classifier.
        coordinate = ArtifactCoordinate(
            groupid=groupid,
            artifactid=artifactid,
            version=version,
            classifier=classifier,
            extension=extension,
        )
        return self._backend.read_descriptor(coordinate)

    def _not_found(self, coordinate: ArtifactCoordinate) -> ArtifactNotFound:
        return ArtifactNotFound(coordinate, self.root.given_path, self.root.absolute_path)

    def close(self) -> None:
        if not self._backend.closed:
            self.log.debug("Closing repository session for %s", self.root.absolute_path)
            self._backend.close()

    def __enter__(self) -> "ArtifactFinder":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
