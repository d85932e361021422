"""Service wiring for the artifact finder application."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from mvnlocal.modules.artifactfinder import ArtifactFinder, RepositoryNotFound
from .settings import Settings

log = logging.getLogger(__name__)


@dataclass
class ServiceContainer:
    """Holds the single ArtifactFinder bound to the configured repository."""

    settings: Settings
    artifact_finder: Optional[ArtifactFinder] = field(init=False, default=None)
    startup_error: Optional[RepositoryNotFound] = field(init=False, default=None)

    def open(self) -> None:
        if self.artifact_finder is not None:
            return
        try:
            self.artifact_finder = ArtifactFinder.create(
                self.settings.local_repository,
                scopes=self.settings.dependency_scopes or None,
            )
            self.startup_error = None
        except RepositoryNotFound as exc:
            # Keep serving /health; finder routes report the failure.
            log.error("Local repository unavailable: %s", exc)
            self.startup_error = exc

    def close(self) -> None:
        if self.artifact_finder is not None:
            self.artifact_finder.close()
            self.artifact_finder = None


async def bootstrap_services(container: ServiceContainer) -> None:
    log.info("...................RUN...................")
    container.open()
    if container.artifact_finder is not None:
        log.info(
            "Serving artifacts from %s",
            container.artifact_finder.absolute_path,
        )


async def shutdown_services(container: ServiceContainer) -> None:
    container.close()
    log.info("...................STOP...................")
