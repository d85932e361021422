"""Resolved plugin paths handed to plugin loaders."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterable, Optional, Tuple


@dataclass(frozen=True)
class PluginResolution:
    """A plugin archive path plus its direct dependency paths in declaration order."""

    artifact_path: Path
    dependency_paths: Tuple[Path, ...] = field(default_factory=tuple)

    @classmethod
    def of(cls, artifact_path: Path, dependency_paths: Optional[Iterable[Path]] = None) -> "PluginResolution":
        return cls(artifact_path=artifact_path, dependency_paths=tuple(dependency_paths or ()))

    def classpath(self) -> str:
        """Join the plugin and its dependencies into a classpath string, plugin first."""
        return os.pathsep.join(str(path) for path in (self.artifact_path, *self.dependency_paths))

    def as_dict(self) -> Dict[str, Any]:
        return {
            "artifactPath": str(self.artifact_path),
            "dependencyPaths": [str(path) for path in self.dependency_paths],
            "classpath": self.classpath(),
        }
