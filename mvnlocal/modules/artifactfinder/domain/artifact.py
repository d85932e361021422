"""Domain objects describing artifacts inside a Maven repository."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .constants import DEFAULT_EXTENSION, DEFAULT_SCOPE


@dataclass(frozen=True)
class ArtifactCoordinate:
    """Represents a Maven artifact coordinate.

    ``classifier=None`` means "no classifier" and is kept apart from an empty
    string classifier all the way down to the file name.
    """

    groupid: str
    artifactid: str
    version: str
    classifier: Optional[str] = None
    extension: str = DEFAULT_EXTENSION

    @classmethod
    def parse(cls, text: str, extension: str = DEFAULT_EXTENSION) -> "ArtifactCoordinate":
        """Parse ``groupId:artifactId:version[:classifier]``."""
        parts = text.split(":")
        if len(parts) == 3:
            return cls(parts[0], parts[1], parts[2], extension=extension)
        if len(parts) == 4:
            return cls(parts[0], parts[1], parts[2], classifier=parts[3], extension=extension)
        raise ValueError(f"Invalid artifact coordinate {text!r}, expected groupId:artifactId:version[:classifier]")

    @property
    def base_version(self) -> str:
        # Timestamped snapshots live under the -SNAPSHOT directory.
        head, sep, tail = self.version.rpartition("-")
        if sep and head and _is_snapshot_timestamp(head, tail):
            stamp_head = head.rpartition("-")[0]
            return f"{stamp_head}-SNAPSHOT"
        return self.version

    @property
    def file_name(self) -> str:
        name = f"{self.artifactid}-{self.version}"
        if self.classifier is not None:
            name = f"{name}-{self.classifier}"
        return f"{name}.{self.extension}"

    @property
    def path_segments(self) -> List[str]:
        group_path = self.groupid.replace(".", "/")
        return [group_path, self.artifactid, self.base_version, self.file_name]

    def __str__(self) -> str:
        text = f"{self.groupid}:{self.artifactid}:{self.version}"
        if self.classifier is not None:
            text = f"{text}:{self.classifier}"
        return text


def _is_snapshot_timestamp(head: str, build_number: str) -> bool:
    # e.g. 1.0-20240101.123456-3
    stamp = head.rpartition("-")[2]
    date, dot, time = stamp.partition(".")
    return (
        build_number.isdigit()
        and bool(dot)
        and len(date) == 8
        and date.isdigit()
        and len(time) == 6
        and time.isdigit()
    )


@dataclass(frozen=True)
class Dependency:
    """A dependency declared directly by an artifact's descriptor."""

    artifact: ArtifactCoordinate
    scope: str = DEFAULT_SCOPE
    optional: bool = False


@dataclass(frozen=True)
class ArtifactDescriptor:
    """Result of reading an artifact's POM: the artifact and its direct dependencies."""

    artifact: ArtifactCoordinate
    dependencies: Tuple[Dependency, ...] = field(default_factory=tuple)
    relocated_from: Optional[ArtifactCoordinate] = None
