"""Backend reading a pre-populated local Maven repository (no network access)."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, FrozenSet, Iterable, List, Optional, Set, Tuple, Type

from mvnlocal.modules.artifactfinder.backend.base import RepoBackend
from mvnlocal.modules.artifactfinder.backend.pom import (
    PomDependency,
    PomModel,
    PomParseError,
    interpolate,
    parse_pom,
)
from mvnlocal.modules.artifactfinder.domain import (
    ArtifactCoordinate,
    ArtifactDescriptor,
    Dependency,
)
from mvnlocal.modules.artifactfinder.domain.constants import (
    DEFAULT_EXTENSION,
    DEFAULT_SCOPE,
    POM_EXTENSION,
    SCOPE_IMPORT,
    TYPE_CLASSIFIERS,
    TYPE_EXTENSIONS,
)
from mvnlocal.modules.artifactfinder.exceptions import (
    ArtifactDescriptorError,
    ArtifactResolutionError,
    RepoBackendError,
)

_FORBIDDEN_SEGMENTS = ("/", "\\", "\0")


class LocalRepositoryBackend(RepoBackend):
    """Resolve coordinates against ``<root>/<group dirs>/<artifactId>/<version>/``.

    The given root is treated as the complete store: a file that is not on
    disk is reported as missing, never fetched.
    """

    def __init__(self, root: Path, scopes: Optional[Iterable[str]] = None) -> None:
        super().__init__(root)
        self.scopes: Optional[FrozenSet[str]] = frozenset(scopes) if scopes else None
        self.log = logging.getLogger(self.__class__.__name__)

    # ------------------------------------------------------------------ paths
    def artifact_path(self, coordinate: ArtifactCoordinate) -> Path:
        return self.root.joinpath(*coordinate.path_segments)

    def _check_coordinate(
        self, coordinate: ArtifactCoordinate, error: Type[RepoBackendError]
    ) -> None:
        for name in ("groupid", "artifactid", "version", "extension"):
            value = getattr(coordinate, name)
            if not value:
                raise error(coordinate, f"{name} must not be empty")
            if any(mark in value for mark in _FORBIDDEN_SEGMENTS) or value in (".", ".."):
                raise error(coordinate, f"invalid {name} {value!r}")
        if "" in coordinate.groupid.split("."):
            raise error(coordinate, f"invalid groupid {coordinate.groupid!r}")
        classifier = coordinate.classifier
        if classifier and any(mark in classifier for mark in _FORBIDDEN_SEGMENTS):
            raise error(coordinate, f"invalid classifier {classifier!r}")

    # --------------------------------------------------------------- resolve
    def resolve_artifact(self, coordinate: ArtifactCoordinate) -> Path:
        self._ensure_open()
        self._check_coordinate(coordinate, ArtifactResolutionError)
        path = self.artifact_path(coordinate)
        if not path.is_file():
            raise ArtifactResolutionError(
                coordinate, f"file {path} is not present in the local repository"
            ) from FileNotFoundError(str(path))
        self.log.debug("Resolved %s -> %s", coordinate, path)
        return path

    # ------------------------------------------------------------ descriptor
    def read_descriptor(self, coordinate: ArtifactCoordinate) -> ArtifactDescriptor:
        self._ensure_open()
        self._check_coordinate(coordinate, ArtifactDescriptorError)

        requested = coordinate
        seen: Set[Tuple[str, str, str]] = set()
        while True:
            key = (coordinate.groupid, coordinate.artifactid, coordinate.version)
            if key in seen:
                raise ArtifactDescriptorError(requested, f"relocation loop at {coordinate}")
            seen.add(key)

            chain = self._load_chain(coordinate, requested)
            properties = self._effective_properties(chain)
            relocation = chain[0].relocation
            if relocation is None:
                break
            target = ArtifactCoordinate(
                groupid=interpolate(relocation.groupid, properties) or coordinate.groupid,
                artifactid=interpolate(relocation.artifactid, properties) or coordinate.artifactid,
                version=interpolate(relocation.version, properties) or coordinate.version,
                classifier=coordinate.classifier,
                extension=coordinate.extension,
            )
            if target == coordinate:
                break
            self.log.info("Artifact %s relocated to %s", coordinate, target)
            self._check_coordinate(target, ArtifactDescriptorError)
            coordinate = target

        dependencies = self._direct_dependencies(chain, properties, requested)
        return ArtifactDescriptor(
            artifact=coordinate,
            dependencies=tuple(dependencies),
            relocated_from=requested if coordinate != requested else None,
        )

    def _read_pom(self, coordinate: ArtifactCoordinate, requested: ArtifactCoordinate) -> PomModel:
        pom = ArtifactCoordinate(
            groupid=coordinate.groupid,
            artifactid=coordinate.artifactid,
            version=coordinate.version,
            extension=POM_EXTENSION,
        )
        path = self.artifact_path(pom)
        if not path.is_file():
            raise ArtifactDescriptorError(
                requested, f"no descriptor {path} in the local repository"
            ) from FileNotFoundError(str(path))
        try:
            return parse_pom(path)
        except PomParseError as exc:
            raise ArtifactDescriptorError(requested, str(exc)) from exc

    def _load_chain(
        self, coordinate: ArtifactCoordinate, requested: ArtifactCoordinate
    ) -> List[PomModel]:
        """Return the POM followed by its ancestors, nearest first."""
        chain = [self._read_pom(coordinate, requested)]
        visited = {(coordinate.groupid, coordinate.artifactid, coordinate.version)}
        while chain[-1].parent is not None:
            parent = chain[-1].parent
            key = (parent.groupid, parent.artifactid, parent.version)
            if key in visited:
                raise ArtifactDescriptorError(requested, f"parent cycle at {':'.join(key)}")
            visited.add(key)
            parent_coordinate = ArtifactCoordinate(
                groupid=parent.groupid, artifactid=parent.artifactid, version=parent.version
            )
            self._check_coordinate(parent_coordinate, ArtifactDescriptorError)
            chain.append(self._read_pom(parent_coordinate, requested))
        return chain

    @staticmethod
    def _effective_properties(chain: List[PomModel]) -> Dict[str, str]:
        properties: Dict[str, str] = {}
        for model in reversed(chain):
            properties.update(model.properties)

        own = chain[0]
        groupid = own.groupid or (own.parent.groupid if own.parent else None)
        version = own.version or (own.parent.version if own.parent else None)
        builtins = {
            "groupId": groupid,
            "artifactId": own.artifactid,
            "version": version,
            "packaging": own.packaging,
        }
        if own.parent is not None:
            builtins["parent.groupId"] = own.parent.groupid
            builtins["parent.artifactId"] = own.parent.artifactid
            builtins["parent.version"] = own.parent.version
        for name, value in builtins.items():
            if value is not None:
                properties[f"project.{name}"] = value
                properties[f"pom.{name}"] = value
        # Legacy unprefixed forms; a declared property of the same name wins.
        for name in ("groupId", "artifactId", "version"):
            if builtins[name] is not None:
                properties.setdefault(name, builtins[name])
        return properties

    # ---------------------------------------------------------- dependencies
    def _managed_dependencies(
        self,
        chain: List[PomModel],
        properties: Dict[str, str],
        requested: ArtifactCoordinate,
        imported: Optional[Set[Tuple[str, str, str]]] = None,
    ) -> Dict[tuple, PomDependency]:
        """Managed entries keyed by (group, artifact, type, classifier); nearest wins."""
        imported = imported if imported is not None else set()
        managed: Dict[tuple, PomDependency] = {}
        boms: List[ArtifactCoordinate] = []
        for model in chain:
            for raw in model.managed_dependencies:
                entry = self._interpolated(raw, properties)
                if entry.scope == SCOPE_IMPORT and (entry.type or DEFAULT_EXTENSION) == POM_EXTENSION:
                    if entry.groupid and entry.artifactid and entry.version:
                        boms.append(
                            ArtifactCoordinate(entry.groupid, entry.artifactid, entry.version)
                        )
                    continue
                managed.setdefault(entry.management_key, entry)

        for bom in boms:
            key = (bom.groupid, bom.artifactid, bom.version)
            if key in imported:
                continue
            imported.add(key)
            bom_chain = self._load_chain(bom, requested)
            bom_properties = self._effective_properties(bom_chain)
            for entry_key, entry in self._managed_dependencies(
                bom_chain, bom_properties, requested, imported
            ).items():
                managed.setdefault(entry_key, entry)
        return managed

    def _direct_dependencies(
        self,
        chain: List[PomModel],
        properties: Dict[str, str],
        requested: ArtifactCoordinate,
    ) -> List[Dependency]:
        declared: Dict[tuple, PomDependency] = {}
        for model in chain:
            for raw in model.dependencies:
                entry = self._interpolated(raw, properties)
                declared.setdefault(entry.management_key, entry)

        managed = self._managed_dependencies(chain, properties, requested) if declared else {}
        dependencies: List[Dependency] = []
        for key, entry in declared.items():
            managed_entry = managed.get(key)
            version = entry.version or (managed_entry.version if managed_entry else None)
            scope = entry.scope or (managed_entry.scope if managed_entry else None) or DEFAULT_SCOPE
            if not (entry.groupid and entry.artifactid):
                raise ArtifactDescriptorError(
                    requested, f"dependency without groupId/artifactId in {chain[0].path}"
                )
            if not version:
                raise ArtifactDescriptorError(
                    requested,
                    f"dependency {entry.groupid}:{entry.artifactid} has no version and none is managed",
                )
            if self.scopes is not None and scope not in self.scopes:
                self.log.debug(
                    "Skipping %s:%s (scope %s) for %s", entry.groupid, entry.artifactid, scope, requested
                )
                continue
            dep_type = entry.type or DEFAULT_EXTENSION
            artifact = ArtifactCoordinate(
                groupid=entry.groupid,
                artifactid=entry.artifactid,
                version=version,
                classifier=entry.classifier if entry.classifier is not None else TYPE_CLASSIFIERS.get(dep_type),
                extension=TYPE_EXTENSIONS.get(dep_type, dep_type),
            )
            optional = (entry.optional or "").lower() == "true"
            dependencies.append(Dependency(artifact=artifact, scope=scope, optional=optional))
        return dependencies

    @staticmethod
    def _interpolated(raw: PomDependency, properties: Dict[str, str]) -> PomDependency:
        return PomDependency(
            groupid=interpolate(raw.groupid, properties),
            artifactid=interpolate(raw.artifactid, properties),
            version=interpolate(raw.version, properties),
            type=interpolate(raw.type, properties),
            classifier=interpolate(raw.classifier, properties),
            scope=interpolate(raw.scope, properties),
            optional=interpolate(raw.optional, properties),
        )
