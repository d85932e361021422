"""Minimal POM reader for descriptors stored in a local repository."""

from __future__ import annotations

import re
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, List, Optional

_PLACEHOLDER = re.compile(r"\$\{([^}]+)\}")
_MAX_INTERPOLATION_PASSES = 10


@dataclass
class PomDependency:
    groupid: Optional[str]
    artifactid: Optional[str]
    version: Optional[str] = None
    type: Optional[str] = None
    classifier: Optional[str] = None
    scope: Optional[str] = None
    optional: Optional[str] = None

    @property
    def management_key(self) -> tuple:
        return (self.groupid, self.artifactid, self.type or "jar", self.classifier)


@dataclass
class PomParent:
    groupid: str
    artifactid: str
    version: str


@dataclass
class PomRelocation:
    groupid: Optional[str] = None
    artifactid: Optional[str] = None
    version: Optional[str] = None


@dataclass
class PomModel:
    """The parts of a POM needed to list direct dependencies."""

    path: Path
    groupid: Optional[str] = None
    artifactid: Optional[str] = None
    version: Optional[str] = None
    packaging: str = "jar"
    parent: Optional[PomParent] = None
    properties: Dict[str, str] = field(default_factory=dict)
    dependencies: List[PomDependency] = field(default_factory=list)
    managed_dependencies: List[PomDependency] = field(default_factory=list)
    relocation: Optional[PomRelocation] = None


class PomParseError(ValueError):
    """Raised when a POM file cannot be read or is not a project document."""


def _local(tag: str) -> str:
    return tag.rpartition("}")[2] if "}" in tag else tag


def _child(element: ET.Element, name: str) -> Optional[ET.Element]:
    for node in element:
        if isinstance(node.tag, str) and _local(node.tag) == name:
            return node
    return None


def _children(element: Optional[ET.Element], name: str) -> Iterable[ET.Element]:
    if element is None:
        return []
    return [node for node in element if isinstance(node.tag, str) and _local(node.tag) == name]


def _text(element: ET.Element, name: str) -> Optional[str]:
    node = _child(element, name)
    if node is None or node.text is None:
        return None
    value = node.text.strip()
    return value or None


def _parse_dependency(element: ET.Element) -> PomDependency:
    return PomDependency(
        groupid=_text(element, "groupId"),
        artifactid=_text(element, "artifactId"),
        version=_text(element, "version"),
        type=_text(element, "type"),
        classifier=_text(element, "classifier"),
        scope=_text(element, "scope"),
        optional=_text(element, "optional"),
    )


def _merge_dependencies(target: List[PomDependency], additions: Iterable[PomDependency]) -> None:
    # A later section replaces an entry with the same key in place.
    positions = {dep.management_key: index for index, dep in enumerate(target)}
    for dep in additions:
        index = positions.get(dep.management_key)
        if index is None:
            positions[dep.management_key] = len(target)
            target.append(dep)
        else:
            target[index] = dep


def _merge_section(model: PomModel, element: ET.Element) -> None:
    """Fold properties and dependencies of ``<project>`` or a ``<profile>`` into ``model``."""
    properties = _child(element, "properties")
    if properties is not None:
        for node in properties:
            if isinstance(node.tag, str):
                model.properties[_local(node.tag)] = (node.text or "").strip()

    _merge_dependencies(
        model.dependencies,
        [_parse_dependency(node) for node in _children(_child(element, "dependencies"), "dependency")],
    )

    management = _child(element, "dependencyManagement")
    if management is not None:
        _merge_dependencies(
            model.managed_dependencies,
            [
                _parse_dependency(node)
                for node in _children(_child(management, "dependencies"), "dependency")
            ],
        )


def parse_pom(path: Path) -> PomModel:
    try:
        root = ET.parse(path).getroot()
    except (OSError, ET.ParseError) as exc:
        raise PomParseError(f"unable to read POM {path}: {exc}") from exc
    if _local(root.tag) != "project":
        raise PomParseError(f"{path} is not a Maven project descriptor (root <{_local(root.tag)}>)")

    model = PomModel(
        path=path,
        groupid=_text(root, "groupId"),
        artifactid=_text(root, "artifactId"),
        version=_text(root, "version"),
        packaging=_text(root, "packaging") or "jar",
    )

    parent = _child(root, "parent")
    if parent is not None:
        groupid = _text(parent, "groupId")
        artifactid = _text(parent, "artifactId")
        version = _text(parent, "version")
        if not (groupid and artifactid and version):
            raise PomParseError(f"{path} declares an incomplete <parent>")
        model.parent = PomParent(groupid=groupid, artifactid=artifactid, version=version)

    _merge_section(model, root)
    # Only activeByDefault profiles apply; jdk/os/property activation is not evaluated.
    for profile in _children(_child(root, "profiles"), "profile"):
        activation = _child(profile, "activation")
        if activation is not None and (_text(activation, "activeByDefault") or "").lower() == "true":
            _merge_section(model, profile)

    distribution = _child(root, "distributionManagement")
    if distribution is not None:
        relocation = _child(distribution, "relocation")
        if relocation is not None:
            model.relocation = PomRelocation(
                groupid=_text(relocation, "groupId"),
                artifactid=_text(relocation, "artifactId"),
                version=_text(relocation, "version"),
            )
    return model


def interpolate(value: Optional[str], properties: Dict[str, str]) -> Optional[str]:
    """Expand ``${name}`` placeholders; unknown names are left untouched."""
    if value is None or "${" not in value:
        return value

    def _substitute(match: "re.Match[str]") -> str:
        return properties.get(match.group(1), match.group(0))

    for _ in range(_MAX_INTERPOLATION_PASSES):
        expanded = _PLACEHOLDER.sub(_substitute, value)
        if expanded == value:
            break
        value = expanded
    return value
