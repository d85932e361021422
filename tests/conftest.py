from pathlib import Path
from typing import Dict, List, Optional

import pytest

POM_TEMPLATE = """<?xml version="1.0" encoding="UTF-8"?>
<project xmlns="http://maven.apache.org/POM/4.0.0">
  <modelVersion>4.0.0</modelVersion>
{body}
</project>
"""


def _dependency_xml(dep: Dict[str, str]) -> str:
    fields = "".join(f"<{key}>{value}</{key}>" for key, value in dep.items())
    return f"    <dependency>{fields}</dependency>"


class MavenRepoBuilder:
    """Writes POMs and artifact files in the default local repository layout."""

    def __init__(self, root: Path) -> None:
        self.root = root

    def directory(self, groupid: str, artifactid: str, version: str) -> Path:
        path = self.root.joinpath(*groupid.split("."), artifactid, version)
        path.mkdir(parents=True, exist_ok=True)
        return path

    def pom(
        self,
        groupid: str,
        artifactid: str,
        version: str,
        dependencies: Optional[List[Dict[str, str]]] = None,
        *,
        parent: Optional[Dict[str, str]] = None,
        properties: Optional[Dict[str, str]] = None,
        managed: Optional[List[Dict[str, str]]] = None,
        relocation: Optional[Dict[str, str]] = None,
        packaging: str = "jar",
        write_group: bool = True,
        write_version: bool = True,
    ) -> Path:
        lines = []
        if parent:
            lines.append("  <parent>" + "".join(f"<{k}>{v}</{k}>" for k, v in parent.items()) + "</parent>")
        if write_group:
            lines.append(f"  <groupId>{groupid}</groupId>")
        lines.append(f"  <artifactId>{artifactid}</artifactId>")
        if write_version:
            lines.append(f"  <version>{version}</version>")
        lines.append(f"  <packaging>{packaging}</packaging>")
        if properties:
            lines.append("  <properties>")
            lines.extend(f"    <{k}>{v}</{k}>" for k, v in properties.items())
            lines.append("  </properties>")
        if managed:
            lines.append("  <dependencyManagement><dependencies>")
            lines.extend(_dependency_xml(dep) for dep in managed)
            lines.append("  </dependencies></dependencyManagement>")
        if dependencies:
            lines.append("  <dependencies>")
            lines.extend(_dependency_xml(dep) for dep in dependencies)
            lines.append("  </dependencies>")
        if relocation is not None:
            inner = "".join(f"<{k}>{v}</{k}>" for k, v in relocation.items())
            lines.append(f"  <distributionManagement><relocation>{inner}</relocation></distributionManagement>")
        path = self.directory(groupid, artifactid, version) / f"{artifactid}-{version}.pom"
        path.write_text(POM_TEMPLATE.format(body="\n".join(lines)), encoding="utf-8")
        return path

    def jar(
        self,
        groupid: str,
        artifactid: str,
        version: str,
        classifier: Optional[str] = None,
        extension: str = "jar",
    ) -> Path:
        name = f"{artifactid}-{version}"
        if classifier is not None:
            name = f"{name}-{classifier}"
        path = self.directory(groupid, artifactid, version) / f"{name}.{extension}"
        path.write_bytes(b"PK\x03\x04")
        return path

    def artifact(self, groupid: str, artifactid: str, version: str, dependencies=None, **kwargs) -> Path:
        self.pom(groupid, artifactid, version, dependencies, **kwargs)
        return self.jar(groupid, artifactid, version)


def dep(groupid: str, artifactid: str, version: Optional[str] = None, **extra: str) -> Dict[str, str]:
    entry = {"groupId": groupid, "artifactId": artifactid}
    if version is not None:
        entry["version"] = version
    entry.update(extra)
    return entry


@pytest.fixture
def maven_repo(tmp_path) -> MavenRepoBuilder:
    root = tmp_path / "repository"
    root.mkdir()
    return MavenRepoBuilder(root)
