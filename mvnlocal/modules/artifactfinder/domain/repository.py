"""Validated local repository location."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Dict


@dataclass(frozen=True)
class RepositoryRoot:
    # given_path is kept verbatim for diagnostics only.
    given_path: str
    absolute_path: Path

    def as_dict(self) -> Dict[str, str]:
        return {"givenPath": self.given_path, "absolutePath": str(self.absolute_path)}
