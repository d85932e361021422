"""Validation of a local repository root directory."""

from __future__ import annotations

import errno
import logging
import os
from pathlib import Path
from typing import Union

from mvnlocal.modules.artifactfinder.domain import RepositoryRoot
from mvnlocal.modules.artifactfinder.exceptions import RepositoryNotFound

log = logging.getLogger(__name__)


def validate_repository_root(path: Union[str, os.PathLike]) -> RepositoryRoot:
    """Normalize ``path`` and check that it is an existing directory.

    The absolute form is computed once here; callers keep the returned
    ``RepositoryRoot`` and never re-validate it.
    """
    given_path = os.fspath(path) if isinstance(path, os.PathLike) else path
    try:
        absolute_path = Path(os.path.normpath(os.path.abspath(given_path)))
    except (OSError, ValueError, RuntimeError, TypeError) as exc:
        raise RepositoryNotFound(given_path, reason=str(exc)) from exc

    try:
        exists = absolute_path.exists()
        is_dir = absolute_path.is_dir()
    except (OSError, ValueError) as exc:
        raise RepositoryNotFound(given_path, absolute_path, reason=str(exc)) from exc

    if not exists:
        raise RepositoryNotFound(given_path, absolute_path) from FileNotFoundError(
            errno.ENOENT, os.strerror(errno.ENOENT), str(absolute_path)
        )
    if not is_dir:
        raise RepositoryNotFound(given_path, absolute_path) from NotADirectoryError(
            errno.ENOTDIR, os.strerror(errno.ENOTDIR), str(absolute_path)
        )

    log.debug("Validated local repository given=%s absolute=%s", given_path, absolute_path)
    return RepositoryRoot(given_path=given_path, absolute_path=absolute_path)
