"""Repository backends."""

from .base import RepoBackend
from .local import LocalRepositoryBackend

__all__ = ["RepoBackend", "LocalRepositoryBackend"]
