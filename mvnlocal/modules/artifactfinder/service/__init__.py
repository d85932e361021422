"""Service exports."""

from .finder import ArtifactFinder

__all__ = ["ArtifactFinder"]
