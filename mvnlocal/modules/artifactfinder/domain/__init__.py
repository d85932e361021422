from .artifact import ArtifactCoordinate, ArtifactDescriptor, Dependency
from .plugin import PluginResolution
from .repository import RepositoryRoot

__all__ = [
    "ArtifactCoordinate",
    "ArtifactDescriptor",
    "Dependency",
    "PluginResolution",
    "RepositoryRoot",
]
