from .root import validate_repository_root

__all__ = ["validate_repository_root"]
