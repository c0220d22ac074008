from .directory import ContactDirectoryPort
from .resolver import ResolverPort

__all__ = [
    "ContactDirectoryPort",
    "ResolverPort",
]
