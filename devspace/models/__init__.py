"""Models for devspace."""

from .config import DevspaceConfig
from .container import ContainerSummary, ImageSummary

__all__ = [
    'DevspaceConfig',
    'ContainerSummary',
    'ImageSummary',
]
