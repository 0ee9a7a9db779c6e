"""Utilities for finding paths and executables."""

import shutil
from pathlib import Path
from typing import Optional, Union

from ..core.constants import DOCKER_EXECUTABLE

PathLike = Union[str, Path]


class PathFinder:
    """Utility class for finding paths and executables."""

    @staticmethod
    def find_docker() -> Optional[str]:
        """Locate the docker CLI on PATH."""
        return shutil.which(DOCKER_EXECUTABLE)

    @staticmethod
    def is_path_existing(path: PathLike) -> bool:
        return Path(path).exists()

    @staticmethod
    def is_file_existing(path: PathLike) -> bool:
        """True only for existing paths that are not directories."""
        p = Path(path)
        return p.exists() and not p.is_dir()

    @staticmethod
    def expand_home(path: str) -> str:
        """Expand a leading ``~`` the way a shell would."""
        if not path:
            return path
        return str(Path(path).expanduser())
