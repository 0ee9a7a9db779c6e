"""In-container paths and the dotfile bootstrap command."""

import logging
from pathlib import Path, PurePosixPath
from typing import Dict, List, Sequence

from ..utils.path_finder import PathFinder
from .constants import (
    DOTFILE_GLOB,
    DOTFILE_SCRIPTS,
    DOTFILES_DIR_NAME,
    ENV_DEVSPACE,
    ENV_DOTFILES,
    ENV_SHARE,
    SPACE_NAME,
    WORKSPACE,
)

logger = logging.getLogger(__name__)


class ContainerEnvironment:
    """Fixed directory layout inside every devspace container."""

    def __init__(self, workspace: str = WORKSPACE,
                 dotfile_scripts: Sequence[str] = DOTFILE_SCRIPTS):
        self._workspace = PurePosixPath(workspace)
        self.dotfile_scripts = list(dotfile_scripts)

    @property
    def workspace(self) -> str:
        return str(self._workspace)

    @property
    def share_space(self) -> str:
        return str(self._workspace / SPACE_NAME)

    @property
    def dotfile_dir(self) -> str:
        return str(PurePosixPath(self.share_space) / DOTFILES_DIR_NAME)

    def project_dir(self, project_name: str) -> str:
        """Where a project is mounted inside its container."""
        return str(self._workspace / project_name)

    def environment_variables(self) -> Dict[str, str]:
        return {
            ENV_DEVSPACE: "true",
            ENV_SHARE: self.share_space,
            ENV_DOTFILES: self.dotfile_dir,
        }

    def bootstrap_command(self, dotfiles_source: str) -> List[str]:
        """Command installing dotfiles inside the container.

        ``dotfiles_source`` is the host directory that gets mounted at
        ``dotfile_dir``. The first known script found there as a regular file
        is run from its in-container location; otherwise every hidden file is
        symlinked into the user's home directory.
        """
        for script in self.dotfile_scripts:
            host_script = Path(dotfiles_source) / script
            if PathFinder.is_file_existing(host_script):
                logger.debug("Found dotfile script: %s", host_script)
                return ["/bin/sh", str(PurePosixPath(self.dotfile_dir) / script)]

        logger.debug("No dotfile script found, use default")
        pattern = f"{self.dotfile_dir}/{DOTFILE_GLOB}"
        return ["/bin/sh", "-c", f"ln -s {pattern} $HOME/"]
