"""Project controller: maps a project directory to one managed container."""

import sys
from pathlib import Path
from typing import Callable, List, Optional

from ..models.config import DevspaceConfig
from ..models.container import ContainerSummary, ImageSummary
from ..services.docker_service import DockerService, ExecOptions, RunOptions
from ..services.exceptions import DevspaceError, ProjectError, ProjectNotFoundError
from ..utils.config_manager import ConfigManager
from ..utils.hashing import md5sum
from ..utils.log import Log
from ..utils.path_finder import PathFinder
from .constants import (
    CONTAINER_HASH_PREFIX,
    IMAGE_HASH_PREFIX,
    KEEP_ALIVE_COMMAND,
    SHELL_STOP_TIMEOUT,
    SPACE_NAME,
    STOP_PROMPT,
)
from .environment import ContainerEnvironment


def project_name_for(project_dir: Path) -> str:
    """Container-safe name derived from the project directory's base name."""
    return Path(project_dir).name.replace(' ', '_')


def ensure_project_dir(project_dir: Path) -> Path:
    """Validate that ``project_dir`` holds a ``.devspace`` directory.

    Raises:
        ProjectNotFoundError: If the marker directory is missing
    """
    project_dir = Path(project_dir).absolute()
    if not PathFinder.is_path_existing(project_dir / SPACE_NAME):
        raise ProjectNotFoundError(
            f"{SPACE_NAME} directory not found, make sure you are in project root"
        )
    return project_dir


def ask_stop(prompt: str = STOP_PROMPT) -> bool:
    """Ask on stdin whether to stop the container; anything but y/Y is no."""
    print(prompt, end='', flush=True)
    try:
        answer = sys.stdin.readline()
    except (OSError, ValueError, AttributeError):
        return False
    return answer.strip()[:1].lower() == 'y'


class Project:
    """A host directory paired with its deterministically named container.

    Lifecycle of the container as seen by ``shell``::

        NoContainer -> Creating -> Provisioned -> Running <-> Stopped
    """

    def __init__(self, project_dir: Path, config: DevspaceConfig,
                 environment: ContainerEnvironment, docker_service: DockerService,
                 log: Log):
        self.project_dir = Path(project_dir)
        self.config = config
        self.environment = environment
        self.docker = docker_service
        self.log = log

        self.name = project_name_for(self.project_dir)
        self.config_dir = self.project_dir / SPACE_NAME
        self.config_file = ConfigManager(self.config_dir).config_file

    @property
    def workdir(self) -> str:
        """The project's mount point inside the container."""
        return self.environment.project_dir(self.name)

    @property
    def labels(self):
        return {SPACE_NAME: self.name}

    @property
    def dotfiles(self) -> str:
        """Host dotfiles directory with ``~`` expanded, or empty."""
        return PathFinder.expand_home(self.config.dotfiles)

    @property
    def image_name(self) -> str:
        if self.config.builds_image:
            return f"{self.name}-{self._fingerprint(IMAGE_HASH_PREFIX)}"
        return self.config.image

    @property
    def container_name(self) -> str:
        return f"{self.name}-{self._fingerprint(CONTAINER_HASH_PREFIX)}"

    def _fingerprint(self, prefix: str) -> str:
        files = [self.config_file]
        if self.config.builds_image:
            files.append(self.config_dir / self.config.dockerfile)
        try:
            return md5sum(prefix, *files)
        except OSError as e:
            self.log.fatal(f"failed to get md5sum of config file: {e}")

    def find_container(self) -> Optional[ContainerSummary]:
        """Return the container named after this project, if any.

        More than one match means the engine's state was changed behind our
        back; that is fatal.
        """
        name = self.container_name
        containers = self.docker.list_containers(filters={'name': f"^/{name}$"})
        containers = [c for c in containers if c.name.lstrip('/') == name]
        self.log.debug("containers matching %s: %d", name, len(containers))

        if not containers:
            return None
        if len(containers) > 1:
            self.log.fatal("found multiple containers with same name")
        return containers[0]

    def create_container(self) -> ContainerSummary:
        """Build (optionally), run and provision a fresh container."""
        if self.config.builds_image:
            self.log.debug("building image %s from %s", self.image_name, self.config.dockerfile)
            try:
                self.docker.build_image(
                    self.config_dir,
                    self.config.dockerfile,
                    self.image_name,
                    labels=self.labels,
                )
            except DevspaceError as e:
                raise ProjectError(f"failed to build image: {e}") from e

        options = RunOptions(
            detach=True,
            command=list(KEEP_ALIVE_COMMAND),
            env=self.environment.environment_variables(),
            labels=self.labels,
            workdir=self.workdir,
        )
        dotfiles = self.dotfiles
        if dotfiles:
            options.mounts[dotfiles] = self.environment.dotfile_dir
        options.mounts[str(self.project_dir)] = self.workdir

        try:
            self.docker.run(self.image_name, self.container_name, options)
        except DevspaceError as e:
            raise ProjectError(f"failed to run container: {e}") from e

        if self.config.post_create_command:
            try:
                self.docker.exec(
                    self.container_name,
                    list(self.config.post_create_command),
                    ExecOptions(workdir=self.workdir),
                )
            except DevspaceError as e:
                raise ProjectError(f"failed to run post create command: {e}") from e

        if dotfiles:
            try:
                self.docker.exec(
                    self.container_name,
                    self.environment.bootstrap_command(dotfiles),
                    ExecOptions(workdir=self.workdir, user=self.config.user),
                )
            except DevspaceError as e:
                raise ProjectError(f"failed to bootstrap dotfiles: {e}") from e
        else:
            self.log.debug("no dotfiles configured, skip bootstrap")

        container = self.find_container()
        if container is None:
            raise ProjectError(f"container {self.container_name} not found after creation")
        return container

    def shell(self, stop: bool = False,
              confirm: Optional[Callable[[], bool]] = None) -> None:
        """Attach an interactive shell, creating or starting the container first.

        Args:
            stop: Stop the container once the shell exits without asking
            confirm: Asked whether to stop when ``stop`` is false
        """
        try:
            container = self.find_container()
        except DevspaceError as e:
            raise ProjectError(f"failed to list container: {e}") from e

        if container is None:
            try:
                container = self.create_container()
            except DevspaceError as e:
                raise ProjectError(f"failed to create container: {e}") from e
        elif not container.running:
            self.log.debug("starting container %s", container.name)
            try:
                self.docker.start_container(container.id)
            except DevspaceError as e:
                raise ProjectError(f"failed to start container: {e}") from e

        try:
            self.docker.exec(
                self.container_name,
                [self.config.shell],
                ExecOptions(workdir=self.workdir, user=self.config.user),
            )
        except DevspaceError as e:
            raise ProjectError(f"failed to exec shell: {e}") from e

        if not stop:
            stop = (confirm or ask_stop)()

        if stop:
            try:
                self.docker.stop_container(container.id, SHELL_STOP_TIMEOUT)
            except DevspaceError as e:
                raise ProjectError(f"failed to stop container: {e}") from e

    def resources(self) -> tuple[List[ContainerSummary], List[ImageSummary]]:
        """Containers and images labelled for this project."""
        label = f"{SPACE_NAME}={self.name}"
        containers = self.docker.list_containers(filters={'label': label})
        images = self.docker.list_images(labels=self.labels)
        return containers, images
