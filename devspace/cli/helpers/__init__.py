"""CLI helper functions for devspace.

Factory functions here compose a ``Project`` from its collaborators (config
reader, environment descriptor, Docker service, log sink) and translate
errors into log output and exit codes consistently across commands.
"""

import sys
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional

import click

from devspace.core.constants import SPACE_NAME
from devspace.core.environment import ContainerEnvironment
from devspace.core.project import Project, ensure_project_dir
from devspace.services.docker_service import DockerService
from devspace.services.exceptions import (
    ConfigError,
    DevspaceError,
    ProjectNotFoundError,
)
from devspace.utils.config_manager import ConfigManager
from devspace.utils.log import Log


def get_log(ctx: Optional[click.Context] = None) -> Log:
    """Log sink created by the root command, or a default one."""
    ctx = ctx or click.get_current_context(silent=True)
    if ctx is not None and ctx.obj and 'log' in ctx.obj:
        return ctx.obj['log']
    return Log()


def get_project_root(ctx: Optional[click.Context] = None) -> Path:
    """Project root from ``--root``, defaulting to the working directory."""
    ctx = ctx or click.get_current_context(silent=True)
    if ctx is not None and ctx.obj and ctx.obj.get('root'):
        return Path(ctx.obj['root'])
    try:
        return Path.cwd()
    except OSError as e:
        get_log(ctx).fatal(f"failed to get current working directory: {e}")


def create_project(project_root: Path, log: Log,
                   docker_service: Optional[DockerService] = None) -> Project:
    """Wire a Project for ``project_root``.

    Environment problems (no ``.devspace`` directory, unreadable config) are
    fatal.
    """
    try:
        project_dir = ensure_project_dir(project_root)
        config = ConfigManager(project_dir / SPACE_NAME).load_config()
    except (ProjectNotFoundError, ConfigError) as e:
        log.fatal(e)

    log.debug("project %s config: %s", project_dir, config)
    with handle_errors(log):
        docker_service = docker_service or DockerService()
    return Project(project_dir, config, ContainerEnvironment(), docker_service, log)


@contextmanager
def handle_errors(log: Log) -> Iterator[None]:
    """Log devspace errors and exit with status 1."""
    try:
        yield
    except DevspaceError as e:
        log.error(e)
        sys.exit(1)
