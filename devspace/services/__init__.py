"""Service layer for abstracting Docker operations."""

from .docker_service import DockerService, ExecOptions, RunOptions
from .exceptions import (
    DevspaceError,
    ConfigError,
    ProjectError,
    ProjectNotFoundError,
    ServiceError,
    DockerServiceError,
    DockerNotFoundError,
    BuildContextError,
    ImageBuildError,
    ContainerNotFoundError,
    ContainerRunError,
    ContainerExecError,
)

__all__ = [
    "DockerService",
    "ExecOptions",
    "RunOptions",
    "DevspaceError",
    "ConfigError",
    "ProjectError",
    "ProjectNotFoundError",
    "ServiceError",
    "DockerServiceError",
    "DockerNotFoundError",
    "BuildContextError",
    "ImageBuildError",
    "ContainerNotFoundError",
    "ContainerRunError",
    "ContainerExecError",
]
