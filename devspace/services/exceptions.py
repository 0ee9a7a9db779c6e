"""Custom exceptions for devspace."""


class DevspaceError(Exception):
    """Base exception for all devspace errors."""

    pass


class ConfigError(DevspaceError):
    """Exception raised when the project configuration cannot be loaded."""

    pass


class ProjectNotFoundError(DevspaceError):
    """Exception raised when a directory is not a devspace project."""

    pass


class ProjectError(DevspaceError):
    """Exception raised when a project lifecycle phase fails."""

    pass


class ServiceError(DevspaceError):
    """Base exception for all service-related errors."""

    pass


class DockerServiceError(ServiceError):
    """Exception raised for Docker service operations."""

    pass


class DockerNotFoundError(DockerServiceError):
    """Exception raised when the docker executable is not on PATH."""

    pass


class BuildContextError(DockerServiceError):
    """Exception raised when a build context cannot be archived."""

    pass


class ImageBuildError(DockerServiceError):
    """Exception raised when the daemon reports an image build failure."""

    pass


class ContainerNotFoundError(DockerServiceError):
    """Exception raised when a Docker container is not found."""

    pass


class ContainerRunError(DockerServiceError):
    """Exception raised when `docker run` fails."""

    pass


class ContainerExecError(DockerServiceError):
    """Exception raised when `docker exec` exits non-zero."""

    def __init__(self, message: str, returncode: int = 1):
        super().__init__(message)
        self.returncode = returncode
