"""Docker service, the only component that talks to the Docker engine.

Non-interactive operations (list, build, start, stop) go through the Docker
SDK. ``run`` and ``exec`` shell out to the docker CLI with the calling
process's terminal inherited, so TTY handling and signals pass straight
through.
"""

import io
import logging
import subprocess
import tarfile
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

import docker
import docker.errors
import requests.exceptions

from ..core.constants import DEFAULT_STOP_TIMEOUT, SPACE_NAME
from ..models.container import ContainerSummary, ImageSummary
from ..utils.path_finder import PathFinder
from .exceptions import (
    BuildContextError,
    ContainerExecError,
    ContainerNotFoundError,
    ContainerRunError,
    DockerNotFoundError,
    DockerServiceError,
    ImageBuildError,
)

logger = logging.getLogger(__name__)


@dataclass
class RunOptions:
    """Options for creating and starting a container with ``docker run``."""

    detach: bool = False
    mounts: Dict[str, str] = field(default_factory=dict)
    env: Dict[str, str] = field(default_factory=dict)
    workdir: str = ""
    labels: Dict[str, str] = field(default_factory=dict)
    command: List[str] = field(default_factory=list)


@dataclass
class ExecOptions:
    """Options for ``docker exec``."""

    workdir: str = ""
    user: str = ""


class DockerService:
    """Service for Docker operations with clean abstractions."""

    def __init__(self, client: Optional[docker.DockerClient] = None):
        """Initialize Docker service and test connection."""
        self._docker_exec: Optional[str] = None
        if client is not None:
            self.client = client
            return
        try:
            self.client = docker.from_env()
            self.client.ping()
        except docker.errors.DockerException as e:
            if "connection refused" in str(e).lower() or "cannot connect" in str(e).lower():
                raise DockerServiceError(
                    "Docker daemon is not running. Please start Docker Desktop or the Docker service."
                ) from e
            else:
                raise DockerServiceError(f"Failed to connect to Docker: {e}") from e

    def build_image(
        self,
        context_path: Path,
        dockerfile: str,
        tag: str,
        labels: Optional[Dict[str, str]] = None,
    ) -> None:
        """Build an image, streaming the daemon's output to stdout.

        Args:
            context_path: Directory sent to the daemon as the build context
            dockerfile: Path to the Dockerfile relative to the build context
            tag: Tag for the image
            labels: Labels applied to the image

        Raises:
            BuildContextError: If the context cannot be archived
            ImageBuildError: If the daemon reports a build error
        """
        context = self._archive_context(Path(context_path))
        try:
            stream = self.client.api.build(
                fileobj=context,
                custom_context=True,
                dockerfile=dockerfile,
                tag=tag,
                labels=labels or {},
                rm=True,
                pull=False,
                decode=True,
            )
            for chunk in stream:
                logger.debug("build response: %s", chunk)
                if 'error' in chunk:
                    detail = chunk.get('errorDetail', {}).get('message') or chunk['error']
                    raise ImageBuildError(f"Failed to build image: {detail.strip()}")
                if chunk.get('stream'):
                    print(chunk['stream'], end='', flush=True)
        except (docker.errors.APIError, requests.exceptions.ConnectionError) as e:
            raise ImageBuildError(f"Failed to build image: {e}") from e
        finally:
            context.close()

    @staticmethod
    def _archive_context(context_path: Path) -> io.BytesIO:
        """Pack a directory into an in-memory tar archive."""
        tar_stream = io.BytesIO()
        try:
            with tarfile.open(fileobj=tar_stream, mode='w') as tar:
                tar.add(str(context_path), arcname='.')
        except (OSError, tarfile.TarError) as e:
            raise BuildContextError(
                f"Failed to archive build context {context_path}: {e}"
            ) from e
        tar_stream.seek(0)
        return tar_stream

    def list_images(self, labels: Optional[Dict[str, str]] = None) -> List[ImageSummary]:
        """List images carrying the devspace label (or the given labels).

        Raises:
            DockerServiceError: If listing fails
        """
        label_filter = [f"{k}={v}" for k, v in labels.items()] if labels else [SPACE_NAME]
        try:
            images = self.client.images.list(filters={'label': label_filter})
        except docker.errors.APIError as e:
            raise DockerServiceError(f"Failed to list images: {e}") from e
        except requests.exceptions.ConnectionError as e:
            raise DockerServiceError(f"Failed to list images, Docker is unreachable: {e}") from e
        except docker.errors.DockerException as e:
            raise DockerServiceError(f"Unexpected error listing images: {e}") from e

        return [
            ImageSummary(id=image.id, tags=list(image.tags), labels=image.labels or {})
            for image in images
        ]

    def list_containers(self, filters: Optional[Dict[str, Any]] = None) -> List[ContainerSummary]:
        """List containers, stopped ones included, matching Docker filters.

        Raises:
            DockerServiceError: If listing fails
        """
        try:
            containers = self.client.containers.list(all=True, filters=filters or {})
        except docker.errors.APIError as e:
            raise DockerServiceError(f"Failed to list containers: {e}") from e
        except requests.exceptions.ConnectionError as e:
            raise DockerServiceError(f"Failed to list containers, Docker is unreachable: {e}") from e
        except docker.errors.DockerException as e:
            raise DockerServiceError(f"Unexpected error listing containers: {e}") from e

        logger.debug("number of containers: %d", len(containers))
        summaries = [self._summarize(c) for c in containers]
        logger.debug("containers: %s", summaries)
        return summaries

    @staticmethod
    def _summarize(container) -> ContainerSummary:
        attrs = container.attrs or {}
        image = attrs.get('Config', {}).get('Image') or attrs.get('Image', '')
        return ContainerSummary(
            id=container.id,
            name=container.name,
            state=container.status,
            image=image,
            labels=container.labels or {},
        )

    def start_container(self, container_id: str) -> None:
        """Start a stopped container.

        Raises:
            ContainerNotFoundError: If container not found
            DockerServiceError: If start fails
        """
        try:
            self.client.api.start(container_id)
        except docker.errors.NotFound as e:
            raise ContainerNotFoundError(f"Container '{container_id}' not found") from e
        except docker.errors.APIError as e:
            raise DockerServiceError(f"Failed to start container: {e}") from e
        except requests.exceptions.ConnectionError as e:
            raise DockerServiceError(f"Failed to start container, Docker is unreachable: {e}") from e

    def stop_container(self, container_id: str, timeout: int = 0) -> None:
        """Stop a container, giving it ``timeout`` seconds (10 if zero) to exit.

        Raises:
            ContainerNotFoundError: If container not found
            DockerServiceError: If stop fails
        """
        if timeout == 0:
            timeout = DEFAULT_STOP_TIMEOUT
        try:
            self.client.api.stop(container_id, timeout=timeout)
        except docker.errors.NotFound as e:
            raise ContainerNotFoundError(f"Container '{container_id}' not found") from e
        except docker.errors.APIError as e:
            raise DockerServiceError(f"Failed to stop container: {e}") from e
        except requests.exceptions.ConnectionError as e:
            raise DockerServiceError(f"Failed to stop container, Docker is unreachable: {e}") from e

    def run(self, image: str, name: str, options: RunOptions) -> None:
        """Create and start a container through the docker CLI.

        Raises:
            ContainerRunError: If ``docker run`` exits non-zero
        """
        logger.debug("container %s not found, create new one", name)
        args = ['run', '--name', name]
        for key, value in options.labels.items():
            args += ['-l', f"{key}={value}"]
        for src, dst in options.mounts.items():
            args += ['-v', f"{src}:{dst}"]
        for key, value in options.env.items():
            args += ['-e', f"{key}={value}"]
        if options.workdir:
            args += ['-w', options.workdir]
        if options.detach:
            args.append('-d')
        args.append(image)
        args += options.command

        returncode = self._run_docker(args)
        if returncode != 0:
            raise ContainerRunError(
                f"Failed to run container '{name}': docker exited with status {returncode}"
            )

    def exec(self, container: str, command: List[str],
             options: Optional[ExecOptions] = None) -> None:
        """Run a command in a running container with the terminal attached.

        Raises:
            ContainerExecError: If the command exits non-zero
        """
        options = options or ExecOptions()
        args = ['exec', '-it']
        if options.workdir:
            args += ['-w', options.workdir]
        if options.user:
            args += ['-u', options.user]
        args.append(container)
        args += command

        returncode = self._run_docker(args)
        if returncode != 0:
            raise ContainerExecError(
                f"Command {' '.join(command)!r} failed in '{container}' with exit code {returncode}",
                returncode,
            )

    def _run_docker(self, args: List[str]) -> int:
        """Run the docker CLI inheriting stdin, stdout and stderr."""
        docker_exec = self._docker_executable()
        logger.debug("run docker with docker: %s", docker_exec)
        logger.debug("run docker with args: %s", args)
        try:
            result = subprocess.run([docker_exec, *args])
        except OSError as e:
            raise DockerServiceError(f"Failed to execute {docker_exec}: {e}") from e
        return result.returncode

    def _docker_executable(self) -> str:
        if not self._docker_exec:
            found = PathFinder.find_docker()
            if not found:
                raise DockerNotFoundError("docker executable not found in PATH")
            self._docker_exec = found
        return self._docker_exec
