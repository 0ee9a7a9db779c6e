import io
import re
from pathlib import Path

import pytest
from click.testing import CliRunner
from rich.console import Console

from devspace.models.container import ContainerSummary, ImageSummary
from devspace.services.exceptions import ContainerNotFoundError
from devspace.utils.log import Log


TEST_CONFIG = """image = "node:latest"
postCreateCommand = ["npm", "install"]
dotfiles = "~/ini"
user = "node"
rootPattern = [".git", "go.mod"]
"""


class FakeDockerService:
    """Records adapter calls and keeps container state in memory."""

    def __init__(self):
        self.calls = []
        self.containers = []
        self.images = []
        self.exec_returncodes = {}
        self._next_id = 0

    def add_container(self, name, state="running", labels=None):
        self._next_id += 1
        container = ContainerSummary(
            id=f"{self._next_id:064x}",
            name=name,
            state=state,
            labels=labels or {},
        )
        self.containers.append(container)
        return container

    def _get(self, container_id):
        for container in self.containers:
            if container.id == container_id:
                return container
        raise ContainerNotFoundError(f"Container '{container_id}' not found")

    def _set_state(self, container_id, state):
        container = self._get(container_id)
        index = self.containers.index(container)
        self.containers[index] = container.model_copy(update={'state': state})

    def build_image(self, context_path, dockerfile, tag, labels=None):
        self.calls.append(('build_image', Path(context_path), dockerfile, tag, labels))
        self.images.append(ImageSummary(id=f"sha256:{tag}", tags=[f"{tag}:latest"],
                                        labels=labels or {}))

    def list_images(self, labels=None):
        self.calls.append(('list_images', labels))
        return [i for i in self.images
                if all(i.labels.get(k) == v for k, v in (labels or {}).items())]

    def list_containers(self, filters=None):
        self.calls.append(('list_containers', filters))
        filters = filters or {}
        result = list(self.containers)
        if 'name' in filters:
            pattern = re.compile(filters['name'])
            result = [c for c in result if pattern.search('/' + c.name)]
        if 'label' in filters:
            key, _, value = filters['label'].partition('=')
            result = [c for c in result if c.labels.get(key) == value]
        return result

    def start_container(self, container_id):
        self.calls.append(('start_container', container_id))
        self._set_state(container_id, 'running')

    def stop_container(self, container_id, timeout=0):
        self.calls.append(('stop_container', container_id, timeout))
        self._set_state(container_id, 'exited')

    def run(self, image, name, options):
        self.calls.append(('run', image, name, options))
        self.add_container(name, 'running' if options.detach else 'created', options.labels)

    def exec(self, container, command, options=None):
        self.calls.append(('exec', container, list(command), options))

    def call_names(self):
        return [call[0] for call in self.calls]


@pytest.fixture
def cli_runner():
    """Provides a Click CLI runner for testing commands."""
    return CliRunner()


@pytest.fixture
def fake_docker():
    """Provides an in-memory Docker service."""
    return FakeDockerService()


@pytest.fixture
def log_output():
    return io.StringIO()


@pytest.fixture
def log(log_output):
    """Provides a debug log sink writing to a buffer."""
    return Log(debug=True, console=Console(file=log_output, width=200))


@pytest.fixture
def temp_project_dir(tmp_path):
    """Creates a project directory with a .devspace config."""
    project_path = tmp_path / "test-project"
    config_dir = project_path / ".devspace"
    config_dir.mkdir(parents=True)
    (config_dir / "config").write_text(TEST_CONFIG)
    (project_path / "main.py").write_text("print('Hello, World!')")
    return project_path


@pytest.fixture
def dockerfile_project_dir(temp_project_dir):
    """A project whose image is built from .devspace/Dockerfile."""
    config_dir = temp_project_dir / ".devspace"
    (config_dir / "config").write_text(TEST_CONFIG + 'dockerfile = "Dockerfile"\n')
    (config_dir / "Dockerfile").write_text("FROM node:latest\nRUN npm i -g pnpm\n")
    return temp_project_dir


@pytest.fixture
def isolated_cli_runner(cli_runner):
    """Provides a CLI runner with isolated filesystem."""
    with cli_runner.isolated_filesystem():
        yield cli_runner
