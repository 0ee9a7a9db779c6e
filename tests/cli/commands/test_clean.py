from unittest.mock import MagicMock, patch

from devspace.cli.main import cli


class TestCleanCommand:
    """Tests for the clean command."""

    def test_clean_always_stops(self, cli_runner, temp_project_dir, fake_docker):
        with patch('devspace.cli.helpers.DockerService', MagicMock(return_value=fake_docker)):
            result = cli_runner.invoke(cli, ['--root', str(temp_project_dir), 'clean'])

        assert result.exit_code == 0, result.output
        assert "Do you want to stop" not in result.output
        container = fake_docker.containers[0]
        assert fake_docker.calls[-1] == ("stop_container", container.id, 2)
        assert not container.running

    def test_clean_reuses_stopped_container(self, cli_runner, temp_project_dir, fake_docker):
        with patch('devspace.cli.helpers.DockerService', MagicMock(return_value=fake_docker)):
            cli_runner.invoke(cli, ['--root', str(temp_project_dir), 'clean'])
            result = cli_runner.invoke(cli, ['--root', str(temp_project_dir), 'clean'])

        assert result.exit_code == 0, result.output
        assert fake_docker.call_names().count('run') == 1
        assert fake_docker.call_names().count('start_container') == 1

    def test_clean_outside_project(self, cli_runner, tmp_path):
        result = cli_runner.invoke(cli, ['--root', str(tmp_path), 'clean'])

        assert result.exit_code == 1
        assert ".devspace directory not found" in result.output
