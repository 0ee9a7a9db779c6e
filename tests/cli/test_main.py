from devspace.cli.main import cli


class TestMainCLI:
    """Smoke tests for main CLI functionality."""

    def test_cli_help(self, cli_runner):
        result = cli_runner.invoke(cli, ['--help'])
        assert result.exit_code == 0
        assert 'manage development environment' in result.output
        assert '--debug' in result.output
        assert 'Commands:' in result.output

    def test_cli_no_args(self, cli_runner):
        result = cli_runner.invoke(cli, [])
        assert 'Usage:' in result.output

    def test_cli_invalid_command(self, cli_runner):
        result = cli_runner.invoke(cli, ['invalid-command'])
        assert result.exit_code != 0
        assert 'Error' in result.output or 'No such command' in result.output

    def test_cli_commands(self, cli_runner):
        result = cli_runner.invoke(cli, ['--help'])
        for cmd in ['shell', 'clean', 'list']:
            assert cmd in result.output
