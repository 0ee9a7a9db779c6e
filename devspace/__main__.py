"""Allow ``python -m devspace``."""

from devspace.cli.main import cli

if __name__ == '__main__':
    cli()
