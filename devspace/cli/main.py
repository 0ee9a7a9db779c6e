"""Main CLI entry point for devspace."""

import click

from devspace.utils.log import Log

from .commands.clean import clean
from .commands.list import list_resources
from .commands.shell import shell


@click.group()
@click.option('--debug', '-d', is_flag=True, help='Debug mode')
@click.option('--root', type=click.Path(file_okay=False), default=None,
              help='Project root, default is the current directory')
@click.pass_context
def cli(ctx, debug, root):
    """devspace - manage development environment"""
    ctx.ensure_object(dict)
    ctx.obj['log'] = Log(debug=debug)
    ctx.obj['root'] = root


# Register commands
cli.add_command(shell)
cli.add_command(clean)
cli.add_command(list_resources)


if __name__ == '__main__':
    cli()
