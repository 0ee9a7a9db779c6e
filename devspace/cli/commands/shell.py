"""Shell command for devspace."""

import click

from devspace.cli.helpers import create_project, get_log, get_project_root, handle_errors


@click.command()
@click.option('--stop', '-s', is_flag=True, help='Stop container after shell exit')
@click.pass_context
def shell(ctx, stop):
    """Spawn a shell in the project's dev environment"""
    log = get_log(ctx)
    project = create_project(get_project_root(ctx), log)

    with handle_errors(log):
        project.shell(stop=stop)
