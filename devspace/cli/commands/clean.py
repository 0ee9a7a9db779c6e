"""Clean command for devspace."""

import click

from devspace.cli.helpers import create_project, get_log, get_project_root, handle_errors


@click.command()
@click.pass_context
def clean(ctx):
    """Open a shell, then always stop the project's container"""
    log = get_log(ctx)
    project = create_project(get_project_root(ctx), log)

    with handle_errors(log):
        project.shell(stop=True)
