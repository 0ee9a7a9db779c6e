"""List command for devspace."""

import click
from tabulate import tabulate

from devspace.cli.helpers import create_project, get_log, get_project_root, handle_errors


@click.command('list')
@click.pass_context
def list_resources(ctx):
    """List the containers and images devspace created for this project"""
    log = get_log(ctx)
    project = create_project(get_project_root(ctx), log)

    with handle_errors(log):
        containers, images = project.resources()
        current = project.container_name

    if containers:
        rows = [
            [c.name, c.id[:12], c.state or '-', c.image, '*' if c.name == current else '']
            for c in containers
        ]
        click.echo(tabulate(rows, headers=['Container', 'ID', 'State', 'Image', 'Current'],
                            tablefmt='simple'))
    else:
        click.echo("No containers found")

    click.echo("")
    if images:
        rows = [[', '.join(i.tags) or '<none>', i.id.split(':')[-1][:12]] for i in images]
        click.echo(tabulate(rows, headers=['Image', 'ID'], tablefmt='simple'))
    else:
        click.echo("No images found")
