"""List the sample application repositories."""

import click

from domo.manager import RepositoryManager
from domo.sample_models import register_repos


@click.command()
@click.pass_obj
def samples(obj):
    """Register the sample application repositories and list them."""
    manager = register_repos(RepositoryManager(obj["settings"]))

    click.echo(f"{len(manager)} repositories:\n")
    for repository in manager.get_repositories():
        kind = "singleton" if repository.is_singleton else "aggregate"
        click.echo(f"  {repository.value_type.__name__:<20} {kind:<10} {repository.count} model(s)")
