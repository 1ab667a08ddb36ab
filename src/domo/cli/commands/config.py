"""Settings commands."""

import click

from domo.settings import DomoSettings


@click.group(name="config")
def config():
    """Show or create the settings file."""
    pass


@config.command(name="show")
@click.pass_obj
def show(obj):
    """Show the active settings and where they come from."""
    path = obj["settings_path"]
    source = path if path.exists() else f"defaults ({path} not found)"
    click.echo(f"Settings: {source}\n")
    for field, value in obj["settings"].model_dump().items():
        click.echo(f"  {field}: {value}")


@config.command(name="init")
@click.option('--force', is_flag=True, help='Overwrite an existing settings file')
@click.pass_obj
def init(obj, force: bool):
    """Write a settings file with default values."""
    path = obj["settings_path"]
    if path.exists() and not force:
        raise click.ClickException(f"{path} already exists (use --force to overwrite)")

    DomoSettings().save(path)
    click.echo(f"Wrote default settings to {path}")
