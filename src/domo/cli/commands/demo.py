"""Walk-through of the repository engine on plain integers."""

import logging

import click

from domo.exceptions import InvalidCardinalityError, ModelNotFoundError
from domo.extensions import add_value
from domo.repository import (
    AggregateRepository,
    ChangeType,
    RepositoryChange,
    SingletonRepository,
)

logger = logging.getLogger(__name__)


def format_change(change: RepositoryChange) -> str:
    """One-line description of a change event."""
    if change.change_type is ChangeType.ADDED:
        return f"  event: added {change.model_id} = {change.new_value!r}"
    if change.change_type is ChangeType.REMOVED:
        return f"  event: removed {change.model_id} (was {change.old_value!r})"
    return f"  event: updated {change.model_id} {change.old_value!r} -> {change.new_value!r}"


@click.command()
@click.pass_obj
def demo(obj):
    """Add, update and delete an integer, printing every change event."""
    settings = obj["settings"]

    click.echo("Aggregate repository of int:")
    numbers = AggregateRepository(int, settings=settings)
    numbers.subscribe(lambda change: click.echo(format_change(change)))

    model = add_value(numbers, 5)
    click.echo(f"add 5 -> {model.id}")

    result = numbers.update(model.id, lambda v: v + 1)
    click.echo(f"update v + 1 -> {result.value}, value = {numbers.get_value(model.id)}")

    result = numbers.update(model.id, lambda v: v)
    click.echo(f"update v -> {result.value}, value = {numbers.get_value(model.id)}")

    numbers.delete(model.id)
    click.echo(f"delete {model.id}")
    try:
        numbers.get_value(model.id)
    except ModelNotFoundError as e:
        click.echo(f"lookup after delete: {e}")

    click.echo("\nSingleton repository of int:")
    counter = SingletonRepository(int, 0, settings=settings)
    try:
        add_value(counter, 1)
    except InvalidCardinalityError as e:
        logger.debug(f"Second add rejected: {e.detail}")
        click.echo(f"second add: {e}")
    click.echo(f"value = {counter.value}")
