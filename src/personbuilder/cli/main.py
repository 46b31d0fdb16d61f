"""
Main CLI entry point for person-builder using Click.

Usage:
    person-builder functional [--name NAME] [--address ADDR] [--city CITY] [--json]
    person-builder fluent [--name NAME] [--address ADDR] [--postcode CODE] ... [--json]
"""

from __future__ import annotations

import logging
from typing import Optional

import click

from personbuilder import __version__
from personbuilder.builders import new_fluent_person_builder, new_person_builder
from personbuilder.models import Person

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False, debug: bool = False) -> None:
    """Configure logging based on verbosity."""
    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = logging.WARNING

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


class Config:
    """Shared configuration for CLI commands."""

    def __init__(self) -> None:
        self.verbose = False
        self.debug = False


pass_config = click.make_pass_decorator(Config, ensure=True)


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Enable verbose output")
@click.option("--debug", is_flag=True, help="Enable debug output")
@click.version_option(version=__version__, prog_name="person-builder")
@click.pass_context
def cli(ctx: click.Context, verbose: bool, debug: bool) -> None:
    """Build Person records with the functional or fluent builder."""
    ctx.ensure_object(Config)
    ctx.obj.verbose = verbose
    ctx.obj.debug = debug
    setup_logging(verbose=verbose, debug=debug)


@cli.command()
@click.option("--name", default="John Doe", show_default=True, help="Person name")
@click.option("--address", default="123 Main St", show_default=True, help="Street address")
@click.option("--city", default="Anytown", show_default=True, help="City")
@click.option("--postcode", default=None, help="Postal code")
@click.option("--position", default=None, help="Job title")
@click.option("--income", type=float, default=None, help="Yearly income")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@pass_config
def functional(
    config: Config,
    name: str,
    address: str,
    city: str,
    postcode: Optional[str],
    position: Optional[str],
    income: Optional[float],
    as_json: bool,
) -> None:
    """Build a person lazily with the deferred-action builder.

    Steps are recorded first and only applied when the person is built.

    Example:
        person-builder functional --name "Jane Roe" --city Springfield
    """
    builder = new_person_builder().called(name).lives_at(address, city)
    if postcode is not None:
        builder.with_postcode(postcode)
    if position is not None or income is not None:
        builder.works_as(position or "", income or 0.0)

    if config.verbose:
        click.echo(f"Recorded {len(builder)} step(s); building person lazily...")

    logger.info("Building person from deferred steps")
    _print_person(builder.build(), as_json)


@cli.command()
@click.option("--name", default="John Doe", show_default=True, help="Person name")
@click.option("--address", default="123 Main St", show_default=True, help="Street address")
@click.option("--postcode", default="12345", show_default=True, help="Postal code")
@click.option("--city", default="Anytown", show_default=True, help="City")
@click.option("--position", default="Software Engineer", show_default=True, help="Job title")
@click.option(
    "--income",
    type=float,
    default=75000.0,
    show_default=True,
    help="Yearly income",
)
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@pass_config
def fluent(
    config: Config,
    name: str,
    address: str,
    postcode: str,
    city: str,
    position: str,
    income: float,
    as_json: bool,
) -> None:
    """Build a person with the fluent address and job sub-builders.

    Example:
        person-builder fluent --position "Data Engineer" --income 82000
    """
    logger.info("Building person with fluent sub-builders")
    person = (
        new_fluent_person_builder()
        .called(name)
        .lives()
        .at(address)
        .with_postcode(postcode)
        .in_(city)
        .works()
        .as_a(position)
        .earning(income)
        .build()
    )
    _print_person(person, as_json)


def _print_person(person: Person, as_json: bool) -> None:
    """Print a built person as text or JSON."""
    if as_json:
        click.echo(person.model_dump_json(indent=2))
        return

    click.echo(click.style("Person built:", fg="green"))
    click.echo(f"  Name: {person.name or 'Not set'}")
    click.echo(f"  Address: {person.address or 'Not set'}")
    click.echo(f"  Postcode: {person.postcode or 'Not set'}")
    click.echo(f"  City: {person.city or 'Not set'}")
    click.echo(f"  Position: {person.position or 'Not set'}")
    click.echo(f"  Income: {person.income:.2f}")


def app(args: Optional[list[str]] = None) -> int:
    """
    Main application entry point (for testing).

    Args:
        args: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success)
    """
    try:
        cli(args, standalone_mode=False)
        return 0
    except click.ClickException as e:
        e.show()
        return 1
    except SystemExit as e:
        return e.code if isinstance(e.code, int) else 1
    except Exception as e:
        click.echo(f"Error: {e}", err=True)
        return 1


def main() -> None:
    """CLI entry point."""
    cli()


if __name__ == "__main__":
    main()
