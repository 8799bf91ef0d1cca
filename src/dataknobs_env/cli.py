"""Command-line interface for checking an environment against constraints.

Usage:
    dataknobs-env check env.schema.yaml --file .env --file .env.local
    dataknobs-env show env.schema.yaml
"""

import sys

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from . import __version__
from .constraints import describe, load_constraints
from .exceptions import ConstraintDefinitionError
from .loader import EnvLoader
from .snapshot import EnvSnapshot

console = Console()


def _load_or_exit(constraints_file: str):
    try:
        return load_constraints(constraints_file)
    except ConstraintDefinitionError as e:
        console.print(f"[red]Invalid constraints:[/red] {escape(str(e))}")
        sys.exit(2)


@click.group()
@click.version_option(version=__version__)
def cli():
    """DataKnobs Env - environment variable validation"""
    pass


@cli.command()
@click.argument('constraints_file', type=click.Path(exists=True, dir_okay=False))
@click.option('--base-path', '-b', type=click.Path(file_okay=False), default=None,
              help='Directory env files are relative to (default: current directory)')
@click.option('--file', '-f', 'files', multiple=True, help='Env file to load (repeatable)')
@click.option('--no-files', is_flag=True, help='Validate without loading any env file')
@click.option('--apply-defaults', is_flag=True, help='Write declared defaults for absent variables')
@click.option('--quiet', '-q', is_flag=True, help='Only set the exit status')
def check(constraints_file: str, base_path, files, no_files: bool,
          apply_defaults: bool, quiet: bool):
    """Load env files and validate the environment"""
    constraints = _load_or_exit(constraints_file)

    loader = EnvLoader(
        constraints,
        env=EnvSnapshot.from_process(),
        base_path=base_path,
        files=files or None,
        apply_defaults=apply_defaults,
        exit_on_error=False,
        silent=True,
    )
    errors = loader.validate() if no_files else loader.load_and_validate()

    if not errors:
        if not quiet:
            console.print(f"[green]Environment is valid[/green] ({len(constraints)} variables checked)")
        return

    if not quiet:
        table = Table(title="Environment Errors")
        table.add_column("#", style="dim", justify="right")
        table.add_column("Error", style="red")
        for index, error in enumerate(errors, start=1):
            table.add_row(str(index), Text(error))
        console.print(table)
    sys.exit(1)


@cli.command()
@click.argument('constraints_file', type=click.Path(exists=True, dir_okay=False))
def show(constraints_file: str):
    """Show the declared constraints"""
    constraints = _load_or_exit(constraints_file)

    table = Table(title="Environment Constraints")
    table.add_column("Variable", style="cyan")
    table.add_column("Type")
    table.add_column("Required")
    table.add_column("Default")
    table.add_column("Rules")
    for name, constraint in constraints.items():
        default = "" if constraint.default is None else repr(constraint.default)
        table.add_row(
            name,
            constraint.type_name,
            "yes" if constraint.required else "no",
            Text(default),
            Text(describe(constraint)),
        )
    console.print(table)


if __name__ == '__main__':
    cli()
