"""
Stratus CLI - Command-line interface for synthesizing stacks.
"""

import click
import logging
import sys
import importlib.util
from pathlib import Path

from stratus.core.stack import Stack, TEMPLATE_FORMATS

DEFAULT_OUTDIR = "stratus.out"


@click.group()
@click.version_option(version="0.1.0")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(verbose: bool):
    """
    Stratus - Stack-level custom resource providers, synthesized from Python.

    Define your stacks in Python and let Stratus write the templates.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@cli.command()
@click.argument("app_file", type=click.Path(exists=True))
@click.option(
    "--output",
    "-o",
    default=None,
    help="Output directory (defaults to the stack's outdir, then ./stratus.out)",
)
@click.option(
    "--stack",
    "-s",
    "stack_name",
    help="Name of the stack to synthesize (if multiple in file)",
)
@click.option("--format", type=click.Choice(TEMPLATE_FORMATS), default="json")
def synth(app_file: str, output: str | None, stack_name: str | None, format: str):
    """
    Synthesize stacks into templates.

    Loads the app file, finds every Stack defined at module level and
    writes its template and asset manifest.

    Example:
        stratus synth app.py
        stratus synth app.py --output ./out --format yaml
        stratus synth app.py --stack my-stack
    """
    stacks = _load_or_exit(app_file, stack_name)

    for stack in stacks:
        outdir = output or stack.outdir or DEFAULT_OUTDIR
        try:
            template_path = stack.synthesize(outdir=outdir, format=format)
        except Exception as e:
            click.echo(f"✗ Synthesis of '{stack.name}' failed: {e}", err=True)
            sys.exit(1)

        click.echo(f"✓ {stack.name}: {len(stack.list_resources())} resources")
        click.echo(f"  Template: {template_path}")


@cli.command(name="ls")
@click.argument("app_file", type=click.Path(exists=True))
@click.option(
    "--stack",
    "-s",
    "stack_name",
    help="Name of the stack to list (if multiple in file)",
)
def list_stacks(app_file: str, stack_name: str | None):
    """
    List stacks and their resources.

    Example:
        stratus ls app.py
    """
    stacks = _load_or_exit(app_file, stack_name)

    for stack in stacks:
        click.echo(stack.name)
        for resource in stack.list_resources():
            click.echo(f"  {resource.logical_id} ({resource.type})")


def _load_or_exit(app_file: str, stack_name: str | None) -> list[Stack]:
    try:
        stacks = _load_stacks(app_file, stack_name)
    except Exception as e:
        click.echo(f"✗ Failed to load {app_file}: {e}", err=True)
        sys.exit(1)

    if not stacks:
        what = f"stack '{stack_name}'" if stack_name else "any stack"
        click.echo(f"Error: Could not find {what} in {app_file}", err=True)
        sys.exit(1)

    return stacks


def _load_stacks(app_file: str, stack_name: str | None = None) -> list[Stack]:
    """
    Load stacks from a Python file.

    Args:
        app_file: Path to the Python file
        stack_name: Optional name of a single stack to return

    Returns:
        Stacks defined at module level, in definition order
    """
    module_name = f"stratus_app_{Path(app_file).stem}"
    spec = importlib.util.spec_from_file_location(module_name, app_file)
    module = importlib.util.module_from_spec(spec)
    sys.modules[module_name] = module
    spec.loader.exec_module(module)

    stacks = []
    for obj in vars(module).values():
        if isinstance(obj, Stack) and obj not in stacks:
            stacks.append(obj)

    if stack_name:
        stacks = [s for s in stacks if s.name == stack_name]

    return stacks


if __name__ == "__main__":
    cli()
