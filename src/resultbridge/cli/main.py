"""CLI entry point for resultbridge."""
from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import click

from resultbridge import __version__
from resultbridge.core.errors import ResultBridgeError
from resultbridge.core.results import ResultOutcome
from resultbridge.log import setup_logging
from resultbridge.reporting import serialize_definition, serialize_result
from resultbridge.tree import Tree, load_tree


CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConvertOptions:
    """Options controlling a single conversion."""

    definition_only: bool = False
    recursive: bool = True
    output: Optional[str] = None


def convert(tree: Tree, options: ConvertOptions) -> str:
    """Serialize a loaded tree according to ``options``."""

    if isinstance(tree, ResultOutcome):
        if options.definition_only:
            return serialize_definition(tree.node, options.recursive)
        return serialize_result(tree, options.recursive)
    return serialize_definition(tree, options.recursive)


def _print_version(_: click.Context, __: click.Parameter, value: bool) -> None:
    if not value or click.get_current_context().resilient_parsing:
        return
    click.echo(f"resultbridge {__version__}")
    raise click.exceptions.Exit()


@click.group(context_settings=CONTEXT_SETTINGS)
@click.option("--verbose", is_flag=True, help="Enable debug logging on stderr.")
@click.option(
    "--version",
    is_flag=True,
    callback=_print_version,
    expose_value=False,
    is_eager=True,
    help="Show the resultbridge version and exit.",
)
def cli(verbose: bool) -> None:
    """Translate result trees into test-suite/test-case markup."""

    setup_logging("DEBUG" if verbose else None)


@cli.command(name="convert")
@click.argument("tree_path", type=click.Path(exists=True, dir_okay=False))
@click.option("--definition-only", is_flag=True, help="Emit test definitions without result data.")
@click.option("--no-recursive", is_flag=True, help="Emit only the root element of a definition tree.")
@click.option("--output", "-o", type=str, help="Write the fragment to this path instead of stdout.")
def convert_command(tree_path: str, definition_only: bool, no_recursive: bool, output: Optional[str]) -> None:
    """Convert TREE_PATH (YAML or JSON) into markup."""

    options = ConvertOptions(definition_only=definition_only, recursive=not no_recursive, output=output)
    try:
        tree = load_tree(tree_path)
        fragment = convert(tree, options)
        if options.output:
            path = Path(options.output)
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(fragment, encoding="utf-8")
            logger.info("Wrote %d characters to %s", len(fragment), path)
            click.echo(f"Markup written to {path}", err=True)
        else:
            click.echo(fragment)
    except (ResultBridgeError, ValueError, OSError) as exc:
        raise click.ClickException(str(exc)) from exc


def main(argv: Optional[list[str]] = None) -> int:
    """Program entry point for console_scripts shim."""

    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=argv, prog_name="resultbridge", standalone_mode=True)
    except click.ClickException as err:  # pragma: no cover - click handles display
        err.show()
        return err.exit_code
    except SystemExit as exc:
        return int(exc.code or 0)
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
