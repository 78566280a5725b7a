from pathlib import Path
from typing import Optional

import click
from rich.console import Console

from simple_clangd_gen import __version__
from simple_clangd_gen.config import load_config
from simple_clangd_gen.constants import PROG_NAME
from simple_clangd_gen.emitter import DatabaseEmitter
from simple_clangd_gen.errors import ClangdGenError
from simple_clangd_gen.generator import DatabaseGenerator
from simple_clangd_gen.tui import GeneratorConsoleUI


@click.command(
    name=PROG_NAME,
    context_settings={"help_option_names": ["-h", "--help"]},
    help="Generate a JSON compilation database from a layout CONFIG into OUTPUT.",
)
@click.argument("config", type=click.Path(dir_okay=False, path_type=Path))
@click.argument("output", type=click.Path(dir_okay=False, path_type=Path))
@click.option(
    "--root",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=None,
    help="Project root used for branch globs (default: current directory).",
)
@click.option(
    "--command",
    "use_command",
    is_flag=True,
    help="Emit a shell 'command' string instead of an 'arguments' list.",
)
@click.option("--dry-run", is_flag=True, help="Build the database without writing it.")
@click.option("-v", "--verbose", is_flag=True, help="Show every generated entry.")
@click.version_option(__version__, prog_name=PROG_NAME)
def cli(
    config: Path,
    output: Path,
    root: Optional[Path],
    use_command: bool,
    dry_run: bool,
    verbose: bool,
) -> None:
    ui = GeneratorConsoleUI(Console())

    try:
        configuration = load_config(config)
        result = DatabaseGenerator(configuration, root=root).build()
    except ClangdGenError as exc:
        raise click.ClickException(str(exc))

    ui.render_result(result, output=str(output), dry_run=dry_run, verbose=verbose)
    if dry_run:
        return

    try:
        written = DatabaseEmitter(output, use_command=use_command).write(result.entries)
    except ClangdGenError as exc:
        raise click.ClickException(str(exc))
    ui.render_written(str(output), written)


def main() -> int:
    try:
        cli(standalone_mode=False)
    except click.exceptions.Exit as exc:
        code = exc.exit_code
        return code if isinstance(code, int) else 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.exceptions.Abort:
        click.echo("Aborted!", err=True)
        return 1
    except (ClangdGenError, OSError) as exc:
        click.echo(f"Error: {exc}", err=True)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
