import logging
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from gosplit import __version__
from gosplit.config import get_config
from gosplit.exceptions import GoSplitError, UsageError
from gosplit.splitting import FileSplitter

console = Console()
err_console = Console(stderr=True)
app = typer.Typer(
    name='gosplit',
    help='Split a Go source file into several well-formed files',
    no_args_is_help=True,
)


def parse_count(value: str) -> int:
    """Parse the requested number of files, which must be a positive integer."""
    try:
        count = int(value)
    except ValueError:
        count = 0
    if count < 1:
        raise UsageError('num_files must be a positive integer')
    return count


def setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format='%(message)s',
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


@app.command()
def split(
    input_file: Annotated[str, typer.Argument(help='The Go source file to split.')],
    num_files: Annotated[
        str, typer.Argument(help='Number of files to split it into.')
    ],
    config: Annotated[
        str | None,
        typer.Option(
            '--config', '-c', help='Path to configuration file (YAML or JSON)'
        ),
    ] = None,
    verbose: Annotated[
        bool, typer.Option('--verbose', '-v', help='Log every splitting step.')
    ] = False,
) -> None:
    """Split a Go file into NUM_FILES files next to it.

    Functions are spread over the files in order; the first file also gets
    every type, const and var declaration. Existing files are never
    overwritten.

    Examples:
        gosplit split internal/handlers.go 3
        gosplit split handlers.go 2 --config gosplit.yaml
    """
    setup_logging(verbose)

    try:
        count = parse_count(num_files)
        splitter = FileSplitter(get_config(config))
        for emitted in splitter.iter_split(input_file, count):
            console.print(
                f'Created: {emitted.path}',
                markup=False,
                highlight=False,
                soft_wrap=True,
            )
    except GoSplitError as e:
        err_console.print(
            f'[red]Error:[/red] {escape(str(e))}', highlight=False, soft_wrap=True
        )
        raise typer.Exit(1)


@app.command()
def version() -> None:
    """Show the version of gosplit."""
    console.print(f'gosplit version: {__version__}')


if __name__ == '__main__':
    app()
