"""Main CLI entry point for portfolio-content."""

import json
import sys
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from portfolio_content import __version__
from portfolio_content.config import ContentConfig, load_config
from portfolio_content.config.defaults import DEFAULT_OUTPUT_DIR
from portfolio_content.content.repository import ContentRepository
from portfolio_content.models.enums import ContentKind
from portfolio_content.output.index_writer import ContentIndexWriter, build_index
from portfolio_content.utils.logging import setup_logging

app = typer.Typer(
    name="portfolio-content",
    help="Inspect and export portfolio projects and updates.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

# Console for rich output
console = Console()
err_console = Console(stderr=True)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"portfolio-content version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        Optional[bool],
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit.",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Portfolio content tools.

    Read the markdown projects and updates of the portfolio site.
    """
    pass


# Common options used across commands
ConfigOption = Annotated[
    Optional[Path],
    typer.Option(
        "--config",
        "-c",
        help="Path to configuration file.",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
    ),
]

RootOption = Annotated[
    Optional[Path],
    typer.Option(
        "--root",
        "-r",
        help="Content root directory (holds projects/ and updates/).",
        file_okay=False,
        dir_okay=True,
    ),
]

JsonOption = Annotated[
    bool,
    typer.Option(
        "--json",
        help="Print JSON instead of a table.",
    ),
]

SkipInvalidOption = Annotated[
    Optional[bool],
    typer.Option(
        "--skip-invalid/--strict",
        help="Leave out files with malformed front-matter instead of failing.",
    ),
]

LogFileOption = Annotated[
    Optional[Path],
    typer.Option(
        "--log-file",
        help="Also write DEBUG logs to this file.",
        dir_okay=False,
    ),
]

VerboseOption = Annotated[
    int,
    typer.Option(
        "--verbose",
        "-v",
        help="Verbosity level (0=quiet, 1=normal, 2=verbose, 3=debug).",
        min=0,
        max=3,
        count=True,
    ),
]


def _repository(
    config: Optional[Path],
    root: Optional[Path],
    verbose: int,
    skip_invalid: Optional[bool] = None,
    log_file: Optional[Path] = None,
) -> ContentRepository:
    setup_logging(verbosity=verbose, log_file=log_file)
    cfg = load_config(
        config_path=config,
        content_root=root,
        skip_invalid=skip_invalid,
        verbose=verbose,
    )
    return ContentRepository(config=cfg)


def _fail(e: Exception, verbose: int) -> None:
    err_console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
    if verbose >= 2:
        err_console.print_exception()
    sys.exit(1)


def _summary_table(kind: ContentKind, summaries: list) -> Table:
    table = Table(title=kind.value.capitalize())
    table.add_column("Slug", style="cyan")
    table.add_column("Date", style="green")
    table.add_column("Title")
    if kind == ContentKind.PROJECTS:
        table.add_column("Tech", style="magenta")
        for project in summaries:
            row = (project.slug, project.date, project.title, ", ".join(project.tech))
            table.add_row(*map(escape, row))
    else:
        table.add_column("Tags", style="magenta")
        for update in summaries:
            row = (update.slug, update.date, update.title, ", ".join(update.tags or []))
            table.add_row(*map(escape, row))
    return table


@app.command("list")
def list_content(
    kind: Annotated[ContentKind, typer.Argument(help="Document kind.")],
    limit: Annotated[
        Optional[int],
        typer.Option(
            "--limit",
            "-n",
            help="Show only the N most recent records.",
            min=1,
        ),
    ] = None,
    as_json: JsonOption = False,
    root: RootOption = None,
    config: ConfigOption = None,
    skip_invalid: SkipInvalidOption = None,
    log_file: LogFileOption = None,
    verbose: VerboseOption = 0,
) -> None:
    """List the records of a kind, newest first.

    Example:
        portfolio-content list projects --root ./content
    """
    try:
        repository = _repository(config, root, verbose, skip_invalid, log_file)
        summaries = repository.list_summaries(kind)
    except Exception as e:
        _fail(e, verbose)

    if limit is not None:
        summaries = summaries[:limit]

    if as_json:
        console.print_json(json.dumps([s.model_dump() for s in summaries]))
        return

    if not summaries:
        directory = escape(str(repository.directory_for(kind)))
        console.print(f"[yellow]No {kind.value} found in {directory}[/yellow]")
        return

    console.print(_summary_table(kind, summaries))


@app.command()
def show(
    kind: Annotated[ContentKind, typer.Argument(help="Document kind.")],
    slug: Annotated[str, typer.Argument(help="Document slug (file name without extension).")],
    body: Annotated[
        bool,
        typer.Option(
            "--body/--no-body",
            help="Include the markdown body.",
        ),
    ] = True,
    as_json: JsonOption = False,
    root: RootOption = None,
    config: ConfigOption = None,
    log_file: LogFileOption = None,
    verbose: VerboseOption = 0,
) -> None:
    """Show one record with its body.

    Example:
        portfolio-content show updates hello-world
    """
    try:
        repository = _repository(config, root, verbose, log_file=log_file)
        record = repository.get_full_record(kind, slug)
    except Exception as e:
        _fail(e, verbose)

    data = record.model_dump(exclude=None if body else {"content"})

    if as_json:
        console.print_json(json.dumps(data))
        return

    table = Table(show_header=False, title=f"{kind.label.capitalize()}: {escape(record.slug)}")
    table.add_column("Field", style="cyan")
    table.add_column("Value")
    for field, value in data.items():
        if field == "content":
            continue
        if isinstance(value, list):
            value = ", ".join(value)
        table.add_row(field, "" if value is None else escape(str(value)))
    console.print(table)

    if body:
        console.print()
        typer.echo(record.content)


@app.command()
def slugs(
    kind: Annotated[ContentKind, typer.Argument(help="Document kind.")],
    root: RootOption = None,
    config: ConfigOption = None,
    skip_invalid: SkipInvalidOption = None,
    log_file: LogFileOption = None,
    verbose: VerboseOption = 0,
) -> None:
    """Print the slug of every record, one per line, newest first."""
    try:
        repository = _repository(config, root, verbose, skip_invalid, log_file)
        found = repository.list_slugs(kind)
    except Exception as e:
        _fail(e, verbose)

    for slug in found:
        typer.echo(slug)


@app.command()
def export(
    output: Annotated[
        Path,
        typer.Option(
            "--output",
            "-o",
            help="Output directory for the content index.",
        ),
    ] = DEFAULT_OUTPUT_DIR,
    root: RootOption = None,
    config: ConfigOption = None,
    skip_invalid: SkipInvalidOption = None,
    log_file: LogFileOption = None,
    verbose: VerboseOption = 1,
) -> None:
    """Write a JSON index of every project and update.

    Example:
        portfolio-content export --root ./content --output ./build
    """
    try:
        repository = _repository(config, root, verbose, skip_invalid, log_file)
        cfg: ContentConfig = repository.config
        writer = ContentIndexWriter(output, filename=cfg.output.index_filename)
        index = build_index(repository)
        path = writer.write(index)
    except Exception as e:
        _fail(e, verbose)

    console.print(f"[bold green]Exported[/bold green] {len(index.projects)} projects, "
                  f"{len(index.updates)} updates")
    console.print(f"  Index: {escape(str(path))}")


if __name__ == "__main__":
    app()
