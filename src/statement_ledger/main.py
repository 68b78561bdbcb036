import sys
from pathlib import Path
from typing import Annotated

import typer

from statement_ledger.core import settings
from statement_ledger.core.errors import FormatError
from statement_ledger.logger import get_logger, setup_logging
from statement_ledger.services.ledger import ALL_CATEGORIES, Ledger

logger = get_logger(__name__)

STDIN_MARKER = "-"
FORMAT_ERROR_EXIT_CODE = 2

app = typer.Typer(
    add_completion=False,
    help="Parse a ';'-delimited bank statement export and print the ledger report as JSON.",
)


def read_statement(path: str, encoding: str) -> str:
    if path == STDIN_MARKER:
        return sys.stdin.read()
    return Path(path).read_text(encoding=encoding)


@app.command()
def report(
    path: Annotated[str, typer.Argument(help="Statement file, or '-' for stdin.")] = STDIN_MARKER,
    category: Annotated[
        str,
        typer.Option("--category", "-c", help="Only list transactions of this category ('all', 'uncategorized' or a name)."),
    ] = ALL_CATEGORIES,
    indent: Annotated[int | None, typer.Option(help="Indent the JSON output.")] = None,
) -> None:
    setup_logging()
    settings.log_environment()

    try:
        raw_text = read_statement(path, settings.get_statement_encoding())
    except (OSError, UnicodeDecodeError) as exc:
        logger.error(f"Could not read statement '{path}': {exc}")
        raise typer.Exit(1) from exc

    try:
        ledger = Ledger.from_text(raw_text)
    except FormatError as exc:
        logger.error(str(exc))
        raise typer.Exit(FORMAT_ERROR_EXIT_CODE) from exc

    output = ledger.report.model_copy(update={"transactions": ledger.filter(category)})
    typer.echo(output.model_dump_json(indent=indent))


if __name__ == "__main__":
    app()
