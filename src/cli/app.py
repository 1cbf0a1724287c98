"""Typer CLI entrypoint for contract analysis and questions."""

from __future__ import annotations

from pathlib import Path

import typer

from contract_qa import __version__
from cli.commands import config as config_commands
from core.config import get_settings
from core.logging import configure_logging

app = typer.Typer(
    help=(
        "Contract QA command line tool\n\n"
        "Extract headings and paragraphs from contracts and ask questions about them.\n"
    ),
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    add_completion=True,
)
app.add_typer(config_commands.app, name="config")


@app.callback()
def root(
    ctx: typer.Context,
    version_flag: bool = typer.Option(
        False,
        "-v",
        "--version",
        help="Print the version and exit",
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging"),
) -> None:
    if version_flag:
        typer.echo(__version__)
        raise typer.Exit()
    configure_logging("DEBUG" if verbose else get_settings().log_level)
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


@app.command(help="Analyze a PDF and print its structured content")
def analyze(
    pdf_path: Path = typer.Argument(
        ...,
        exists=True,
        dir_okay=False,
        readable=True,
        metavar="PDF",
    ),
    json_out: bool = typer.Option(False, "--json", help="Emit the structured content as JSON"),
    items: int = typer.Option(20, "--items", help="Number of items to list in the summary"),
) -> None:
    from schemas.requests import ContractInput
    from services.contract_runner import run_analysis

    result = run_analysis(ContractInput(pdf_path=str(pdf_path)))
    _emit_content(result.content, json_out=json_out, items=items)
    for warning in result.warnings:
        typer.echo(f"Warning: {warning}", err=True)


@app.command(help="Extract structured content from a saved analysis result JSON")
def extract(
    result_path: Path = typer.Argument(
        ...,
        exists=True,
        dir_okay=False,
        readable=True,
        metavar="RESULT_JSON",
    ),
    json_out: bool = typer.Option(False, "--json", help="Emit the structured content as JSON"),
    items: int = typer.Option(20, "--items", help="Number of items to list in the summary"),
    prefix_match: str | None = typer.Option(
        None,
        "--prefix-match",
        help="Geometry prefix fallback: first|longest (defaults to configuration)",
    ),
) -> None:
    from cli.common import load_analysis_payload
    from extraction import extract_structured_content

    strategy = prefix_match or get_settings().geometry_prefix_match
    if strategy not in {"first", "longest"}:
        raise typer.BadParameter("--prefix-match must be 'first' or 'longest'")

    payload = load_analysis_payload(result_path)
    content = extract_structured_content(payload, prefix_match=strategy)
    _emit_content(content, json_out=json_out, items=items)


@app.command(help="Analyze a PDF and answer a question about it")
def ask(
    pdf_path: Path = typer.Argument(
        ...,
        exists=True,
        dir_okay=False,
        readable=True,
        metavar="PDF",
    ),
    question: str = typer.Argument(..., metavar="QUESTION"),
) -> None:
    from schemas.requests import ContractInput
    from services.contract_runner import run_analysis
    from services.qa import answer_question
    from services.session import DocumentSession

    session = DocumentSession()
    run_analysis(ContractInput(pdf_path=str(pdf_path)), session=session)
    context = session.require_context()
    typer.echo(answer_question(question, context.full_text))


@app.command(help="Run the HTTP API")
def serve() -> None:
    from api.main import serve as serve_api

    serve_api()


def _emit_content(content, *, json_out: bool, items: int) -> None:
    from cli.common import dump_content, emit_json, print_summary

    if json_out:
        emit_json(dump_content(content))
        return
    print_summary(content, show_items=items)


def main() -> None:
    app()


__all__ = ["app", "main"]
