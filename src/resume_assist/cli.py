"""CLI interface using typer + rich."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import TypeVar

from dotenv import load_dotenv

load_dotenv()

import typer
import yaml
from pydantic import BaseModel, ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table

from resume_assist.config import load_config
from resume_assist.models.requests import AnalysisRequest, CoverLetterRequest, SummaryRequest
from resume_assist.models.results import GenerationReport
from resume_assist.services.generation import GenerationService
from resume_assist.usage.cost_calculator import calculate_cost

app = typer.Typer(
    name="resume-assist",
    help="AI resume summary, cover letter and ATS analysis generator",
    no_args_is_help=True,
)
console = Console()

RequestT = TypeVar("RequestT", bound=BaseModel)


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _load_request(path: Path, model: type[RequestT]) -> RequestT:
    """Read a request record from a YAML or JSON file."""
    if not path.exists():
        console.print(f"[red]Request file not found: {path}[/red]")
        raise typer.Exit(1)
    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
        return model.model_validate(raw)
    except (yaml.YAMLError, ValidationError) as e:
        console.print(f"[red]Invalid request file {path}:[/red]\n{e}")
        raise typer.Exit(1)


def _print_diagnostics(report: GenerationReport) -> None:
    for attempt in report.attempts:
        console.print(f"[dim]  {attempt.provider} failed: {attempt.cause}[/dim]")
    if report.used_fallback:
        console.print(f"[yellow]Default content used ({report.fallback_cause}).[/yellow]")
    else:
        console.print(f"[dim]Generated by {report.provider}[/dim]")
    if report.usage:
        cost = calculate_cost(report.usage)
        tokens_in = sum(u[1] for u in report.usage)
        tokens_out = sum(u[2] for u in report.usage)
        console.print(f"[dim]Tokens: {tokens_in} in / {tokens_out} out, est. ${cost:.4f}[/dim]")


def _write_output(output: Path | None, text: str) -> None:
    if output is None:
        return
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(text, encoding="utf-8")
    console.print(f"[green]Saved: {output}[/green]")


@app.command()
def summary(
    request_file: Path = typer.Argument(help="YAML/JSON file with name, experiences, educations, skills"),
    output: Path = typer.Option(None, "--output", "-o", help="Write the summary to this file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Generate a professional summary for a resume."""
    _setup_logging(verbose)
    request = _load_request(request_file, SummaryRequest)
    service = GenerationService.from_config(load_config())

    with console.status("Generating summary..."):
        report = asyncio.run(service.generate_summary_report(request))

    console.print(Panel(report.value, title=f"Professional Summary - {request.name}"))
    _print_diagnostics(report)
    _write_output(output, report.value)


@app.command("cover-letter")
def cover_letter(
    request_file: Path = typer.Argument(help="YAML/JSON file with name, jobTitle, companyName, skills"),
    output: Path = typer.Option(None, "--output", "-o", help="Write the letter to this file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Generate the body of a cover letter."""
    _setup_logging(verbose)
    request = _load_request(request_file, CoverLetterRequest)
    service = GenerationService.from_config(load_config())

    with console.status("Writing cover letter..."):
        report = asyncio.run(service.generate_cover_letter_report(request))

    console.print(Panel(report.value, title=f"{request.job_title} at {request.company_name}"))
    _print_diagnostics(report)
    _write_output(output, report.value)


def _score_color(score: int) -> str:
    if score >= 80:
        return "green"
    if score >= 60:
        return "yellow"
    return "red"


@app.command()
def analyze(
    request_file: Path = typer.Argument(help="YAML/JSON file with jobTitle, jobDescription, resumeText"),
    output: Path = typer.Option(None, "--output", "-o", help="Write the analysis JSON to this file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Score a resume for ATS compatibility against a job description."""
    _setup_logging(verbose)
    request = _load_request(request_file, AnalysisRequest)
    service = GenerationService.from_config(load_config())

    with console.status("Analyzing resume..."):
        report = asyncio.run(service.analyze_resume_report(request))

    result = report.value
    table = Table(title=f"ATS Analysis - {request.job_title}")
    table.add_column("Metric")
    table.add_column("Score", justify="right")
    for label, score in (
        ("Overall", result.score),
        ("Keyword match", result.keyword_match),
        ("Format", result.format_score),
        ("Content", result.content_score),
    ):
        color = _score_color(score)
        table.add_row(label, f"[{color}]{score}[/{color}]")
    console.print(table)
    console.print(Panel(result.feedback, title="Feedback"))

    console.print("\n[bold]Strengths:[/bold]")
    for item in result.strengths:
        console.print(f"  [green]+[/green] {item}")
    console.print("\n[bold]Improvements:[/bold]")
    for item in result.improvements:
        console.print(f"  [yellow]-[/yellow] {item}")
    console.print()

    _print_diagnostics(report)
    _write_output(output, result.model_dump_json(by_alias=True, indent=2))


@app.command()
def providers() -> None:
    """Show the configured provider order and whether each has an API key."""
    config = load_config()
    table = Table(title="Providers (in fallback order)")
    table.add_column("#", justify="right")
    table.add_column("Provider")
    table.add_column("Model")
    table.add_column("Key")
    for i, provider in enumerate(config.llm.providers, 1):
        has_key = provider.api_key is not None
        key_status = "[green]set[/green]" if has_key else f"[red]missing ({provider.api_key_env})[/red]"
        table.add_row(str(i), provider.name, provider.model, key_status)
    console.print(table)


if __name__ == "__main__":
    app()
