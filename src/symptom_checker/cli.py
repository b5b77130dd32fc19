"""
Command Line Interface

CLI for the symptom checker.
"""

import json
import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from symptom_checker.dataset.prevalence import DataLoadError, read_json_source
from symptom_checker.dataset.validators import validate_prevalence
from symptom_checker.matching.matching_types import MatchCandidate
from symptom_checker.pipeline.checker import SymptomChecker
from symptom_checker.pipeline.config import CheckerConfig, MatchingConfig, load_config
from symptom_checker.pipeline.session import SymptomSession
from symptom_checker.presentation.export import ontology_rows, write_ontology_csv
from symptom_checker.presentation.sunburst import build_sunburst
from symptom_checker.scoring.scoring_types import AnalysisResult

app = typer.Typer(
    name="symptom-checker",
    help="Fuzzy symptom matching and condition prioritization",
    add_completion=False,
)
console = Console()


def _configure_logging(verbose: bool) -> None:
    package_logger = logging.getLogger("symptom_checker")
    package_logger.handlers.clear()
    package_logger.addHandler(RichHandler(console=Console(stderr=True), show_path=False))
    package_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)


def _build_checker(
    config: Optional[Path],
    data: Optional[str],
    links: Optional[str],
    threshold: Optional[float] = None,
    verbose: bool = False,
) -> SymptomChecker:
    """Create and load a checker, exiting with an error if the dataset fails."""
    _configure_logging(verbose)
    checker_config = load_config(config) if config else CheckerConfig.from_env()

    if data:
        checker_config.dataset.prevalence_source = data
    if links:
        checker_config.dataset.links_source = links
    if threshold is not None:
        try:
            checker_config.matching = MatchingConfig(
                threshold=threshold,
                max_suggestions=checker_config.matching.max_suggestions,
            )
        except ValueError as e:
            console.print(f"[red]Error: {e}[/red]")
            raise typer.Exit(1)

    checker = SymptomChecker(checker_config)
    try:
        checker.load()
    except DataLoadError as e:
        console.print(f"[red]Error: Failed to load data: {e}[/red]")
        raise typer.Exit(1)
    return checker


def _format_match(match: MatchCandidate) -> str:
    return f"{match.simple} ({match.percentage:.1f}% match)"


def render_result(result: AnalysisResult, checker: SymptomChecker) -> None:
    """Print an analysis result to the console."""
    console.print(
        f"[bold]Prioritized conditions (based on {len(result.valid_symptoms)} symptoms):[/bold]"
    )

    if result.invalid_symptoms:
        console.print("\n[yellow]Warning: The following symptoms were not recognized:[/yellow]")
        for symptom in result.invalid_symptoms:
            console.print(f"  - '{symptom}'")
        for symptom, matches in result.suggested_matches.items():
            console.print(f"  Suggested matches for '{symptom}':")
            for match in matches:
                console.print(f"    • {_format_match(match)}")

    if not result.has_matches:
        console.print("\nNo conditions match the provided symptoms.")
        return

    table = Table(show_header=True, header_style="bold")
    table.add_column("Condition")
    table.add_column("Score", justify="right")
    table.add_column("Matched")
    table.add_column("Link")

    for entry in result.prioritized_conditions:
        matched = result.matched_symptoms.get(entry.condition, [])
        table.add_row(
            entry.condition,
            str(entry.score),
            ", ".join(matched) or "None",
            checker.condition_url(entry.condition) or "",
        )
    console.print(table)

    console.print(f"\n[bold green]TOP RECOMMENDATION: {result.top_condition}[/bold green]")

    others = result.other_conditions(checker.config.output.other_conditions)
    if others:
        console.print("Other potential conditions:")
        for entry in others:
            console.print(f"  - {entry.condition}: {entry.score} matching symptoms")


@app.command()
def analyze(
    symptoms: list[str] = typer.Argument(..., help="Symptoms to analyze"),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="Config file"),
    data: Optional[str] = typer.Option(None, "--data", "-d", help="Prevalence dataset path or URL"),
    links: Optional[str] = typer.Option(None, "--links", "-l", help="Condition links path or URL"),
    threshold: Optional[float] = typer.Option(None, "--threshold", "-t", help="Suggestion threshold"),
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Save result JSON to file"),
    chart: Optional[Path] = typer.Option(None, "--chart", help="Save sunburst chart data to file"),
    export: Optional[Path] = typer.Option(None, "--export", help="Save ontology codes CSV to file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Analyze symptoms and rank matching conditions."""
    checker = _build_checker(config, data, links, threshold, verbose)

    session = SymptomSession(symptoms)
    result = checker.analyze_session(session)

    if as_json:
        console.print_json(checker.to_json(result))
    else:
        render_result(result, checker)

    if output:
        checker.save(result, output)
        console.print(f"[green]Output saved to: {output}[/green]")

    if chart:
        chart.write_text(json.dumps(build_sunburst(result), indent=checker.config.output.indent))
        console.print(f"[green]Chart data saved to: {chart}[/green]")

    if export:
        rows = ontology_rows(result, checker.index)
        if not rows:
            console.print("[yellow]No top condition to export[/yellow]")
        else:
            write_ontology_csv(rows, export)
            console.print(f"[green]Ontology codes saved to: {export}[/green]")


@app.command()
def suggest(
    symptom: str = typer.Argument(..., help="Symptom text to match"),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="Config file"),
    data: Optional[str] = typer.Option(None, "--data", "-d", help="Prevalence dataset path or URL"),
    threshold: Optional[float] = typer.Option(None, "--threshold", "-t", help="Minimum similarity"),
    limit: int = typer.Option(10, "--limit", "-n", min=0, help="Maximum suggestions"),
) -> None:
    """Show the closest vocabulary matches for a symptom."""
    checker = _build_checker(config, data, None, threshold)
    matches = checker.suggest(symptom, limit=limit)

    if not matches:
        console.print(f"[yellow]No close matches for '{symptom}'[/yellow]")
        raise typer.Exit(0)

    for match in matches:
        console.print(f"  {_format_match(match)}  [dim]{match.full}[/dim]")


@app.command()
def symptoms(
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="Config file"),
    data: Optional[str] = typer.Option(None, "--data", "-d", help="Prevalence dataset path or URL"),
    contains: Optional[str] = typer.Option(None, "--filter", "-f", help="Only names containing text"),
    common: bool = typer.Option(False, "--common", help="List the quick-add symptoms"),
) -> None:
    """List known symptom names."""
    checker = _build_checker(config, data, None)
    names = checker.common_symptoms if common else checker.symptom_names()

    if contains:
        needle = contains.lower()
        names = [name for name in names if needle in name.lower()]

    for name in names:
        console.print(name)
    console.print(f"\n[dim]{len(names)} symptoms[/dim]")


@app.command("check-data")
def check_data(
    source: str = typer.Argument(..., help="Prevalence dataset path or URL"),
) -> None:
    """Validate a prevalence dataset."""
    try:
        document = read_json_source(source)
    except DataLoadError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    result = validate_prevalence(document)

    for issue in result.errors:
        console.print(f"[red]error[/red] {issue.path}: {issue.message}")
    for issue in result.warnings:
        console.print(f"[yellow]warning[/yellow] {issue.path}: {issue.message}")

    if not result.is_valid:
        console.print(f"\n[red]Invalid dataset: {result.error_count} errors[/red]")
        raise typer.Exit(1)

    console.print(
        f"[green]Dataset is valid[/green] "
        f"({len(document['symptoms'])} symptoms, {len(document['conditions'])} conditions, "
        f"{result.warning_count} warnings)"
    )


INTERACTIVE_HELP = """Enter a symptom to add it, or a command:
  :analyze      analyze the current symptoms
  :list         show the current symptoms
  :remove N     remove symptom number N
  :use N        replace an unrecognized symptom with suggestion N and re-analyze
  :clear        remove all symptoms
  :quit         exit"""


@app.command()
def interactive(
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="Config file"),
    data: Optional[str] = typer.Option(None, "--data", "-d", help="Prevalence dataset path or URL"),
    links: Optional[str] = typer.Option(None, "--links", "-l", help="Condition links path or URL"),
) -> None:
    """Build a symptom list interactively and analyze it."""
    checker = _build_checker(config, data, links)
    session = SymptomSession()
    # (invalid symptom, suggested simple name) pairs from the last analysis
    pending: list[tuple[str, str]] = []

    console.print(INTERACTIVE_HELP)
    console.print(f"[dim]Common symptoms: {', '.join(checker.common_symptoms)}[/dim]")

    while True:
        try:
            line = console.input("> ").strip()
        except EOFError:
            break

        if not line:
            continue
        if line in (":quit", ":q"):
            break

        if line == ":list":
            for i, symptom in enumerate(session, 1):
                console.print(f"  {i}. {symptom}")
        elif line == ":clear":
            session.clear()
            pending = []
        elif line.startswith(":remove"):
            position = _parse_position(line, len(session))
            if position is not None:
                console.print(f"Removed '{session.remove_at(position)}'")
        elif line.startswith(":use"):
            position = _parse_position(line, len(pending))
            if position is not None:
                invalid, replacement = pending[position]
                result = checker.apply_suggestion(session, invalid, replacement)
                if result is not None:
                    console.print(f"Replaced '{invalid}' with '{replacement}'")
                    pending = _show_interactive_result(result, checker)
        elif line in (":analyze", ":a"):
            if session.is_empty:
                console.print("[yellow]Add at least one symptom first[/yellow]")
                continue
            pending = _show_interactive_result(checker.analyze_session(session), checker)
        elif line.startswith(":"):
            console.print(INTERACTIVE_HELP)
        elif not session.add(line):
            console.print(f"[dim]'{line}' is already listed[/dim]")


def _parse_position(line: str, size: int) -> int | None:
    """Zero-based position from a ':command N' line, or None if invalid."""
    parts = line.split()
    if len(parts) != 2 or not parts[1].isdigit() or not 1 <= int(parts[1]) <= size:
        console.print(f"[red]Expected a number between 1 and {size}[/red]")
        return None
    return int(parts[1]) - 1


def _show_interactive_result(
    result: AnalysisResult, checker: SymptomChecker
) -> list[tuple[str, str]]:
    """Render a result and number its suggestions for ':use N'."""
    render_result(result, checker)

    pending = [
        (symptom, match.simple)
        for symptom, matches in result.suggested_matches.items()
        for match in matches
    ]
    if pending:
        console.print("\nSuggestions:")
        for i, (symptom, replacement) in enumerate(pending, 1):
            console.print(f"  {i}. '{symptom}' -> '{replacement}'")
    return pending


@app.command()
def version() -> None:
    """Show version information."""
    from symptom_checker import __version__

    console.print(f"symptom-checker version {__version__}")


def main() -> None:
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
