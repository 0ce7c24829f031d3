#!/usr/bin/env python
"""
Run an item analysis on a CSV of exam responses and display the report.

The analysis runs in-process by default; pass --url to send the file to a
running item analysis API instead.
"""

import json
from datetime import datetime
from pathlib import Path

import httpx
import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from item_analysis.core.data import ParseError, load_csv_to_response_matrix
from item_analysis.scoring import AnalysisReport, analyze, build_report

PROJECT_DIR = Path(__file__).parent.parent.absolute()
DEFAULT_OUTPUT_DIR = PROJECT_DIR / "reports" / "item-analysis"

console = Console(force_terminal=True, legacy_windows=True)
app = typer.Typer()

BAND_STYLES = {
    "excellent": "green",
    "good": "green",
    "easy": "cyan",
    "acceptable": "yellow",
    "moderate": "yellow",
    "fair": "yellow",
    "questionable": "red",
    "hard": "red",
    "poor": "red",
}


def _styled(band: str) -> str:
    style = BAND_STYLES.get(band, "white")
    return f"[{style}]{band}[/{style}]"


def analyze_locally(input_path: Path) -> AnalysisReport:
    """Parse the CSV and run the scoring engine in-process."""
    try:
        matrix = load_csv_to_response_matrix(input_path)
    except ParseError as e:
        console.print(f"[red]Error loading CSV: {e}[/red]")
        raise typer.Exit(1) from e
    return build_report(analyze(matrix))


def analyze_remotely(input_path: Path, url: str) -> AnalysisReport:
    """POST the CSV text to the API and return the parsed report."""
    client = httpx.Client(base_url=url, timeout=30.0)
    try:
        resp = client.get("/api/v1/health")
        resp.raise_for_status()
    except httpx.HTTPError as e:
        console.print(f"[red]Server health check failed: {e}[/red]")
        raise typer.Exit(1) from e
    console.print("[green]Server is healthy[/green]")

    payload = {
        "csv_text": input_path.read_text(encoding="utf-8-sig"),
        "file_name": input_path.name,
    }
    resp = client.post("/api/v1/analysis/csv", json=payload)
    if resp.status_code >= 400:
        console.print(
            f"[red]Analysis failed (HTTP {resp.status_code}):[/red]"
        )
        try:
            body = resp.json()
            console.print(f"  {body.get('message', body)}")
        except ValueError:
            console.print(f"  {resp.text}")
        raise typer.Exit(1)

    return AnalysisReport.model_validate(resp.json())


def print_summary(report: AnalysisReport) -> None:
    """Print test-level statistics as a rich Panel."""
    agg = report.aggregate
    console.print(
        Panel(
            f"Students: [cyan]{report.n_students}[/cyan]\n"
            f"Items: [cyan]{report.n_items}[/cyan]\n"
            f"Cronbach's alpha: [cyan]{agg.cronbach_alpha:.3f}[/cyan] "
            f"({_styled(report.reliability_band)})\n"
            f"Mean total score: [cyan]{agg.mean:.2f}[/cyan]\n"
            f"Standard deviation: [cyan]{agg.standard_deviation:.2f}[/cyan]\n"
            f"SEM: [cyan]{agg.standard_error_of_measurement:.2f}[/cyan]",
            title="Reliability",
        )
    )


def print_items_table(report: AnalysisReport) -> None:
    """Pretty-print per-item statistics as a rich Table."""
    table = Table(title="Item Statistics")
    table.add_column("Item", style="bold")
    table.add_column("Difficulty", justify="right")
    table.add_column("", justify="left")
    table.add_column("Discrimination", justify="right")
    table.add_column("", justify="left")

    for item in report.items:
        table.add_row(
            item.item_id,
            f"{item.difficulty:.3f}",
            _styled(item.difficulty_band),
            f"{item.discrimination:.3f}",
            _styled(item.discrimination_band),
        )

    console.print(table)


def save_report(
    output_dir: Path, input_path: Path, report: AnalysisReport
) -> Path:
    """Save the report JSON to output_dir."""
    output_dir.mkdir(parents=True, exist_ok=True)
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    path = output_dir / f"{timestamp}_{input_path.stem}.json"
    with open(path, "w") as f:
        json.dump(report.model_dump(mode="json"), f, indent=2)
    return path


@app.command()
def main(
    input_path: Path = typer.Argument(
        ...,
        help="Path to CSV file (header row, then student_id + item scores)",
    ),
    url: str | None = typer.Option(
        None,
        help="Item analysis API base URL (analyse in-process if omitted)",
    ),
    output_dir: Path = typer.Option(
        DEFAULT_OUTPUT_DIR,
        "-o",
        "--output-dir",
        help="Directory for JSON report output",
    ),
) -> None:
    """Compute reliability and item statistics for an exam CSV."""

    if not input_path.exists():
        console.print(f"[red]File not found: {input_path}[/red]")
        raise typer.Exit(1)
    if input_path.suffix != ".csv":
        console.print("[red]Only .csv files are supported[/red]")
        raise typer.Exit(1)

    if url is None:
        report = analyze_locally(input_path)
    else:
        report = analyze_remotely(input_path, url)

    print_summary(report)
    print_items_table(report)
    if report.flagged_items:
        console.print(
            "[yellow]Items to review (poor discrimination): "
            f"{', '.join(report.flagged_items)}[/yellow]"
        )

    report_path = save_report(output_dir, input_path, report)
    console.print(f"Report saved: [cyan]{report_path}[/cyan]")


if __name__ == "__main__":
    app()
