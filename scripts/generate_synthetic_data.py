#!/usr/bin/env python
"""
Generate a synthetic exam response CSV from a Rasch model preset.
"""

from pathlib import Path

import typer
from rich.console import Console
from rich.panel import Panel

from item_analysis.core.data import response_matrix_to_csv
from item_analysis.synthetic_data import (
    generate_rasch_responses,
    get_preset,
)
from item_analysis.synthetic_data.presets import get_available_presets

PROJECT_DIR = Path(__file__).parent.parent.absolute()
DEFAULT_OUTPUT_DIR = PROJECT_DIR / "data" / "synthetic"

console = Console(force_terminal=True, legacy_windows=True)
app = typer.Typer()


@app.command()
def main(
    preset: str = typer.Option(
        "pilot_quiz",
        "-p",
        "--preset",
        help=f"Preset name ({', '.join(get_available_presets())})",
    ),
    output_path: Path | None = typer.Option(
        None,
        "-o",
        "--output",
        help="Output CSV path (defaults to data/synthetic/<preset>.csv)",
    ),
    seed: int | None = typer.Option(
        None,
        "-s",
        "--seed",
        help="Override the preset's random seed",
    ),
) -> None:
    """Write a synthetic response CSV."""
    try:
        config = get_preset(preset)
    except ValueError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1) from e

    if seed is not None:
        config.random_seed = seed

    if output_path is None:
        output_path = DEFAULT_OUTPUT_DIR / f"{preset}.csv"

    data = generate_rasch_responses(config)

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(response_matrix_to_csv(data.response_matrix))

    console.print(
        Panel(
            f"Preset: [cyan]{preset}[/cyan]\n"
            f"Students: [cyan]{config.n_students}[/cyan]\n"
            f"Items: [cyan]{config.n_items}[/cyan]\n"
            f"Seed: [cyan]{config.random_seed}[/cyan]\n"
            f"Output: [cyan]{output_path}[/cyan]",
            title="Synthetic Data",
        )
    )


if __name__ == "__main__":
    app()
