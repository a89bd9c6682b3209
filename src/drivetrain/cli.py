"""CLI entry point for the gearbox ranking tool."""

import logging
import math
from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError

app = typer.Typer(
    name="drivetrain",
    help="Gearbox ranker - filters candidate stage parts and ranks gearboxes against a target reduction",
)


def _load(search_file: Path):
    from .config import load_search_spec

    if not search_file.exists():
        typer.echo(f"Error: Search file not found: {search_file}", err=True)
        raise typer.Exit(1)

    try:
        return load_search_spec(search_file)
    except ValidationError as e:
        typer.echo(f"Validation error: {e}", err=True)
        raise typer.Exit(1)


@app.command()
def validate(
    search_file: Path = typer.Argument(..., help="Path to YAML search file"),
) -> None:
    """Validate a search file without ranking."""
    typer.echo(f"Validating search file {search_file}...")
    spec = _load(search_file)

    typer.echo(f"Search file valid: {len(spec.gearboxes)} candidate gearboxes")
    typer.echo(f"  Target reduction: {spec.target_reduction:g}")
    for index, stages in enumerate(spec.gearboxes):
        teeth = ", ".join(f"{s.driving}:{s.driven}" for s in stages)
        typer.echo(f"  [{index}] {len(stages)} stage(s): {teeth}")


@app.command()
def rank(
    search_file: Path = typer.Argument(..., help="Path to YAML search file"),
    target: Optional[float] = typer.Option(
        None, "-t", "--target", help="Override the target reduction from the file"
    ),
    top: int = typer.Option(5, "-n", "--top", help="Number of gearboxes to print"),
    all_candidates: bool = typer.Option(
        False, "--all", help="Rank every candidate without filtering or placement checks"
    ),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Log filtering details"),
) -> None:
    """Screen candidate gearboxes and print the best matches."""
    from .ranking import rank_gearboxes
    from .screening import screen_and_rank

    if verbose:
        logging.basicConfig(
            level=logging.DEBUG, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        )

    spec = _load(search_file)
    target_reduction = target if target is not None else spec.target_reduction
    if not math.isfinite(target_reduction) or target_reduction <= 0:
        typer.echo("Error: target reduction must be a positive finite number", err=True)
        raise typer.Exit(1)

    gearboxes = spec.build_gearboxes()
    if all_candidates:
        ranked = rank_gearboxes(gearboxes, target_reduction)
    else:
        ranked = screen_and_rank(gearboxes, target_reduction, spec.screening)

    if not ranked:
        typer.echo("No candidate gearbox passed screening", err=True)
        raise typer.Exit(1)

    typer.echo(f"Target reduction {target_reduction:g}: {len(ranked)} of {len(gearboxes)} candidates\n")
    for position, gearbox in enumerate(ranked[:top], start=1):
        error = abs(gearbox.ratio() - target_reduction)
        teeth = " x ".join(f"{s.driving}:{s.driven}" for s in gearbox.stages)
        typer.echo(
            f"  {position:>2}. {gearbox.ratio():.3f}:1 (error {error:.3f}) "
            f"{gearbox.stage_count()} stage(s) [{teeth}] "
            f"teeth {gearbox.min_teeth()}-{gearbox.max_teeth()}"
        )


if __name__ == "__main__":
    app()
