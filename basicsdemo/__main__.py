"""CLI for the basics demo.

Usage:
    python -m basicsdemo run                      # All steps, in order
    python -m basicsdemo run --step sum           # Single step
    python -m basicsdemo run --name Bob --count 3 # Override literals
    python -m basicsdemo list                     # Show available steps
"""

from __future__ import annotations

from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from basicsdemo.models import DEFAULT_COUNT, DEFAULT_NAME, DemoConfig
from basicsdemo.runner import run_demo
from basicsdemo.steps import list_steps, load_step

app = typer.Typer(
    name="basicsdemo",
    help="Walk through basic language constructs",
    no_args_is_help=True,
)
console = Console(stderr=True)


@app.command("list")
def cmd_list() -> None:
    """Show available steps."""
    table = Table(title="Demo Steps", show_header=True, header_style="bold")
    table.add_column("#", justify="right")
    table.add_column("Name", style="green", min_width=10)
    table.add_column("Description", min_width=30)

    for s in list_steps():
        table.add_row(str(s.order), s.name, s.description)

    console.print()
    console.print(table)
    console.print()


@app.command("run")
def cmd_run(
    step: Optional[str] = typer.Option(None, "--step", "-s", help="Run a single step (e.g., 'loop')"),
    name: str = typer.Option(DEFAULT_NAME, "--name", help="Name to greet"),
    count: int = typer.Option(DEFAULT_COUNT, "--count", help="Value compared against the threshold"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show progress on stderr"),
) -> None:
    """Run all steps, or a single one, printing each result."""
    if step and load_step(step) is None:
        names = ", ".join(s.name for s in list_steps())
        console.print(f"[red]Unknown step: {step}[/red]. Choose: {names}")
        raise typer.Exit(1)

    config = DemoConfig(name=name, count=count)
    if verbose:
        console.print(f"[bold]Running {step or 'all steps'}[/bold]")
    run_demo(config, typer.echo, console if verbose else None, step=step)


if __name__ == "__main__":
    app()
