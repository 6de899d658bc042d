from __future__ import annotations

import subprocess
from typing import List

import typer

from timings import TIMING_CONFIG, Stopwatch, TimeUnit, time_to_string

app = typer.Typer(add_completion=False, no_args_is_help=True)


def _unit_option(value: str) -> TimeUnit:
    try:
        return TimeUnit.parse(value)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc


@app.command("format")
def format_duration(
    value: int = typer.Argument(..., help="Duration as a whole count of --unit"),
    unit: str = typer.Option("ns", "--unit", "-u", help="Unit of VALUE: d, h, m, s, ms, us, ns"),
) -> None:
    """Print VALUE rendered as 1d.02h.03m.04s.000ms.000us.000ns."""

    typer.echo(time_to_string(value, _unit_option(unit)))


@app.command(
    "run",
    context_settings={"allow_extra_args": True, "ignore_unknown_options": True},
)
def run_command(
    command: List[str] = typer.Argument(..., help="Command and arguments to time"),
    precision: str = typer.Option("ms", "--precision", "-p", help="Finest unit to display"),
) -> None:
    """Run COMMAND and report how long it took on stderr."""

    unit = _unit_option(precision)
    prefix = TIMING_CONFIG.cli_prefix
    label = " ".join(command)

    sw = Stopwatch()
    try:
        with sw:
            proc = subprocess.run(command)
    except OSError as exc:
        typer.echo(f"{prefix} failed to start '{label}': {exc}", err=True)
        raise typer.Exit(code=127 if isinstance(exc, FileNotFoundError) else 126)

    text = sw.to_string(unit) or f"0{unit.suffix}."
    typer.echo(f"{prefix} {label} took {text}", err=True)
    raise typer.Exit(code=proc.returncode)


if __name__ == "__main__":
    app()
