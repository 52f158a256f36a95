"""Colored, line-oriented console output for a checklist run."""

from __future__ import annotations

import typer

from scaffoldcheck.assertions.base import AssertionResult
from scaffoldcheck.metrics import Tally

PASS_GLYPH = "✓"
FAIL_GLYPH = "✗"
WARN_GLYPH = "⚠"
RULE = "=" * 50


def print_header(port: int) -> None:
    typer.echo("\n" + RULE)
    typer.echo("🧪 Running Backend Checks")
    typer.echo(RULE)
    typer.echo(f"Target port: {port}")


def print_section(title: str) -> None:
    typer.echo(f"\n{title}")


def print_result(result: AssertionResult) -> None:
    if result.passed:
        glyph = typer.style(PASS_GLYPH, fg=typer.colors.GREEN)
    else:
        glyph = typer.style(FAIL_GLYPH, fg=typer.colors.RED)
    typer.echo(f"{glyph} {result.message}")


def print_note(message: str) -> None:
    """A passing line that is not part of the tally."""
    typer.echo(f"{typer.style(PASS_GLYPH, fg=typer.colors.GREEN)} {message}")


def print_warning(message: str) -> None:
    typer.echo(f"{typer.style(WARN_GLYPH, fg=typer.colors.YELLOW)} {message}")


def print_summary(tally: Tally) -> None:
    typer.echo("\n" + RULE)
    typer.echo("Check Summary")
    typer.echo(RULE)
    typer.echo(f"Total Checks: {tally.run}")
    typer.secho(f"Passed: {tally.passed}", fg=typer.colors.GREEN)
    typer.secho(f"Failed: {tally.failed}", fg=typer.colors.RED)
    typer.echo(RULE)

    if tally.all_passed:
        typer.secho(f"\n{PASS_GLYPH} All checks passed!\n", fg=typer.colors.GREEN)
    else:
        typer.secho(f"\n{FAIL_GLYPH} Some checks failed!\n", fg=typer.colors.RED)
