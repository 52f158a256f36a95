from __future__ import annotations

from pathlib import Path

import typer

app = typer.Typer(name="scaffoldcheck", help="Smoke-test a backend project's scaffolding")


@app.command()
def run(
    project_dir: str = typer.Argument(".", help="Root of the project to check"),
    config: str | None = typer.Option(
        None,
        "--config",
        "-c",
        help="Checklist YAML (defaults to <project_dir>/scaffoldcheck.yaml if present)",
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable debug output to stderr"
    ),
    debug_log: str | None = typer.Option(None, help="Write debug output to this file"),
    junit: str | None = typer.Option(None, help="Write a JUnit XML report to this path"),
):
    """Run the checklist against a project directory."""
    from pydantic import ValidationError

    from scaffoldcheck.config import DEFAULT_CONFIG_NAME, ChecklistConfig, load_config
    from scaffoldcheck.runner import Runner
    from scaffoldcheck.verbose import setup_logger

    project_root = Path(project_dir)
    if not project_root.is_dir():
        typer.echo(f"Error: project directory not found: {project_dir}", err=True)
        raise typer.Exit(1)

    if config is not None:
        config_path: Path | None = Path(config)
        if not config_path.exists():
            typer.echo(f"Error: config file not found: {config}", err=True)
            raise typer.Exit(1)
    else:
        candidate = project_root / DEFAULT_CONFIG_NAME
        config_path = candidate if candidate.is_file() else None

    try:
        checklist = load_config(config_path) if config_path else ChecklistConfig()
    except (ValueError, ValidationError, OSError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    logger = setup_logger(
        Path(debug_log) if debug_log else None,
        verbose=verbose,
        logger_name="scaffoldcheck",
    )
    if config_path:
        logger.debug(f"Loaded checklist from {config_path}")
    else:
        logger.debug("Using built-in checklist")

    runner = Runner(config=checklist, project_root=project_root, logger=logger)
    result = runner.execute()

    if junit:
        from scaffoldcheck.reporting.junit import write_junit

        report_path = write_junit(Path(junit), result)
        typer.echo(f"JUnit report: {report_path}")

    # The exit code is the only machine-readable outcome
    raise typer.Exit(result.tally.exit_code)


@app.command()
def init(
    dir: str = typer.Option(".", "--dir", help="Directory to write scaffoldcheck.yaml into"),
    force: bool = typer.Option(False, "--force", help="Overwrite an existing file"),
):
    """Write the built-in checklist to scaffoldcheck.yaml for editing."""
    from scaffoldcheck.config import DEFAULT_CONFIG_NAME, ChecklistConfig, dump_config

    target_dir = Path(dir)
    target_dir.mkdir(parents=True, exist_ok=True)

    target = target_dir / DEFAULT_CONFIG_NAME
    if target.exists() and not force:
        typer.echo(f"{DEFAULT_CONFIG_NAME} already exists in {dir}, skipping.")
        return

    target.write_text(dump_config(ChecklistConfig()))
    typer.echo(f"Wrote checklist: {target}")
