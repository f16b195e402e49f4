from __future__ import annotations

from pathlib import Path

import typer

app = typer.Typer(name="tripwire", help="Run hand-listed test routines built on tripwire checks")


@app.command()
def run(
    suite: str = typer.Argument(help="Path to suite YAML file"),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable debug output to stderr"
    ),
    debug_log: str | None = typer.Option(
        None, "--debug-log", help="Append debug output to this file"
    ),
):
    """Run the routines of a suite file and exit with 0 (passed) or 1 (failed)."""
    import yaml
    from pydantic import ValidationError

    from tripwire.config import load_suite, resolve_suite
    from tripwire.driver import run_tests
    from tripwire.verbose import setup_logger

    suite_path = Path(suite)
    if not suite_path.exists():
        typer.echo(f"Error: suite file not found: {suite}", err=True)
        raise typer.Exit(2)

    try:
        suite_config = load_suite(suite_path)
        routines = resolve_suite(suite_config)
    except (ValidationError, ValueError, yaml.YAMLError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(2)

    logger = setup_logger(
        Path(debug_log) if debug_log else None, verbose=verbose
    )
    logger.debug(f"Loaded suite '{suite_config.name}' from {suite_path}")

    status = run_tests(suite_config.name, routines, logger=logger)
    raise typer.Exit(status)


@app.command()
def init(
    dir: str = typer.Option(
        "tripwire-tests", "--dir", help="Directory to initialize the suite in"
    ),
):
    """Initialize a directory with an example suite and test module."""
    project_dir = Path(dir)
    project_dir.mkdir(parents=True, exist_ok=True)

    suite = project_dir / "suite.yaml"
    if suite.exists():
        typer.echo(f"suite.yaml already exists in {dir}, skipping.")
        return

    suite.write_text("""\
name: Example
paths:
  - .
routines:
  - example_checks:test_arithmetic
  - example_checks:test_errors
""")

    (project_dir / "example_checks.py").write_text('''\
from tripwire import check_equal, check_throws, check_true, run_main


def test_arithmetic():
    check_equal(2 + 2, 4)
    check_true(10 > 3)


def test_errors():
    check_throws(lambda: int("not a number"), ValueError)


if __name__ == "__main__":
    run_main("Example", test_arithmetic, test_errors)
''')

    typer.echo(f"Initialized suite in {dir}:")
    typer.echo("  suite.yaml         - example suite")
    typer.echo("  example_checks.py  - example test routines")


@app.command()
def schema(
    out: str | None = typer.Option(
        None, help="Write the JSON Schema here instead of printing it"
    ),
):
    """Generate the JSON Schema for suite files."""
    import json

    from tripwire.schema import generate_json_schema, write_json_schema

    if out is None:
        typer.echo(json.dumps(generate_json_schema(), indent=2))
        return

    write_json_schema(Path(out))
    typer.echo(f"Schema written: {out}")
