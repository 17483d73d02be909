from __future__ import annotations

import importlib
from pathlib import Path

import typer
import yaml

app = typer.Typer(name="moka", help="Run behavior-driven test trees")


@app.callback()
def main():
    """Run behavior-driven test trees."""


def load_target(target: str):
    """Import ``module:attr`` and return the Context it names.

    The attribute may be a Context or a zero-argument callable returning one.
    """
    from moka.tree import Context

    module_name, sep, attr = target.partition(":")
    if not sep or not module_name or not attr:
        raise ValueError(f"Target must look like 'module:attribute', got {target!r}")

    module = importlib.import_module(module_name)
    obj = module
    for part in attr.split("."):
        try:
            obj = getattr(obj, part)
        except AttributeError:
            raise ValueError(f"Module '{module_name}' has no attribute {attr!r}") from None

    if not isinstance(obj, Context) and callable(obj):
        try:
            obj = obj()
        except Exception as e:
            raise ValueError(f"Building {target!r} failed: {e}") from e
    if not isinstance(obj, Context):
        raise TypeError(f"Target {target!r} is not a Context: {type(obj).__name__}")
    return obj


@app.command()
def run(
    target: str = typer.Argument(help="Test tree to run, as module:attribute"),
    config: str | None = typer.Option(None, help="Path to run YAML config"),
    color: bool | None = typer.Option(
        None, "--color/--no-color", help="Decorate console output"
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable debug output to terminal"
    ),
    debug_log: str | None = typer.Option(None, help="Write a debug log to this file"),
    lenient: bool = typer.Option(
        False, "--lenient", help="Only hard failures produce a non-zero exit code"
    ),
):
    """Run a test tree and exit non-zero when it fails."""
    from moka.config import RunConfig, load_config
    from moka.runner import Runner
    from moka.verbose import setup_logger

    if config is not None:
        config_path = Path(config)
        if not config_path.exists():
            typer.echo(f"Error: config file not found: {config}", err=True)
            raise typer.Exit(1)
        try:
            run_config = load_config(config_path)
        except (ValueError, yaml.YAMLError) as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(1)
    else:
        run_config = RunConfig()

    overrides = {}
    if color is not None:
        overrides["color"] = color
    if verbose:
        overrides["verbose"] = True
    if debug_log is not None:
        overrides["debug_log"] = debug_log
    if lenient:
        overrides["strict"] = False
    run_config = run_config.model_copy(update=overrides)

    try:
        root = load_target(target)
    except (ImportError, ValueError, TypeError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    logger = setup_logger(
        debug_file=Path(run_config.debug_log) if run_config.debug_log else None,
        verbose=run_config.verbose,
        logger_name=f"moka_{target}",
    )

    runner = Runner(config=run_config, logger=logger)
    try:
        report = runner.execute(root)
    except Exception as e:
        # setup/teardown errors are not reported per test
        typer.echo(f"Error: run aborted: {e}", err=True)
        raise typer.Exit(1)
    finally:
        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)

    typer.echo(report.summary())

    if run_config.strict:
        failed = not report.passed
    else:
        failed = runner.hard_failures > 0
    if failed:
        raise typer.Exit(1)
