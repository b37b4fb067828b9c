from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from assertcatch.config.loader import load_harness_config
from assertcatch.config.models import HarnessConfig
from assertcatch.isolation import IsolatedResult, IsolationError, run_isolated

app = typer.Typer(add_completion=False, no_args_is_help=True)
console = Console()


@app.callback()
def main() -> None:
    """Run scripts in isolation and check how their assertion failures end."""


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


def _outcome(result: IsolatedResult) -> str:
    if result.terminated_by_failure:
        return "[red]TERMINATED[/red] uncaught assertion failure"
    if result.exc_type is not None:
        return f"[yellow]TERMINATED[/yellow] uncaught {escape(result.exc_type)}"
    if result.terminated:
        return "[yellow]TERMINATED[/yellow]"
    return "[green]COMPLETED[/green]"


def _print_result(script: Path, result: IsolatedResult) -> None:
    table = Table(title="Isolated Run", show_lines=False)
    table.add_column("Field")
    table.add_column("Value")
    table.add_row("Script", escape(str(script)))
    table.add_row("Exit code", str(result.returncode))
    table.add_row("Outcome", _outcome(result))
    if result.failure is not None:
        table.add_row("Message", escape(result.failure.message))
        table.add_row("Location", escape(f"{result.failure.file}:{result.failure.line}"))
    elif result.exc_message is not None:
        table.add_row("Message", escape(result.exc_message))
    table.add_row("Wall (ms)", str(result.wall_ms))
    console.print(table)


@app.command(context_settings={"allow_extra_args": True, "ignore_unknown_options": True})
def run(
    ctx: typer.Context,
    script: str = typer.Argument(..., help="Python script to run in a child interpreter"),
    config: Optional[str] = typer.Option(None, "--config", help="Harness config file or directory"),
    timeout: Optional[float] = typer.Option(None, "--timeout", help="Override the child timeout in seconds"),
    expect_message: Optional[str] = typer.Option(
        None,
        "--expect-message",
        help="Require the uncaught failure to carry this message",
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Log harness activity"),
) -> None:
    """Run SCRIPT and pass only if it terminates through an uncaught assertion failure."""
    _configure_logging(verbose)
    script_args = list(ctx.args)

    try:
        harness = load_harness_config(Path(config)) if config else HarnessConfig()
        if timeout is not None:
            harness = HarnessConfig.model_validate({**harness.model_dump(), "timeout_s": timeout})
    except Exception as exc:
        console.print(f"[red]Failed to load config:[/red] {escape(str(exc))}")
        raise typer.Exit(code=1)

    script_path = Path(script)
    try:
        result = run_isolated(script_path, script_args, harness)
    except (IsolationError, FileNotFoundError) as exc:
        console.print(f"[red]Isolated run failed:[/red] {escape(str(exc))}")
        raise typer.Exit(code=1)

    _print_result(script_path, result)
    if result.stderr_tail and result.failure is None:
        console.print("\n".join(result.stderr_tail), markup=False, highlight=False)

    if not result.terminated_by_failure:
        console.print("[red]Expected an uncaught assertion failure[/red]")
        raise typer.Exit(code=1)
    if expect_message is not None and result.failure.message != expect_message:
        console.print(
            f"[red]Unexpected failure message:[/red] {escape(repr(result.failure.message))} (expected {escape(repr(expect_message))})"
        )
        raise typer.Exit(code=1)
    raise typer.Exit(code=0)
