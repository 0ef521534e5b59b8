"""CLI application for element-actions."""

import asyncio
import json
import logging
from dataclasses import replace
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from element_actions.browser.host import Host
from element_actions.browser.memory import MemoryHost
from element_actions.browser.playwright_host import PlaywrightHost, open_page
from element_actions.core.config import Config
from element_actions.core.exceptions import ElementActionsError
from element_actions.engine.batch import ActionRunner, build_actions
from element_actions.engine.collector import FaultCollector
from element_actions.models.descriptor import ActionDescriptor, OperationKind, load_descriptors

app = typer.Typer(
    name="element-actions",
    help="Run declarative element actions with retry and timing policies",
    no_args_is_help=True,
)

console = Console()
err_console = Console(stderr=True)

_OPERATION_HELP = {
    OperationKind.ACTIVATE: "Click the element",
    OperationKind.SET_VALUE: "Overwrite the element's value with 'value'",
    OperationKind.FOCUS: "Give the element input focus",
    OperationKind.READ_TEXT: "Log the element's text content",
}


def get_config() -> Config:
    """Load configuration and install the log handler."""
    try:
        config = Config.from_env()
        config.validate()
    except ValueError as e:
        err_console.print(f"[red]Configuration error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    logging.basicConfig(
        level=config.log_level_value,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )
    return config


def load_or_exit(actions_file: Path) -> list[ActionDescriptor]:
    """Load and validate descriptors, exiting with code 1 on bad input."""
    try:
        descriptors = load_descriptors(actions_file)
        build_actions(descriptors)
    except ElementActionsError as e:
        err_console.print(f"[red]Invalid actions:[/red] {escape(str(e))}")
        raise typer.Exit(1)
    return descriptors


async def _run_in_browser(
    url: str,
    descriptors: list[ActionDescriptor],
    config: Config,
) -> list[bool]:
    async with open_page(url, headless=config.browser_headless, timeout_ms=config.browser_timeout_ms) as page:
        host = PlaywrightHost(page, timeout_ms=config.browser_timeout_ms)
        return await ActionRunner(host, config).run(descriptors)


def print_results(
    descriptors: list[ActionDescriptor],
    results: list[bool],
    collectors: list[FaultCollector],
) -> None:
    """Print a results table."""
    table = Table(title="Action Results")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Kind", style="cyan")
    table.add_column("Locator", style="white")
    table.add_column("Result")
    table.add_column("Faults", justify="right")

    for index, (descriptor, ok, collector) in enumerate(zip(descriptors, results, collectors)):
        table.add_row(
            str(index),
            descriptor.kind_name,
            descriptor.locator or "-",
            "[green]ok[/green]" if ok else "[red]failed[/red]",
            str(len(collector)),
        )

    console.print(table)
    console.print(f"{sum(results)}/{len(results)} actions succeeded")


@app.command("run")
def run_actions(
    actions_file: Path = typer.Argument(..., help="JSON file of action descriptors"),
    fixture: Optional[Path] = typer.Option(
        None, "--fixture", "-f", help="JSON element fixture for an in-memory dry run"
    ),
    url: str = typer.Option("", "--url", "-u", help="Page to run against in Chromium"),
    headed: bool = typer.Option(False, "--headed", help="Show the browser window"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Execute a batch of actions against a fixture or a live page."""
    if bool(fixture) == bool(url):
        err_console.print("[red]Error:[/red] pass exactly one of --fixture or --url")
        raise typer.Exit(1)

    config = get_config()
    if headed:
        config.browser_headless = False

    descriptors = load_or_exit(actions_file)
    collectors = [FaultCollector() for _ in descriptors]
    descriptors = [
        replace(descriptor, on_attempt_error=collector)
        for descriptor, collector in zip(descriptors, collectors)
    ]

    if fixture:
        try:
            host: Host = MemoryHost.from_file(fixture)
        except (OSError, ValueError) as e:
            err_console.print(f"[red]Could not load fixture:[/red] {escape(str(e))}")
            raise typer.Exit(1)
        results = ActionRunner(host, config).run_sync(descriptors)
    else:
        try:
            results = asyncio.run(_run_in_browser(url, descriptors, config))
        except ImportError:
            err_console.print("[red]Playwright is not installed.[/red]")
            err_console.print("  pip install 'element-actions[browser]' && playwright install chromium")
            raise typer.Exit(1)

    if json_output:
        typer.echo(json.dumps({
            "results": results,
            "faults": [
                {"index": index, **fault.to_dict()}
                for index, collector in enumerate(collectors)
                for fault in collector.faults
            ],
        }))
    else:
        print_results(descriptors, results, collectors)

    if not all(results):
        raise typer.Exit(1)


@app.command("validate")
def validate_actions(
    actions_file: Path = typer.Argument(..., help="JSON file of action descriptors"),
) -> None:
    """Check that every descriptor in a file can be built."""
    descriptors = load_or_exit(actions_file)
    console.print(f"[green]{len(descriptors)} action(s) valid[/green]")


@app.command("info")
def show_info() -> None:
    """Show supported operations and configuration."""
    table = Table(title="Operations")
    table.add_column("Kind", style="cyan")
    table.add_column("Wire value", style="green")
    table.add_column("Effect", style="white")

    for kind in OperationKind:
        table.add_row(kind.name, kind.value, _OPERATION_HELP[kind])

    console.print(table)

    console.print("\n[yellow]Environment Variables:[/yellow]")
    console.print("  ELEMENT_ACTIONS_LOG_LEVEL          Log level (default: INFO)")
    console.print("  ELEMENT_ACTIONS_REDACT_VALUES      Mask typed values in logs (default: true)")
    console.print("  ELEMENT_ACTIONS_RECORDER_DELAY_MS  Recorded pre-delay (default: 200)")
    console.print("  ELEMENT_ACTIONS_RECORDER_RETRIES   Recorded retries (default: 2)")
    console.print("  ELEMENT_ACTIONS_BROWSER_HEADLESS   Headless Chromium (default: true)")
    console.print("  ELEMENT_ACTIONS_BROWSER_TIMEOUT_MS Browser timeout (default: 30000)")


@app.command("version")
def show_version() -> None:
    """Show version information."""
    from element_actions import __version__
    console.print(f"element-actions v{__version__}")


def main() -> None:
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
