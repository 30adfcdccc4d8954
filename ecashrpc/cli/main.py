"""Main CLI entry point for the eCash RPC client."""

import asyncio
import json
import logging
import os
import sys
from typing import Any, Tuple

import click
from rich import print as rprint
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..rpc.client import ECashClient
from ..rpc.config import Config
from ..rpc.methods import RPC_METHODS

console = Console()
logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False) -> None:
    """Setup logging configuration."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )


def load_config() -> Config:
    """Load client configuration from environment variables."""
    return Config(
        host=os.getenv("ECASH_RPC_HOST", "http://127.0.0.1"),
        port=int(os.getenv("ECASH_RPC_PORT", "8332")),
        username=os.getenv("ECASH_RPC_USER", ""),
        password=os.getenv("ECASH_RPC_PASSWORD", ""),
        timeout=int(os.getenv("ECASH_RPC_TIMEOUT", "3000")),
        debug=os.getenv("ECASH_RPC_DEBUG", "true").lower() in ("true", "1"),
    )


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not a valid RPC parameter")


def parse_param(value: str) -> Any:
    """
    Parse a command-line parameter.

    Values that are valid JSON (numbers, booleans, arrays, objects, quoted
    strings) are decoded; anything else is passed through as a string, so
    block hashes and addresses need no quoting. NaN and Infinity stay strings.
    """
    try:
        return json.loads(value, parse_constant=_reject_constant)
    except ValueError:
        return value


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """Python CLI to call an eCash node over JSON-RPC."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    setup_logging(verbose)


@cli.command()
def version() -> None:
    """Show version information."""
    from .. import __version__

    table = Table(title="eCash RPC CLI")
    table.add_column("Component", style="cyan")
    table.add_column("Version", style="green")

    table.add_row("ecashrpc", __version__)
    table.add_row(
        "Python",
        f"{sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}",
    )

    console.print(table)


@cli.command()
def env() -> None:
    """Show environment configuration."""
    config = load_config()

    table = Table(title="Environment Configuration")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")

    table.add_row("Endpoint", config.url)
    table.add_row("Username", config.username or "Not set")
    table.add_row("Password", "********" if config.password else "Not set")
    table.add_row("Timeout (ms)", str(config.timeout))
    table.add_row("Debug", str(config.debug))

    console.print(table)


@cli.command("methods")
def list_methods() -> None:
    """List the named RPC wrappers."""
    table = Table(title="RPC Methods")
    table.add_column("Client Method", style="cyan")
    table.add_column("RPC Method", style="green")

    for name, wire_name in sorted(RPC_METHODS.items()):
        table.add_row(name, wire_name)

    console.print(table)


@cli.command("call")
@click.argument("method")
@click.argument("params", nargs=-1)
def call_method(method: str, params: Tuple[str, ...]) -> None:
    """Call METHOD on the node with optional PARAMS."""
    async def _main() -> None:
        config = load_config()
        async with ECashClient(config) as client:
            result = await client.call(method, *[parse_param(p) for p in params])
            console.print_json(json.dumps(result))

    try:
        asyncio.run(_main())
    except Exception as e:
        rprint(f"[red]Error: {escape(str(e))}[/red]")
        sys.exit(1)


@cli.command()
def info() -> None:
    """Show blockchain information."""
    async def _main() -> None:
        config = load_config()
        async with ECashClient(config) as client:
            chain_info = await client.get_blockchain_info()

            table = Table(title="Blockchain Info")
            table.add_column("Property", style="cyan")
            table.add_column("Value", style="green")

            for key, value in chain_info.items():
                if isinstance(value, (dict, list)):
                    value = json.dumps(value)
                table.add_row(key, str(value))

            console.print(table)

    try:
        asyncio.run(_main())
    except Exception as e:
        rprint(f"[red]Error: {escape(str(e))}[/red]")
        sys.exit(1)


def main() -> None:
    """Main CLI entry point."""
    cli()
