"""Command-line entry point for jsonrpc-http."""

from __future__ import annotations

import json
import logging
import sys
from typing import Annotated, Any

import structlog
import typer
from pydantic import ValidationError
from rich.console import Console

from jsonrpc_http import __version__
from jsonrpc_http.config import ClientSettings
from jsonrpc_http.exceptions import RpcError
from jsonrpc_http.rpc.client import dial_http

app = typer.Typer(
    name="jsonrpc-http",
    help="jsonrpc-http - call JSON-RPC 2.0 methods over HTTP",
    no_args_is_help=True,
    add_completion=False,
)

console = Console()
err_console = Console(stderr=True)


def _stderr_logger(*args: Any) -> structlog.PrintLogger:
    # Resolved per logger so that a replaced sys.stderr is honoured
    return structlog.PrintLogger(sys.stderr)


def configure_logging(verbose: bool) -> None:
    """Route structlog output to stderr, at debug level when verbose."""
    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.DEBUG if verbose else logging.WARNING
        ),
        logger_factory=_stderr_logger,
        cache_logger_on_first_use=False,
    )


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"jsonrpc-http version: {__version__}")
        raise typer.Exit(0)


@app.callback()
def main(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-v",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """
    jsonrpc-http - command-line client for JSON-RPC 2.0 over HTTP.

    Use 'jsonrpc-http COMMAND --help' for help with specific commands.
    """
    pass


@app.command()
def call(
    method: Annotated[str, typer.Argument(help="Method name, e.g. 'Service.Method'")],
    params: Annotated[
        str | None,
        typer.Argument(help="Call arguments as a JSON document"),
    ] = None,
    url: Annotated[
        str | None,
        typer.Option("--url", "-u", help="Endpoint URL (default: JSONRPC_HTTP_URL)"),
    ] = None,
    timeout: Annotated[
        float | None,
        typer.Option("--timeout", "-t", help="HTTP timeout in seconds"),
    ] = None,
    no_reply: Annotated[
        bool,
        typer.Option("--no-reply", help="Discard the result"),
    ] = False,
    json_output: Annotated[
        bool,
        typer.Option("--json", "-j", help="Print the result as compact JSON"),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", help="Log every call phase to stderr"),
    ] = False,
) -> None:
    """Call a JSON-RPC method and print its result.

    Examples:
        # Echo a string
        jsonrpc-http call Mock.Echo '"Hello there"' --url http://localhost:8080/rpc

        # Fire a call and ignore the result
        jsonrpc-http call Jobs.Start '{"name": "nightly"}' --no-reply
    """
    configure_logging(verbose)

    args: Any = None
    if params is not None:
        try:
            args = json.loads(params)
        except ValueError as e:
            err_console.print(f"[red]Invalid params JSON: {e}[/red]")
            raise typer.Exit(2)

    overrides: dict[str, Any] = {}
    if url is not None:
        overrides["url"] = url
    if timeout is not None:
        overrides["transport"] = {"timeout": timeout}

    try:
        settings = ClientSettings(**overrides)
    except ValidationError as e:
        err_console.print(f"[red]Invalid configuration: {e}[/red]")
        raise typer.Exit(2)

    try:
        with dial_http(settings=settings) as client:
            result = client.call(method, args, None if no_reply else Any)
    except (RpcError, ValueError) as e:
        err_console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    if no_reply:
        return
    if json_output:
        # Use print() for JSON to avoid Rich's text wrapping
        print(json.dumps(result))
    else:
        console.print_json(data=result)


def cli_main() -> None:
    """Entry point for the CLI."""
    try:
        app()
    except KeyboardInterrupt:
        console.print("\n[yellow]Operation cancelled by user[/yellow]")
        sys.exit(130)


if __name__ == "__main__":
    cli_main()
