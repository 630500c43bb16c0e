"""``hellomcp serve``: run the greeting server on stdin/stdout."""

from __future__ import annotations

import sys

import click

from hellomcp.cli_commands._output import configure_logging, err_console


@click.command()
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Settings YAML file.",
)
@click.option("--name", default=None, help="Override the server name.")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=None,
    help="Log level for stderr output.",
)
@click.option("--wrap-results", is_flag=True, help="Nest tool results in an extra text item.")
@click.option("--telemetry", is_flag=True, help="Enable telemetry.")
def serve(
    config_path: str | None,
    name: str | None,
    log_level: str | None,
    wrap_results: bool,
    telemetry: bool,
) -> None:
    """Serve MCP requests over stdio until stdin is closed."""
    from hellomcp.config import ConfigError, TelemetrySettings, load_settings
    from hellomcp.server import create_default_server
    from hellomcp.utils.telemetry import configure_telemetry

    try:
        settings = load_settings(config_path)
    except ConfigError as exc:
        err_console.print(f"[red]Configuration error:[/red] {exc}")
        sys.exit(1)

    updates: dict[str, object] = {}
    if name:
        updates["name"] = name
    if log_level:
        updates["log_level"] = log_level.upper()
    if wrap_results:
        updates["wrap_tool_results"] = True
    if telemetry:
        updates["telemetry"] = (settings.telemetry or TelemetrySettings()).model_copy(
            update={"enabled": True}
        )
    settings = settings.model_copy(update=updates)

    configure_logging(settings.log_level)

    if settings.telemetry is not None and settings.telemetry.enabled:
        try:
            configure_telemetry(
                service_name=settings.name,
                service_version=settings.version,
                otlp_endpoint=settings.telemetry.otlp_endpoint,
            )
        except ImportError as exc:
            err_console.print(f"[red]Telemetry error:[/red] {exc}")
            sys.exit(1)

    server = create_default_server(settings)
    server.run()
