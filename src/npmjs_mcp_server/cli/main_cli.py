# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

# Main entry point for the npmjs-mcp-server CLI tool

from typing import Annotated, Optional

import typer

from npmjs_mcp_server.cli.query_commands import (
    audit,
    details,
    downloads,
    simulate_audit_fix,
    summary,
    versions,
)
from npmjs_mcp_server.cli.serve_command import serve
from npmjs_mcp_server.config.cli_configs import default_config
from npmjs_mcp_server.utils.logging import parse_log_level, setup_logging

app = typer.Typer(add_completion=False)
app.command()(serve)
app.command()(summary)
app.command()(versions)
app.command()(downloads)
app.command()(details)
app.command()(audit)
app.command("simulate-audit-fix")(simulate_audit_fix)


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Diagnostic log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).",
        ),
    ] = "INFO",
    registry_url: Annotated[
        Optional[str],
        typer.Option(
            envvar="NPMJS_MCP_REGISTRY_URL",
            help=f"Base URL of the npm registry. Default is {default_config.registry_base_url}",
        ),
    ] = None,
    downloads_url: Annotated[
        Optional[str],
        typer.Option(
            envvar="NPMJS_MCP_DOWNLOADS_URL",
            help=(
                "Base URL of the npm downloads point API. "
                f"Default is {default_config.downloads_base_url}"
            ),
        ),
    ] = None,
    request_timeout: Annotated[
        Optional[float],
        typer.Option(
            envvar="NPMJS_MCP_REQUEST_TIMEOUT",
            min=0.1,
            help=(
                "Seconds to wait for each registry request. "
                f"Default is {default_config.request_timeout}"
            ),
        ),
    ] = None,
    command_timeout: Annotated[
        Optional[float],
        typer.Option(
            envvar="NPMJS_MCP_COMMAND_TIMEOUT",
            min=1.0,
            help=(
                "Seconds to wait for each npm audit invocation. "
                f"Default is {default_config.command_timeout}"
            ),
        ),
    ] = None,
    npm_executable: Annotated[
        Optional[str],
        typer.Option(
            "--npm",
            envvar="NPMJS_MCP_NPM",
            help="npm executable used for audits. Default is npm",
        ),
    ] = None,
) -> None:
    try:
        level = parse_log_level(log_level)
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="--log-level")
    setup_logging(level)

    ctx.obj = default_config.with_overrides(
        registry_base_url=registry_url.rstrip("/") if registry_url else None,
        downloads_base_url=downloads_url.rstrip("/") if downloads_url else None,
        request_timeout=request_timeout,
        command_timeout=command_timeout,
        npm_executable=npm_executable,
    )

    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        ctx.exit(2)


if __name__ == "__main__":
    app()
