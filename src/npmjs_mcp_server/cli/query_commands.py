# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

# One-shot commands printing the same JSON the MCP tools return

from collections.abc import Callable
from enum import Enum
from typing import Annotated, Optional

import typer

from npmjs_mcp_server.errors import NpmGatewayError
from npmjs_mcp_server.server.tools import NpmTools


class DownloadPeriod(str, Enum):
    LAST_DAY = "last-day"
    LAST_WEEK = "last-week"
    LAST_MONTH = "last-month"


PackageArgument = Annotated[
    str, typer.Argument(help="Name of the npm package, e.g. express or @scope/pkg.")
]
ProjectArgument = Annotated[
    str,
    typer.Argument(help="Path to a project directory containing a package-lock.json."),
]


def _emit(ctx: typer.Context, call: Callable[[NpmTools], str]) -> None:
    try:
        output = call(NpmTools(ctx.obj))
    except NpmGatewayError as e:
        typer.echo(f"Error: {e.message}", err=True)
        raise typer.Exit(code=1)
    typer.echo(output)


def _require_value(value: str, what: str) -> str:
    if not value.strip():
        raise typer.BadParameter(f"{what} cannot be empty")
    return value


def summary(ctx: typer.Context, package_name: PackageArgument) -> None:
    """
    Print the latest version, description, publish date and license of a package.
    """
    _require_value(package_name, "Package name")
    _emit(ctx, lambda tools: tools.get_npm_package_summary(package_name))


def versions(ctx: typer.Context, package_name: PackageArgument) -> None:
    """
    Print every published version of a package with its publish date.
    """
    _require_value(package_name, "Package name")
    _emit(ctx, lambda tools: tools.get_npm_package_versions(package_name))


def downloads(
    ctx: typer.Context,
    package_name: PackageArgument,
    period: Annotated[
        Optional[DownloadPeriod],
        typer.Option(help="Only fetch this period. Default is all of them."),
    ] = None,
) -> None:
    """
    Print download counts for the last day, week and month.
    """
    _require_value(package_name, "Package name")
    _emit(
        ctx,
        lambda tools: tools.get_npm_package_downloads(
            package_name, period.value if period else None
        ),
    )


def details(ctx: typer.Context, package_name: PackageArgument) -> None:
    """
    Print the package summary together with maintainers and keywords.
    """
    _require_value(package_name, "Package name")
    _emit(ctx, lambda tools: tools.get_npm_package_details(package_name))


def audit(ctx: typer.Context, project_path: ProjectArgument) -> None:
    """
    Run npm audit in a project and print the vulnerability summary.
    """
    _require_value(project_path, "Project path")
    _emit(ctx, lambda tools: tools.npm_audit(project_path))


def simulate_audit_fix(ctx: typer.Context, project_path: ProjectArgument) -> None:
    """
    Run npm audit fix --dry-run in a project and print what would change.
    """
    _require_value(project_path, "Project path")
    _emit(ctx, lambda tools: tools.simulate_npm_audit_fix(project_path))
