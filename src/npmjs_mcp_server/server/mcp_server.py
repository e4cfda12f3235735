# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

# Registration of the npm tools and prompts on a FastMCP server.
# Parameter names are camelCase: they are the argument names on the wire.

import asyncio
from typing import Annotated, Literal

from mcp.server.fastmcp import FastMCP
from pydantic import Field

from npmjs_mcp_server.config.cli_configs import Config
from npmjs_mcp_server.server import prompts
from npmjs_mcp_server.server.tools import NpmTools

SERVER_NAME = "npmjs-mcp-server"

PackageName = Annotated[
    str, Field(min_length=1, description="Name of the npm package, e.g. express")
]
ProjectPath = Annotated[
    str,
    Field(
        min_length=1,
        description="Directory of a project containing a package-lock.json",
    ),
]
Period = Literal["last-day", "last-week", "last-month"]


def build_server(config: Config, tools: NpmTools | None = None) -> FastMCP:
    npm_tools = tools or NpmTools(config)
    server = FastMCP(SERVER_NAME)

    # Registry calls and npm invocations block, keep them off the event loop.

    @server.tool(
        name="get_npm_package_summary",
        description=(
            "Provides essential package details: latest version, description, "
            "publish date, license, etc."
        ),
    )
    async def get_npm_package_summary(packageName: PackageName) -> str:
        return await asyncio.to_thread(npm_tools.get_npm_package_summary, packageName)

    @server.tool(
        name="get_npm_package_versions",
        description=(
            "Lists available package versions along with their respective "
            "publish dates."
        ),
    )
    async def get_npm_package_versions(packageName: PackageName) -> str:
        return await asyncio.to_thread(npm_tools.get_npm_package_versions, packageName)

    @server.tool(
        name="get_npm_package_downloads",
        description=(
            "Provides download statistics for specified or all default periods."
        ),
    )
    async def get_npm_package_downloads(
        packageName: PackageName, period: Period | None = None
    ) -> str:
        return await asyncio.to_thread(
            npm_tools.get_npm_package_downloads, packageName, period
        )

    @server.tool(
        name="get_npm_package_details",
        description=(
            "Offers a more comprehensive set of information, including "
            "maintainers, repository URL, homepage, and keywords."
        ),
    )
    async def get_npm_package_details(packageName: PackageName) -> str:
        return await asyncio.to_thread(npm_tools.get_npm_package_details, packageName)

    @server.tool(
        name="npm_audit",
        description=(
            "Performs an audit of packages in the specified project directory and "
            "returns a structured summary of vulnerabilities and metadata"
        ),
    )
    async def npm_audit(projectPath: ProjectPath) -> str:
        return await asyncio.to_thread(npm_tools.npm_audit, projectPath)

    @server.tool(
        name="simulate_npm_audit_fix",
        description=(
            "Simulates `npm audit fix --dry-run` in the specified project "
            "directory and returns a structured summary of potential changes."
        ),
    )
    async def simulate_npm_audit_fix(projectPath: ProjectPath) -> str:
        return await asyncio.to_thread(npm_tools.simulate_npm_audit_fix, projectPath)

    @server.prompt(
        name="get_summary_prompt",
        description=(
            "Generates a request to get a quick summary of a specified npm package."
        ),
    )
    def get_summary_prompt(packageName: PackageName) -> str:
        return prompts.summary_prompt(packageName)

    @server.prompt(
        name="get_details_prompt",
        description=(
            "Generates a request for full details of a specified npm package, "
            "including maintainers and repository URL."
        ),
    )
    def get_details_prompt(packageName: PackageName) -> str:
        return prompts.details_prompt(packageName)

    @server.prompt(
        name="find_homepage_prompt",
        description=(
            "Generates a request to find the official homepage for a specified "
            "npm package."
        ),
    )
    def find_homepage_prompt(packageName: PackageName) -> str:
        return prompts.homepage_prompt(packageName)

    @server.prompt(
        name="list_versions_prompt",
        description=(
            "Generates a request to list all available versions and their publish "
            "dates for a specified npm package."
        ),
    )
    def list_versions_prompt(packageName: PackageName) -> str:
        return prompts.list_versions_prompt(packageName)

    @server.prompt(
        name="get_version_date_prompt",
        description=(
            "Generates a request to find the publish date for a specific version "
            "of a specified npm package."
        ),
    )
    def get_version_date_prompt(
        packageName: PackageName,
        version: Annotated[str, Field(min_length=1)],
    ) -> str:
        return prompts.version_date_prompt(packageName, version)

    @server.prompt(
        name="get_downloads_prompt",
        description=(
            "Generates a request for the download count of a specified npm package "
            "over a specific time period."
        ),
    )
    def get_downloads_prompt(packageName: PackageName, timePeriod: Period) -> str:
        return prompts.downloads_prompt(packageName, timePeriod)

    @server.prompt(
        name="get_all_downloads_prompt",
        description=(
            "Generates a request for the download counts of a specified npm "
            "package for the last day, week, and month."
        ),
    )
    def get_all_downloads_prompt(packageName: PackageName) -> str:
        return prompts.all_downloads_prompt(packageName)

    @server.prompt(
        name="audit_project_prompt",
        description=(
            "Generates a request to audit the dependencies in a specified project "
            "directory for security vulnerabilities."
        ),
    )
    def audit_project_prompt(projectPath: ProjectPath) -> str:
        return prompts.audit_project_prompt(projectPath)

    @server.prompt(
        name="simulate_audit_fix_prompt",
        description=(
            "Generates a request to simulate running `npm audit fix` on a "
            "specified project directory."
        ),
    )
    def simulate_audit_fix_prompt(projectPath: ProjectPath) -> str:
        return prompts.simulate_audit_fix_prompt(projectPath)

    return server
