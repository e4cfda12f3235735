# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

import logging

import typer

from npmjs_mcp_server.server.mcp_server import SERVER_NAME, build_server

logger = logging.getLogger("npmjs_mcp_server")


def serve(ctx: typer.Context) -> None:
    """
    Start the MCP server on stdio, exposing the npm registry and audit tools.
    """
    server = build_server(ctx.obj)
    logger.info("Starting %s on stdio", SERVER_NAME)
    server.run(transport="stdio")
    logger.info("%s stopped", SERVER_NAME)
