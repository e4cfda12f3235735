# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

"""Tool bodies exposed by the MCP server.

Every tool returns the JSON text of its result; argument validation
happens in the protocol layer before these methods are called.
"""

import logging
from collections.abc import Callable

from npmjs_mcp_server.audit.npm_audit_runner import NpmAuditRunner
from npmjs_mcp_server.config.cli_configs import Config
from npmjs_mcp_server.downloads.download_aggregator import DownloadAggregator
from npmjs_mcp_server.metadata_normalizer.response_normalizer import (
    to_details,
    to_summary,
    to_versions,
)
from npmjs_mcp_server.registry_client.npm_registry_client import NpmRegistryClient
from npmjs_mcp_server.report_generator.report_generator import ReportGenerator
from npmjs_mcp_server.report_generator.writers.abstract_reporting_writer import (
    Reportable,
)
from npmjs_mcp_server.report_generator.writers.json_reporting_writer import (
    JSONReportingWriter,
)

logger = logging.getLogger("npmjs_mcp_server")


class NpmTools:
    def __init__(
        self,
        config: Config,
        registry_client: NpmRegistryClient | None = None,
        download_aggregator: DownloadAggregator | None = None,
        audit_runner: NpmAuditRunner | None = None,
        report_generator: ReportGenerator | None = None,
    ) -> None:
        self.config = config
        self.registry_client = registry_client or NpmRegistryClient(config)
        self.download_aggregator = download_aggregator or DownloadAggregator(
            self.registry_client
        )
        self.audit_runner = audit_runner or NpmAuditRunner(config)
        self.report_generator = report_generator or ReportGenerator(
            JSONReportingWriter()
        )

    def _report(self, tool_name: str, build: Callable[[], Reportable]) -> str:
        try:
            return self.report_generator.generate_report(build())
        except Exception as e:
            logger.error("Error in %s: %s", tool_name, e)
            raise

    def get_npm_package_summary(self, package_name: str) -> str:
        def build() -> Reportable:
            record = self.registry_client.fetch_package_record(package_name)
            return to_summary(record, self.registry_client.package_url(package_name))

        return self._report("get_npm_package_summary", build)

    def get_npm_package_versions(self, package_name: str) -> str:
        def build() -> Reportable:
            record = self.registry_client.fetch_package_record(package_name)
            return to_versions(record, self.registry_client.package_url(package_name))

        return self._report("get_npm_package_versions", build)

    def get_npm_package_downloads(
        self, package_name: str, period: str | None = None
    ) -> str:
        return self._report(
            "get_npm_package_downloads",
            lambda: self.download_aggregator.fetch_downloads(package_name, period),
        )

    def get_npm_package_details(self, package_name: str) -> str:
        def build() -> Reportable:
            record = self.registry_client.fetch_package_record(package_name)
            return to_details(record, self.registry_client.package_url(package_name))

        return self._report("get_npm_package_details", build)

    def npm_audit(self, project_path: str) -> str:
        return self._report(
            "npm_audit", lambda: self.audit_runner.run_audit(project_path)
        )

    def simulate_npm_audit_fix(self, project_path: str) -> str:
        return self._report(
            "simulate_npm_audit_fix",
            lambda: self.audit_runner.simulate_audit_fix(project_path),
        )
