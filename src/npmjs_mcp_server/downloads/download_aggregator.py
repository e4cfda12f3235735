# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass, field
from typing import Any

from npmjs_mcp_server.errors import ArgumentValidationError
from npmjs_mcp_server.registry_client.npm_registry_client import NpmRegistryClient

logger = logging.getLogger("npmjs_mcp_server")

DOWNLOAD_PERIODS = ("last-day", "last-week", "last-month")


@dataclass(frozen=True)
class DownloadStats:
    # only periods that were requested and resolved; a failed period is
    # absent rather than zero
    downloads: dict[str, int] = field(default_factory=dict)
    package: str = ""
    source: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "downloads": dict(self.downloads),
            "package": self.package,
            "source": self.source,
        }


class DownloadAggregator:
    """Fetches download counts for several periods in parallel.

    A failing period never fails the whole request: it is simply left out
    of the result.
    """

    def __init__(self, client: NpmRegistryClient, max_workers: int = 3) -> None:
        self.client = client
        self.max_workers = max_workers

    def fetch_downloads(
        self, package_name: str, period: str | None = None
    ) -> DownloadStats:
        if period is not None and period not in DOWNLOAD_PERIODS:
            raise ArgumentValidationError(
                f"Invalid period '{period}'. Expected one of: "
                f"{', '.join(DOWNLOAD_PERIODS)}"
            )
        periods = [period] if period is not None else list(DOWNLOAD_PERIODS)

        resolved: dict[str, int | None] = {}
        with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
            future_map = {
                executor.submit(
                    self.client.fetch_download_count, requested, package_name
                ): requested
                for requested in periods
            }
            for future in as_completed(future_map):
                requested = future_map[future]
                try:
                    resolved[requested] = future.result()
                except Exception as e:
                    logger.warning(
                        "Download count for period %s, package %s failed: %s",
                        requested,
                        package_name,
                        e,
                    )
                    resolved[requested] = None

        downloads: dict[str, int] = {}
        for requested in periods:
            count = resolved.get(requested)
            if count is not None:
                downloads[requested] = count
        return DownloadStats(
            downloads=downloads,
            package=package_name,
            source=self.client.config.downloads_base_url,
        )
