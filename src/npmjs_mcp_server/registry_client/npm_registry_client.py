# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

import logging
from typing import Any
from urllib.parse import quote

import requests

from npmjs_mcp_server.config.cli_configs import Config
from npmjs_mcp_server.errors import (
    MalformedOutputError,
    classify_request_exception,
    classify_status_code,
)

logger = logging.getLogger("npmjs_mcp_server")


def encode_package_name(package_name: str) -> str:
    """Percent-encode a package name for use as a single URL path segment.

    Scoped names keep their meaning: ``@scope/pkg`` -> ``%40scope%2Fpkg``.
    """
    return quote(package_name, safe="!~*'()")


class NpmRegistryClient:
    """Fetches raw package documents and download counts from npm."""

    def __init__(self, config: Config) -> None:
        self.config = config

    def package_url(self, package_name: str) -> str:
        return f"{self.config.registry_base_url}/{encode_package_name(package_name)}"

    def downloads_url(self, period: str, package_name: str) -> str:
        return (
            f"{self.config.downloads_base_url}/{period}/"
            f"{encode_package_name(package_name)}"
        )

    def fetch_package_record(self, package_name: str) -> dict[str, Any]:
        api_url = self.package_url(package_name)
        logger.info("Fetching package data from: %s", api_url)
        try:
            resp = requests.get(api_url, timeout=self.config.request_timeout)
        except requests.RequestException as e:
            error = classify_request_exception(e, package_name)
            logger.error("Request to %s failed: %s", api_url, e)
            raise error from e

        if resp.status_code != 200:
            logger.error(
                "NPM Registry answered %s for %s", resp.status_code, api_url
            )
            raise classify_status_code(resp.status_code, package_name)

        try:
            pkg_data = resp.json()
        except ValueError as e:
            logger.error("Invalid JSON received from %s: %s", api_url, e)
            raise MalformedOutputError(
                f"Failed to parse NPM Registry response for '{package_name}'."
            ) from e
        if not isinstance(pkg_data, dict):
            raise MalformedOutputError(
                f"Unexpected NPM Registry response for '{package_name}'."
            )
        return pkg_data

    def fetch_download_count(self, period: str, package_name: str) -> int | None:
        """Return the download count for one period, or None on any failure."""
        api_url = self.downloads_url(period, package_name)
        logger.info("Fetching downloads for %s from: %s", period, api_url)
        try:
            resp = requests.get(api_url, timeout=self.config.request_timeout)
            if resp.status_code != 200:
                logger.warning(
                    "Failed to fetch downloads for period %s, package %s: status %s",
                    period,
                    package_name,
                    resp.status_code,
                )
                return None
            downloads = resp.json().get("downloads")
        except (requests.RequestException, ValueError, AttributeError) as e:
            logger.warning(
                "Failed to fetch downloads for period %s, package %s: %s",
                period,
                package_name,
                e,
            )
            return None

        # bool is an int subclass
        if (
            not isinstance(downloads, int)
            or isinstance(downloads, bool)
            or downloads < 0
        ):
            logger.warning(
                "Unexpected downloads value for period %s, package %s: %r",
                period,
                package_name,
                downloads,
            )
            return None
        return downloads
