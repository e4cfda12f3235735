# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

import threading
import time

import pytest
import pytest_mock

from npmjs_mcp_server.config.cli_configs import default_config
from npmjs_mcp_server.downloads.download_aggregator import (
    DOWNLOAD_PERIODS,
    DownloadAggregator,
)
from npmjs_mcp_server.errors import ArgumentValidationError
from npmjs_mcp_server.registry_client.npm_registry_client import NpmRegistryClient


def create_client_mock(
    mocker: pytest_mock.MockFixture, counts: dict[str, int | None | Exception]
) -> NpmRegistryClient:
    client = NpmRegistryClient(default_config)

    def fake_fetch_download_count(period: str, package_name: str) -> int | None:
        value = counts[period]
        if isinstance(value, Exception):
            raise value
        return value

    mocker.patch.object(
        client, "fetch_download_count", side_effect=fake_fetch_download_count
    )
    return client


def test_all_periods_are_fetched_when_none_requested(
    mocker: pytest_mock.MockFixture,
) -> None:
    client = create_client_mock(
        mocker, {"last-day": 10, "last-week": 70, "last-month": 300}
    )

    stats = DownloadAggregator(client).fetch_downloads("express")

    assert stats.to_dict() == {
        "downloads": {"last-day": 10, "last-week": 70, "last-month": 300},
        "package": "express",
        "source": "https://api.npmjs.org/downloads/point",
    }
    assert client.fetch_download_count.call_count == 3  # type: ignore[attr-defined]


def test_only_requested_period_is_fetched(mocker: pytest_mock.MockFixture) -> None:
    client = create_client_mock(
        mocker, {"last-day": 10, "last-week": 70, "last-month": 300}
    )

    stats = DownloadAggregator(client).fetch_downloads("@scope/pkg", "last-week")

    assert stats.downloads == {"last-week": 70}
    assert stats.package == "@scope/pkg"
    client.fetch_download_count.assert_called_once_with(  # type: ignore[attr-defined]
        "last-week", "@scope/pkg"
    )


def test_failed_period_is_left_out(mocker: pytest_mock.MockFixture) -> None:
    client = create_client_mock(
        mocker, {"last-day": 10, "last-week": None, "last-month": 300}
    )

    stats = DownloadAggregator(client).fetch_downloads("express")

    assert stats.downloads == {"last-day": 10, "last-month": 300}
    assert "last-week" not in stats.to_dict()["downloads"]


def test_raising_period_does_not_abort_the_others(
    mocker: pytest_mock.MockFixture,
) -> None:
    client = create_client_mock(
        mocker,
        {"last-day": RuntimeError("boom"), "last-week": 70, "last-month": 0},
    )

    stats = DownloadAggregator(client).fetch_downloads("express")

    assert stats.downloads == {"last-week": 70, "last-month": 0}


def test_all_periods_failing_still_succeeds(mocker: pytest_mock.MockFixture) -> None:
    client = create_client_mock(
        mocker, {"last-day": None, "last-week": None, "last-month": None}
    )

    stats = DownloadAggregator(client).fetch_downloads("express")

    assert stats.to_dict() == {
        "downloads": {},
        "package": "express",
        "source": "https://api.npmjs.org/downloads/point",
    }


def test_periods_are_reported_in_canonical_order(
    mocker: pytest_mock.MockFixture,
) -> None:
    client = NpmRegistryClient(default_config)
    delays = {"last-day": 0.2, "last-week": 0.1, "last-month": 0.0}

    def slow_fetch(period: str, package_name: str) -> int:
        time.sleep(delays[period])
        return 1

    mocker.patch.object(client, "fetch_download_count", side_effect=slow_fetch)

    stats = DownloadAggregator(client).fetch_downloads("express")

    assert list(stats.downloads) == list(DOWNLOAD_PERIODS)


def test_periods_are_fetched_concurrently(mocker: pytest_mock.MockFixture) -> None:
    client = NpmRegistryClient(default_config)
    barrier = threading.Barrier(3, timeout=5)

    def fetch_waiting_for_others(period: str, package_name: str) -> int:
        # only returns if all three fetches are in flight at the same time
        barrier.wait()
        return 5

    mocker.patch.object(
        client, "fetch_download_count", side_effect=fetch_waiting_for_others
    )

    stats = DownloadAggregator(client).fetch_downloads("express")

    assert stats.downloads == {"last-day": 5, "last-week": 5, "last-month": 5}


def test_unknown_period_is_rejected(mocker: pytest_mock.MockFixture) -> None:
    client = create_client_mock(mocker, {})

    with pytest.raises(ArgumentValidationError, match="Invalid period 'last-year'"):
        DownloadAggregator(client).fetch_downloads("express", "last-year")

    client.fetch_download_count.assert_not_called()  # type: ignore[attr-defined]
