# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

from typing import Any

import pytest

from npmjs_mcp_server.metadata_normalizer.metadata import MaintainerInfo
from npmjs_mcp_server.metadata_normalizer.response_normalizer import (
    is_semantic_version,
    normalize_license,
    normalize_repository_url,
    to_details,
    to_summary,
    to_versions,
)

SOURCE = "https://registry.npmjs.org/left-pad"


def full_record() -> dict[str, Any]:
    return {
        "name": "left-pad",
        "dist-tags": {"latest": "1.3.0", "next": "2.0.0-beta.1"},
        "description": "String left pad",
        "time": {
            "created": "2014-03-24T00:00:00.000Z",
            "1.0.0": "2014-03-24T00:00:00.000Z",
            "1.3.0": "2018-04-09T00:00:00.000Z",
            "modified": "2022-06-19T00:00:00.000Z",
            "2.0.0-beta.1": "2019-01-01T00:00:00.000Z",
        },
        "license": "WTFPL",
        "homepage": "https://github.com/stevemao/left-pad#readme",
        "repository": {
            "type": "git",
            "url": "git+https://github.com/stevemao/left-pad.git",
        },
        "maintainers": [
            {"name": "stevemao", "email": "steve@example.com", "url": "ignored"},
        ],
        "keywords": ["leftpad", "left", "pad"],
    }


class TestNormalizeLicense:
    @pytest.mark.parametrize(
        "license_value, expected",
        [
            ("MIT", "MIT"),
            ({"type": "ISC"}, "ISC"),
            ({"type": "MIT", "url": "https://opensource.org/licenses/MIT"}, "MIT"),
            ({}, None),
            ({"url": "https://example.com/LICENSE"}, None),
            (None, None),
            (["MIT", "Apache-2.0"], None),
            (42, None),
        ],
    )
    def test_license_shapes(self, license_value: Any, expected: str | None) -> None:
        assert normalize_license(license_value) == expected


class TestNormalizeRepositoryUrl:
    def test_strips_git_prefix_and_suffix(self) -> None:
        assert (
            normalize_repository_url({"url": "git+https://github.com/x/y.git"})
            == "https://github.com/x/y"
        )

    def test_keeps_plain_urls(self) -> None:
        assert (
            normalize_repository_url({"type": "git", "url": "https://github.com/x/y"})
            == "https://github.com/x/y"
        )

    def test_only_strips_literal_prefix_and_suffix(self) -> None:
        assert (
            normalize_repository_url({"url": "ssh://git@github.com/x/y.github"})
            == "ssh://git@github.com/x/y.github"
        )

    def test_accepts_string_repository(self) -> None:
        assert (
            normalize_repository_url("git+ssh://git@github.com/x/y.git")
            == "ssh://git@github.com/x/y"
        )

    @pytest.mark.parametrize("repository", [None, {}, {"type": "git"}, {"url": 3}])
    def test_missing_url_is_absent(self, repository: Any) -> None:
        assert normalize_repository_url(repository) is None


class TestIsSemanticVersion:
    @pytest.mark.parametrize(
        "key", ["1.0.0", "10.20.30", "2.0.0-beta.1", "1.0.0-rc1", "1.0.0.1"]
    )
    def test_accepts_versions(self, key: str) -> None:
        assert is_semantic_version(key)

    @pytest.mark.parametrize(
        "key", ["created", "modified", "1.0", "v1.0.0", "1.0.0+build", "1.0.0 "]
    )
    def test_rejects_markers_and_partial_versions(self, key: str) -> None:
        assert not is_semantic_version(key)


class TestToSummary:
    def test_full_record(self) -> None:
        summary = to_summary(full_record(), SOURCE)

        assert summary.to_dict() == {
            "name": "left-pad",
            "latestVersion": "1.3.0",
            "description": "String left pad",
            "publishDateLatest": "2018-04-09T00:00:00.000Z",
            "license": "WTFPL",
            "homepage": "https://github.com/stevemao/left-pad#readme",
            "repository": "https://github.com/stevemao/left-pad",
            "source": SOURCE,
        }

    def test_missing_latest_tag_falls_back_to_not_available(self) -> None:
        record = full_record()
        del record["dist-tags"]

        summary = to_summary(record, SOURCE)

        assert summary.latest_version == "N/A"
        assert summary.publish_date_latest is None
        assert "publishDateLatest" not in summary.to_dict()

    def test_publish_date_requires_time_entry_for_latest(self) -> None:
        record = full_record()
        record["dist-tags"]["latest"] = "1.4.0"

        summary = to_summary(record, SOURCE)

        assert summary.latest_version == "1.4.0"
        assert summary.publish_date_latest is None

    def test_object_license_uses_type(self) -> None:
        record = full_record()
        record["license"] = {"type": "ISC", "url": "https://example.com"}

        assert to_summary(record, SOURCE).license == "ISC"

    def test_minimal_record_omits_absent_fields(self) -> None:
        summary = to_summary({"name": "tiny"}, SOURCE)

        assert summary.to_dict() == {
            "name": "tiny",
            "latestVersion": "N/A",
            "source": SOURCE,
        }

    def test_unexpected_types_are_tolerated(self) -> None:
        record = {
            "name": "odd",
            "dist-tags": ["latest"],
            "time": "yesterday",
            "description": {"text": "not a string"},
            "repository": 12,
        }

        assert to_summary(record, SOURCE).to_dict() == {
            "name": "odd",
            "latestVersion": "N/A",
            "source": SOURCE,
        }


class TestToVersions:
    def test_filters_non_version_keys(self) -> None:
        record = {
            "time": {"1.0.0": "t1", "created": "t0", "2.0.0-beta.1": "t2"},
        }

        versions = to_versions(record, SOURCE)

        assert versions.to_dict() == {
            "versions": {"1.0.0": "t1", "2.0.0-beta.1": "t2"},
            "source": SOURCE,
        }

    def test_keeps_registry_order(self) -> None:
        record = {"time": {"2.0.0": "b", "1.0.0": "a", "1.5.0": "c"}}

        versions = to_versions(record, SOURCE)

        assert list(versions.versions) == ["2.0.0", "1.0.0", "1.5.0"]

    def test_missing_time_yields_empty_versions(self) -> None:
        assert to_versions({"name": "x"}, SOURCE).to_dict() == {
            "versions": {},
            "source": SOURCE,
        }


class TestToDetails:
    def test_full_record(self) -> None:
        details = to_details(full_record(), SOURCE)

        assert details.maintainers == (
            MaintainerInfo(name="stevemao", email="steve@example.com"),
        )
        assert details.keywords == ("leftpad", "left", "pad")
        result = details.to_dict()
        assert result["maintainers"] == [
            {"name": "stevemao", "email": "steve@example.com"}
        ]
        assert result["keywords"] == ["leftpad", "left", "pad"]
        assert result["latestVersion"] == "1.3.0"
        assert result["repository"] == "https://github.com/stevemao/left-pad"
        assert list(result)[-2:] == ["maintainers", "keywords"]

    def test_empty_lists_are_omitted(self) -> None:
        record = full_record()
        record["maintainers"] = []
        record["keywords"] = []

        result = to_details(record, SOURCE).to_dict()

        assert "maintainers" not in result
        assert "keywords" not in result

    def test_missing_lists_are_omitted(self) -> None:
        result = to_details({"name": "bare"}, SOURCE).to_dict()

        assert result == {"name": "bare", "latestVersion": "N/A", "source": SOURCE}

    def test_summary_part_matches_to_summary(self) -> None:
        record = full_record()

        assert to_details(record, SOURCE).summary == to_summary(record, SOURCE)
