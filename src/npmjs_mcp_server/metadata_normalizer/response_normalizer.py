# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

"""Pure transformations from a raw npm registry document into the shapes
returned by the package tools.

None of these functions raise on a well-formed document; fields that are
missing or have an unexpected type are reported as absent.
"""

import re
from typing import Any

from npmjs_mcp_server.metadata_normalizer.metadata import (
    MaintainerInfo,
    PackageDetails,
    PackageSummary,
    PackageVersions,
)

NOT_AVAILABLE = "N/A"

SEMVER_KEY_PATTERN = re.compile(r"^\d+\.\d+\.\d+([-.].*)?$")


def _optional_str(value: Any) -> str | None:
    return value if isinstance(value, str) else None


def _time_mapping(record: dict[str, Any]) -> dict[str, Any]:
    time = record.get("time")
    return time if isinstance(time, dict) else {}


def is_semantic_version(key: str) -> bool:
    return SEMVER_KEY_PATTERN.fullmatch(key) is not None


def normalize_license(license_value: Any) -> str | None:
    """Return the license identifier from either the string or the object form.

    - "MIT" -> "MIT"
    - {"type": "ISC", "url": "..."} -> "ISC"
    - {} or anything else -> None
    """
    if isinstance(license_value, str):
        return license_value
    if isinstance(license_value, dict) and license_value.get("type"):
        return _optional_str(license_value["type"])
    return None


def normalize_repository_url(repository: Any) -> str | None:
    """Strip the git+ prefix and the .git suffix from a repository URL."""
    if isinstance(repository, dict):
        url = repository.get("url")
    else:
        url = repository
    if not isinstance(url, str) or not url:
        return None
    if url.startswith("git+"):
        url = url[len("git+") :]
    if url.endswith(".git"):
        url = url[: -len(".git")]
    return url


def resolve_latest_version(record: dict[str, Any]) -> str | None:
    dist_tags = record.get("dist-tags")
    if not isinstance(dist_tags, dict):
        return None
    latest = dist_tags.get("latest")
    return latest if isinstance(latest, str) and latest else None


def to_summary(record: dict[str, Any], source_url: str) -> PackageSummary:
    latest_version = resolve_latest_version(record)
    publish_date_latest = None
    if latest_version is not None:
        publish_date_latest = _optional_str(
            _time_mapping(record).get(latest_version)
        ) or None

    return PackageSummary(
        name=_optional_str(record.get("name")),
        latest_version=latest_version or NOT_AVAILABLE,
        description=_optional_str(record.get("description")),
        publish_date_latest=publish_date_latest,
        license=normalize_license(record.get("license")),
        homepage=_optional_str(record.get("homepage")),
        repository=normalize_repository_url(record.get("repository")),
        source=source_url,
    )


def to_versions(record: dict[str, Any], source_url: str) -> PackageVersions:
    # "created" and "modified" share the time mapping with real versions
    versions = {
        key: published
        for key, published in _time_mapping(record).items()
        if isinstance(key, str) and is_semantic_version(key)
    }
    return PackageVersions(versions=versions, source=source_url)


def _maintainers(record: dict[str, Any]) -> tuple[MaintainerInfo, ...]:
    raw_maintainers = record.get("maintainers")
    if not isinstance(raw_maintainers, list):
        return ()
    return tuple(
        MaintainerInfo(
            name=_optional_str(maintainer.get("name")),
            email=_optional_str(maintainer.get("email")),
        )
        for maintainer in raw_maintainers
        if isinstance(maintainer, dict)
    )


def _keywords(record: dict[str, Any]) -> tuple[str, ...]:
    raw_keywords = record.get("keywords")
    if not isinstance(raw_keywords, list):
        return ()
    return tuple(keyword for keyword in raw_keywords if isinstance(keyword, str))


def to_details(record: dict[str, Any], source_url: str) -> PackageDetails:
    maintainers = _maintainers(record)
    keywords = _keywords(record)
    return PackageDetails(
        summary=to_summary(record, source_url),
        maintainers=maintainers or None,
        keywords=keywords or None,
    )
