# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

from dataclasses import dataclass, field
from typing import Any


def _without_absent(data: dict[str, Any]) -> dict[str, Any]:
    return {key: value for key, value in data.items() if value is not None}


@dataclass(frozen=True)
class MaintainerInfo:
    name: str | None
    email: str | None

    def to_dict(self) -> dict[str, Any]:
        return _without_absent({"name": self.name, "email": self.email})


@dataclass(frozen=True)
class PackageSummary:
    """Caller-facing digest of a registry package document."""

    name: str | None
    latest_version: str
    description: str | None
    publish_date_latest: str | None
    license: str | None  # license identifier as declared
    homepage: str | None
    repository: str | None  # browsable URL, git+ and .git stripped
    source: str  # registry URL the document was fetched from

    def to_dict(self) -> dict[str, Any]:
        return _without_absent(
            {
                "name": self.name,
                "latestVersion": self.latest_version,
                "description": self.description,
                "publishDateLatest": self.publish_date_latest,
                "license": self.license,
                "homepage": self.homepage,
                "repository": self.repository,
                "source": self.source,
            }
        )


@dataclass(frozen=True)
class PackageDetails:
    summary: PackageSummary
    maintainers: tuple[MaintainerInfo, ...] | None = None
    keywords: tuple[str, ...] | None = None

    def to_dict(self) -> dict[str, Any]:
        data = self.summary.to_dict()
        if self.maintainers:
            data["maintainers"] = [m.to_dict() for m in self.maintainers]
        if self.keywords:
            data["keywords"] = list(self.keywords)
        return data


@dataclass(frozen=True)
class PackageVersions:
    # insertion order follows the registry document
    versions: dict[str, str] = field(default_factory=dict)
    source: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {"versions": dict(self.versions), "source": self.source}
