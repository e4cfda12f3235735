# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class VulnerabilityEntry:
    package: str
    version: str  # installed version, declared version or ""
    severity: str
    advisory_url: str | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "package": self.package,
            "version": self.version,
            "severity": self.severity,
        }
        if self.advisory_url is not None:
            data["advisoryUrl"] = self.advisory_url
        return data


@dataclass(frozen=True)
class AuditResult:
    audit_run_date: str
    npm_version: str
    node_version: str
    by_severity: dict[str, int]
    vulnerabilities: tuple[VulnerabilityEntry, ...]
    raw_audit_report: Any = None

    @property
    def total_vulnerabilities(self) -> int:
        return sum(self.by_severity.values())

    def to_dict(self) -> dict[str, Any]:
        return {
            "auditRunDate": self.audit_run_date,
            "npmVersion": self.npm_version,
            "nodeVersion": self.node_version,
            "summary": {
                "totalVulnerabilities": self.total_vulnerabilities,
                "bySeverity": dict(self.by_severity),
            },
            "vulnerabilities": [entry.to_dict() for entry in self.vulnerabilities],
            "rawAuditReport": self.raw_audit_report,
        }


@dataclass(frozen=True)
class FixAction:
    action: str
    name: str
    version: str | None = None
    old_version: str | None = None
    is_major: bool | None = None
    path: str | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"action": self.action, "name": self.name}
        optional = {
            "version": self.version,
            "oldVersion": self.old_version,
            "isMajor": self.is_major,
            "path": self.path,
        }
        data.update({key: value for key, value in optional.items() if value is not None})
        return data


@dataclass(frozen=True)
class FixSummary:
    added: int = 0
    removed: int = 0
    changed: int = 0
    audited: int = 0
    funding: int = 0

    def to_dict(self) -> dict[str, int]:
        return {
            "added": self.added,
            "removed": self.removed,
            "changed": self.changed,
            "audited": self.audited,
            "funding": self.funding,
        }


@dataclass(frozen=True)
class FixSimulationResult:
    simulation_run_date: str
    npm_version: str
    node_version: str
    summary: FixSummary
    actions: tuple[FixAction, ...] = field(default_factory=tuple)
    raw_simulation_output: Any = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "simulationRunDate": self.simulation_run_date,
            "npmVersion": self.npm_version,
            "nodeVersion": self.node_version,
            "summary": self.summary.to_dict(),
            "actions": [action.to_dict() for action in self.actions],
            "rawSimulationOutput": self.raw_simulation_output,
        }
