# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

import json
import logging
import subprocess
from typing import Any

from npmjs_mcp_server.adaptors.datetime import get_iso_timestamp
from npmjs_mcp_server.adaptors.os import path_exists, path_join, run_command
from npmjs_mcp_server.audit.audit_results import (
    AuditResult,
    FixAction,
    FixSimulationResult,
    FixSummary,
    VulnerabilityEntry,
)
from npmjs_mcp_server.config.cli_configs import Config
from npmjs_mcp_server.errors import (
    CommandInvocationError,
    LockfileMissingError,
    MalformedOutputError,
)

logger = logging.getLogger("npmjs_mcp_server")

AUDIT_ARGS = ["audit", "--json"]
AUDIT_FIX_DRY_RUN_ARGS = ["audit", "fix", "--dry-run", "--json"]


def _optional_str(value: Any) -> str | None:
    return value if isinstance(value, str) else None


def _count(value: Any) -> int:
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    return 0


def _metadata(parsed: dict[str, Any]) -> dict[str, Any]:
    metadata = parsed.get("metadata")
    return metadata if isinstance(metadata, dict) else {}


class NpmAuditRunner:
    """Runs ``npm audit`` and ``npm audit fix --dry-run`` in a project
    directory and normalizes what they report."""

    def __init__(self, config: Config) -> None:
        self.config = config

    def _require_lockfile(self, command: str, project_path: str) -> None:
        lockfile_path = path_join(project_path, self.config.lockfile_name)
        if not path_exists(lockfile_path):
            logger.error("No %s found in %s", self.config.lockfile_name, project_path)
            raise LockfileMissingError(command, self.config.lockfile_name, project_path)

    def _run_npm(self, args: list[str], project_path: str) -> str:
        """Run npm and return its stdout.

        npm exits non-zero whenever vulnerabilities are found while still
        printing a full JSON report, so only an empty stdout is an error.
        """
        command = [self.config.npm_executable, *args]
        command_display = " ".join(["npm", *args])
        logger.info("Running %s in directory: %s", command_display, project_path)
        try:
            output = run_command(
                command, cwd=project_path, timeout=self.config.command_timeout
            )
        except subprocess.TimeoutExpired as e:
            logger.error("%s timed out in %s", command_display, project_path)
            raise CommandInvocationError(
                f"'{command_display}' did not finish within "
                f"{self.config.command_timeout} seconds in {project_path}."
            ) from e
        except OSError as e:
            logger.error("Could not start %s in %s: %s", command_display, project_path, e)
            raise CommandInvocationError(
                f"Failed to run '{command_display}' in {project_path}: {e}"
            ) from e

        if output.returncode != 0:
            if not output.stdout.strip():
                logger.error(
                    "%s exited with %s in %s. Stderr: %s",
                    command_display,
                    output.returncode,
                    project_path,
                    output.stderr or "(no stderr)",
                )
                raise CommandInvocationError(
                    f"Failed to run '{command_display}' in {project_path}: "
                    f"exit status {output.returncode}. "
                    f"Stderr: {output.stderr.strip() or '(no stderr)'}"
                )
            logger.warning(
                "%s exited with %s but produced output in %s. Stderr: %s",
                command_display,
                output.returncode,
                project_path,
                output.stderr or "(no stderr)",
            )
        return output.stdout

    def _excerpt(self, raw_output: str) -> str:
        return raw_output[: self.config.excerpt_length]

    def run_audit(self, project_path: str) -> AuditResult:
        self._require_lockfile("npm audit", project_path)
        audit_raw = self._run_npm(AUDIT_ARGS, project_path)
        try:
            audit_json = json.loads(audit_raw)
        except json.JSONDecodeError as e:
            logger.error(
                "Invalid npm audit output in %s: %s", project_path, self._excerpt(audit_raw)
            )
            raise MalformedOutputError(
                f"Failed to parse npm audit JSON output from {project_path}.",
                raw_excerpt=self._excerpt(audit_raw),
            ) from e
        if not isinstance(audit_json, dict):
            raise MalformedOutputError(
                f"Unexpected npm audit JSON output from {project_path}.",
                raw_excerpt=self._excerpt(audit_raw),
            )
        return self.parse_audit_report(audit_json)

    def parse_audit_report(self, audit_json: dict[str, Any]) -> AuditResult:
        metadata = _metadata(audit_json)

        by_severity: dict[str, int] = {}
        raw_severities = metadata.get("vulnerabilities")
        if isinstance(raw_severities, dict):
            for severity, count in raw_severities.items():
                # npm 7+ reports a precomputed "total" next to the buckets
                if severity == "total":
                    continue
                if isinstance(count, int) and not isinstance(count, bool):
                    by_severity[severity] = count

        vulnerabilities = []
        raw_vulnerabilities = audit_json.get("vulnerabilities")
        if isinstance(raw_vulnerabilities, dict):
            for package_name, details in raw_vulnerabilities.items():
                if not isinstance(details, dict):
                    details = {}
                vulnerabilities.append(
                    VulnerabilityEntry(
                        package=package_name,
                        version=_optional_str(details.get("installed"))
                        or _optional_str(details.get("version"))
                        or "",
                        severity=_optional_str(details.get("severity")) or "unknown",
                        advisory_url=self._advisory_url(details),
                    )
                )

        return AuditResult(
            audit_run_date=_optional_str(metadata.get("auditReportCreatedAt"))
            or get_iso_timestamp(),
            npm_version=_optional_str(metadata.get("npmVersion")) or "",
            node_version=_optional_str(metadata.get("nodeVersion")) or "",
            by_severity=by_severity,
            vulnerabilities=tuple(vulnerabilities),
            raw_audit_report=audit_json,
        )

    def _advisory_url(self, details: dict[str, Any]) -> str | None:
        url = _optional_str(details.get("url"))
        if url:
            return url
        # npm 7+ keeps advisories in "via"; string entries point at other packages
        via = details.get("via")
        if isinstance(via, list):
            for advisory in via:
                if isinstance(advisory, dict) and _optional_str(advisory.get("url")):
                    return advisory["url"]
        return None

    def simulate_audit_fix(self, project_path: str) -> FixSimulationResult:
        self._require_lockfile("npm audit fix", project_path)
        simulation_raw = self._run_npm(AUDIT_FIX_DRY_RUN_ARGS, project_path)
        simulation_json = self.extract_json_object(simulation_raw, project_path)
        return self.parse_fix_simulation(simulation_json)

    def extract_json_object(self, raw_output: str, project_path: str) -> dict[str, Any]:
        """Parse the JSON object that follows any progress or warning preamble.

        Parsing starts at the first ``{``; anything after the object is ignored.
        """
        json_start_index = raw_output.find("{")
        if json_start_index == -1:
            logger.error(
                "No JSON object in npm audit fix --dry-run output in %s: %s",
                project_path,
                self._excerpt(raw_output),
            )
            raise MalformedOutputError(
                "Could not find start of JSON object in npm audit fix --dry-run "
                f"output from {project_path}. "
                f"Raw output fragment: {self._excerpt(raw_output)}",
                raw_excerpt=self._excerpt(raw_output),
            )
        try:
            parsed, _ = json.JSONDecoder().raw_decode(raw_output, json_start_index)
        except json.JSONDecodeError as e:
            logger.error(
                "Invalid npm audit fix --dry-run output in %s: %s",
                project_path,
                self._excerpt(raw_output),
            )
            raise MalformedOutputError(
                "Failed to parse npm audit fix --dry-run JSON output from "
                f"{project_path}. Error: {e}. "
                f"Raw output fragment: {self._excerpt(raw_output)}...",
                raw_excerpt=self._excerpt(raw_output),
            ) from e
        return parsed

    def parse_fix_simulation(self, simulation_json: dict[str, Any]) -> FixSimulationResult:
        actions: list[FixAction] = []
        raw_actions = simulation_json.get("actions")
        if isinstance(raw_actions, list):
            actions = [self._parse_action(raw_action) for raw_action in raw_actions]

        metadata = _metadata(simulation_json)
        return FixSimulationResult(
            simulation_run_date=get_iso_timestamp(),
            npm_version=_optional_str(metadata.get("npmVersion")) or "",
            node_version=_optional_str(metadata.get("nodeVersion")) or "",
            summary=FixSummary(
                added=_count(simulation_json.get("added")),
                removed=_count(simulation_json.get("removed")),
                changed=_count(simulation_json.get("changed")),
                audited=_count(simulation_json.get("audited")),
                funding=_count(simulation_json.get("funding")),
            ),
            actions=tuple(actions),
            raw_simulation_output=simulation_json,
        )

    def _parse_action(self, raw_action: Any) -> FixAction:
        if not isinstance(raw_action, dict):
            raw_action = {}

        action = _optional_str(raw_action.get("action"))
        name = _optional_str(raw_action.get("module"))
        if name is None:
            name = _optional_str(raw_action.get("name"))

        first_resolve: dict[str, Any] = {}
        resolves = raw_action.get("resolves")
        if isinstance(resolves, list) and resolves and isinstance(resolves[0], dict):
            first_resolve = resolves[0]

        is_major = raw_action.get("isMajor")
        return FixAction(
            action=action.lower() if action is not None else "unknown",
            name=name if name is not None else "unknown",
            version=_optional_str(raw_action.get("target")),
            old_version=_optional_str(first_resolve.get("from")),
            is_major=is_major if isinstance(is_major, bool) else None,
            path=_optional_str(first_resolve.get("path")),
        )
