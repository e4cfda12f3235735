# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

# User message templates offered as MCP prompts


def summary_prompt(package_name: str) -> str:
    return f"Get a quick summary of the '{package_name}' npm package."


def details_prompt(package_name: str) -> str:
    return (
        f"Show me the full details for '{package_name}', including its "
        "repository URL and maintainers."
    )


def homepage_prompt(package_name: str) -> str:
    return f"What is the official homepage for the '{package_name}' package?"


def list_versions_prompt(package_name: str) -> str:
    return (
        f"List all available versions of '{package_name}' and their publish dates."
    )


def version_date_prompt(package_name: str, version: str) -> str:
    return f"What was the publish date of version {version} for '{package_name}'?"


def downloads_prompt(package_name: str, time_period: str) -> str:
    return f"How many times was '{package_name}' downloaded in the {time_period}?"


def all_downloads_prompt(package_name: str) -> str:
    return (
        f"Get the download counts for '{package_name}' for the last day, week, "
        "and month."
    )


def audit_project_prompt(project_path: str) -> str:
    return (
        f"Audit the dependencies in the project at '{project_path}' for security "
        "vulnerabilities."
    )


def simulate_audit_fix_prompt(project_path: str) -> str:
    return (
        f"Simulate running 'npm audit fix' on the project at '{project_path}' "
        "and show me what would change."
    )
