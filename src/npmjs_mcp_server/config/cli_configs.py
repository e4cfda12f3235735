# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class Config:
    registry_base_url: str
    downloads_base_url: str
    request_timeout: float  # seconds, per HTTP request
    command_timeout: float  # seconds, per npm invocation
    lockfile_name: str
    npm_executable: str
    excerpt_length: int  # raw output characters kept in error messages

    def with_overrides(self, **overrides: object) -> "Config":
        """Return a copy with every override that is not None applied."""
        changes = {key: value for key, value in overrides.items() if value is not None}
        return replace(self, **changes)


default_config = Config(
    registry_base_url="https://registry.npmjs.org",
    downloads_base_url="https://api.npmjs.org/downloads/point",
    request_timeout=10.0,
    command_timeout=120.0,
    lockfile_name="package-lock.json",
    npm_executable="npm",
    excerpt_length=500,
)
