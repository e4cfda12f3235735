# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

"""Here we collect a set of OS wrappers and adaptors to be easily replaced during testing and debugging."""

import os
import subprocess
from dataclasses import dataclass


@dataclass(frozen=True)
class CommandOutput:
    returncode: int
    stdout: str
    stderr: str


def path_exists(file_path: str) -> bool:
    return os.path.exists(file_path)


def path_join(path: str, *paths: str) -> str:
    return os.path.join(path, *paths)


def run_command(command: list[str], cwd: str, timeout: float) -> CommandOutput:
    """Run a command without a shell and capture its text output.

    A non-zero exit status is returned, not raised. Missing executables,
    permission problems and timeouts surface as the usual ``OSError`` and
    ``subprocess.TimeoutExpired`` exceptions.
    """
    completed = subprocess.run(
        command,
        cwd=cwd,
        capture_output=True,
        text=True,
        encoding="utf-8",
        errors="replace",
        timeout=timeout,
        check=False,
    )
    return CommandOutput(
        returncode=completed.returncode,
        stdout=completed.stdout or "",
        stderr=completed.stderr or "",
    )
