# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

"""Typed failures raised by the registry client and the local audit runner."""

import requests


class NpmGatewayError(Exception):
    """Base class for every failure reported to tool callers.

    The message is meant for humans; ``status_code`` and ``code`` let the
    calling layer branch on the failure kind.
    """

    code = "NPM_GATEWAY_ERROR"

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        code: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        if code is not None:
            self.code = code


class PackageNotFoundError(NpmGatewayError):
    code = "NPM_PKG_NOT_FOUND"

    def __init__(self, package_name: str) -> None:
        super().__init__(f"Package '{package_name}' not found on npmjs.", 404)
        self.package_name = package_name


class RegistryError(NpmGatewayError):
    code = "NPM_API_ERROR"

    def __init__(self, status_code: int) -> None:
        super().__init__(
            f"Failed to fetch package data from NPM Registry. Status: {status_code}",
            status_code,
        )


class NoResponseError(NpmGatewayError):
    code = "NPM_API_NO_RESPONSE"

    def __init__(self) -> None:
        super().__init__(
            "No response received from NPM Registry while fetching package data."
        )


class RequestSetupError(NpmGatewayError):
    code = "NPM_API_REQUEST_SETUP_ERROR"

    def __init__(self, reason: str) -> None:
        super().__init__(f"Error fetching package data: {reason}")


class LockfileMissingError(NpmGatewayError):
    code = "NPM_LOCKFILE_MISSING"

    def __init__(self, command: str, lockfile_name: str, project_path: str) -> None:
        super().__init__(
            f"{command} requires a {lockfile_name} file in the target directory "
            f"'{project_path}'. Please run 'npm install' or "
            f"'npm i --package-lock-only' in that directory first."
        )
        self.project_path = project_path


class CommandInvocationError(NpmGatewayError):
    code = "NPM_COMMAND_FAILED"


class MalformedOutputError(NpmGatewayError):
    code = "NPM_MALFORMED_OUTPUT"

    def __init__(self, message: str, raw_excerpt: str | None = None) -> None:
        super().__init__(message)
        self.raw_excerpt = raw_excerpt


class ArgumentValidationError(NpmGatewayError):
    code = "INVALID_ARGUMENT"


def classify_status_code(status_code: int, package_name: str) -> NpmGatewayError:
    if status_code == 404:
        return PackageNotFoundError(package_name)
    return RegistryError(status_code)


def classify_request_exception(
    error: requests.RequestException, package_name: str
) -> NpmGatewayError:
    """Map a ``requests`` failure to the registry error taxonomy."""
    if error.response is not None:
        return classify_status_code(error.response.status_code, package_name)
    if isinstance(error, (requests.ConnectionError, requests.Timeout)):
        return NoResponseError()
    return RequestSetupError(str(error))
