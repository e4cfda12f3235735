# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

import json

from npmjs_mcp_server.report_generator.writers.abstract_reporting_writer import (
    Reportable,
    ReportingWriter,
)


class JSONReportingWriter(ReportingWriter):
    """
    Writes a tool result as compact JSON. Keys keep the order in which the
    result builds them, so the same input always yields the same text.
    """

    def __init__(self, indent: int | None = None) -> None:
        self.indent = indent

    def write(self, result: Reportable) -> str:
        return json.dumps(result.to_dict(), indent=self.indent, ensure_ascii=False)
