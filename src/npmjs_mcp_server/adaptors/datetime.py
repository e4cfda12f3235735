# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

"""Here we collect a set of datetime wrappers and adaptors to be easily replaced during testing and debugging."""

from datetime import datetime

import pytz


def get_datetime_now() -> datetime:
    return datetime.now(pytz.UTC)


def get_iso_timestamp() -> str:
    # Same shape as JavaScript's Date.toISOString(), which npm uses in its reports
    now = get_datetime_now()
    return now.strftime("%Y-%m-%dT%H:%M:%S.") + f"{now.microsecond // 1000:03d}Z"
