# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Utility exports."""

from .network_service import (
    WEB_SERVICE_NAMES,
    build_web_application_root_url,
    is_plain_http,
    is_web_service,
    network_service_from_url,
    normalize_application_root,
)

__all__ = [
    "WEB_SERVICE_NAMES",
    "build_web_application_root_url",
    "is_plain_http",
    "is_web_service",
    "network_service_from_url",
    "normalize_application_root",
]
