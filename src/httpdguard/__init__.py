# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
HttpdGuard package entrypoint.

This package provides a detector for CVE-2021-42013, the path traversal and
remote code execution flaw in Apache HTTP Server 2.4.49 and 2.4.50, run against
already-discovered network services. HTTP and time are abstracted behind
injectable client and clock interfaces, and findings are modeled with frozen
dataclasses.
"""

from .clock import Clock, FixedClock, UtcClock
from .config import HttpSettings, load_http_settings
from .detectors import ApacheHttpServerCVE202142013Detector, VulnDetector, build_detectors
from .errors import ErrorCategory
from .http import (
    HttpClient,
    HttpRequest,
    HttpResponse,
    HttpxClient,
    StubHttpClient,
    create_default_http_client,
)
from .log import setup_logging
from .models import (
    DetectionReport,
    DetectionReportList,
    NetworkEndpoint,
    NetworkService,
    Severity,
    TargetInfo,
)
from .runtime import HttpdGuard
from .scan import ScanRunner
from .version import __version__

__all__ = [
    "ApacheHttpServerCVE202142013Detector",
    "Clock",
    "DetectionReport",
    "DetectionReportList",
    "ErrorCategory",
    "FixedClock",
    "HttpClient",
    "HttpRequest",
    "HttpResponse",
    "HttpSettings",
    "HttpdGuard",
    "HttpxClient",
    "NetworkEndpoint",
    "NetworkService",
    "ScanRunner",
    "Severity",
    "StubHttpClient",
    "TargetInfo",
    "UtcClock",
    "VulnDetector",
    "build_detectors",
    "create_default_http_client",
    "load_http_settings",
    "setup_logging",
    "__version__",
]
