# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Dataclass exports for HttpdGuard."""

from ..http.models import Headers, HttpRequest, HttpResponse
from .finding import (
    DetectionReport,
    DetectionReportList,
    DetectionStatus,
    Severity,
    Vulnerability,
    VulnerabilityId,
)
from .target import NetworkEndpoint, NetworkService, TargetInfo

__all__ = [
    "DetectionReport",
    "DetectionReportList",
    "DetectionStatus",
    "Headers",
    "HttpRequest",
    "HttpResponse",
    "NetworkEndpoint",
    "NetworkService",
    "Severity",
    "TargetInfo",
    "Vulnerability",
    "VulnerabilityId",
]
