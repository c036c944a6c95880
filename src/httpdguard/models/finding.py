# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Dataclasses for detection findings."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from .target import NetworkService, TargetInfo


class Severity(str, Enum):
    CRITICAL = "CRITICAL"
    HIGH = "HIGH"
    MEDIUM = "MEDIUM"
    LOW = "LOW"
    MINIMAL = "MINIMAL"


class DetectionStatus(str, Enum):
    VULNERABILITY_VERIFIED = "VULNERABILITY_VERIFIED"
    VULNERABILITY_PRESENT = "VULNERABILITY_PRESENT"
    SUSPECTED = "SUSPECTED"


@dataclass(frozen=True)
class VulnerabilityId:
    publisher: str
    value: str

    def to_dict(self) -> dict[str, str]:
        return {"publisher": self.publisher, "value": self.value}


@dataclass(frozen=True)
class Vulnerability:
    """Static vulnerability metadata attached to a finding."""

    main_id: VulnerabilityId
    severity: Severity
    title: str
    description: str
    recommendation: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "main_id": self.main_id.to_dict(),
            "severity": self.severity.value,
            "title": self.title,
            "description": self.description,
            "recommendation": self.recommendation,
        }


@dataclass(frozen=True)
class DetectionReport:
    """A verified finding for one network service of a target."""

    target_info: TargetInfo
    network_service: NetworkService
    detection_timestamp_ms: int
    detection_status: DetectionStatus
    vulnerability: Vulnerability

    def to_dict(self) -> dict[str, Any]:
        return {
            "target_info": self.target_info.to_dict(),
            "network_service": self.network_service.to_dict(),
            "detection_timestamp": self.detection_timestamp_ms,
            "detection_status": self.detection_status.value,
            "vulnerability": self.vulnerability.to_dict(),
        }


@dataclass(frozen=True)
class DetectionReportList:
    detection_reports: tuple[DetectionReport, ...] = field(default_factory=tuple)

    def __iter__(self) -> Iterator[DetectionReport]:
        return iter(self.detection_reports)

    def __len__(self) -> int:
        return len(self.detection_reports)

    def extend(self, other: "DetectionReportList") -> "DetectionReportList":
        """Return a new list with `other`'s reports appended."""
        return DetectionReportList(self.detection_reports + tuple(other.detection_reports))

    def to_dict(self) -> dict[str, Any]:
        return {"detection_reports": [report.to_dict() for report in self.detection_reports]}


__all__ = [
    "DetectionReport",
    "DetectionReportList",
    "DetectionStatus",
    "Severity",
    "Vulnerability",
    "VulnerabilityId",
]
