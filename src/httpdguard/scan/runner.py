# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Run every registered detector against a target's services."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from ..detectors.base import VulnDetector
from ..models import DetectionReportList, NetworkService, TargetInfo

logger = logging.getLogger(__name__)


class ScanRunner:
    """Coordinates detectors for a single target, sequentially and in registry order."""

    def __init__(self, detectors: Sequence[VulnDetector]):
        self.detectors = list(detectors)

    def run(self, target_info: TargetInfo, services: Sequence[NetworkService]) -> DetectionReportList:
        reports = DetectionReportList()
        for detector in self.detectors:
            try:
                found = detector.detect(target_info, list(services))
            except Exception:  # noqa: BLE001
                logger.exception("Detector %s failed; skipping", detector.name)
                continue
            logger.info("Detector %s produced %d finding(s)", detector.name, len(found))
            reports = reports.extend(found)
        return reports


__all__ = ["ScanRunner"]
