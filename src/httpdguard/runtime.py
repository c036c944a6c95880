# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""High-level HttpdGuard facade for scanning targets."""

from __future__ import annotations

from collections.abc import Sequence
from contextlib import suppress

from .clock import Clock, UtcClock
from .detectors.base import VulnDetector
from .detectors.registry import build_detectors
from .http.client import HttpClient, create_default_http_client
from .models import DetectionReportList, NetworkService, TargetInfo
from .scan.runner import ScanRunner
from .utils.network_service import network_service_from_url


class HttpdGuard:
    """
    Convenience wrapper that wires one HTTP client and clock into every detector.

    The client is closed when the facade is used as a context manager.
    """

    def __init__(
        self,
        http_client: HttpClient | None = None,
        clock: Clock | None = None,
        detectors: Sequence[VulnDetector] | None = None,
    ):
        self.http_client = http_client or create_default_http_client()
        self.clock = clock or UtcClock()
        if detectors is None:
            detectors = build_detectors(self.http_client, self.clock)
        self.scan_runner = ScanRunner(detectors)

    def scan(self, target_info: TargetInfo, services: Sequence[NetworkService]) -> DetectionReportList:
        return self.scan_runner.run(target_info, services)

    def scan_url(self, url: str) -> DetectionReportList:
        target_info, service = network_service_from_url(url)
        return self.scan(target_info, [service])

    def close(self) -> None:
        with suppress(Exception):
            if hasattr(self.http_client, "close"):
                self.http_client.close()

    def __enter__(self) -> "HttpdGuard":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:  # noqa: ANN001
        self.close()
