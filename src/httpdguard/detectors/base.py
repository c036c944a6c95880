# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Vulnerability detector base classes."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass

from ..clock import Clock
from ..http import HttpClient
from ..models import DetectionReportList, NetworkService, TargetInfo


@dataclass(frozen=True)
class PluginInfo:
    name: str
    version: str
    description: str
    author: str
    plugin_type: str = "VULN_DETECTION"


class VulnDetector(ABC):
    """
    A check that inspects a target's services and reports verified findings.

    Collaborators are passed in explicitly so every detector can be exercised
    against a stub client and a fixed clock.
    """

    plugin_info: PluginInfo

    def __init__(self, http_client: HttpClient, clock: Clock):
        if http_client is None:
            raise ValueError("http_client is required")
        if clock is None:
            raise ValueError("clock is required")
        self.http_client = http_client
        self.clock = clock

    @property
    def name(self) -> str:
        return self.plugin_info.name

    @abstractmethod
    def detect(
        self,
        target_info: TargetInfo,
        matched_services: Sequence[NetworkService],
    ) -> DetectionReportList: ...

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        return f"{self.__class__.__name__}(name={self.name!r})"


__all__ = ["PluginInfo", "VulnDetector"]
