# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Scan target and network service models."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class NetworkEndpoint:
    """Address of a single service: an IP, a hostname, or both, plus a port."""

    ip: str | None = None
    hostname: str | None = None
    port: int | None = None

    @property
    def host(self) -> str:
        """Hostname when known, otherwise the IP address."""
        return self.hostname or self.ip or ""

    def to_dict(self) -> dict[str, Any]:
        return {"ip": self.ip, "hostname": self.hostname, "port": self.port}


@dataclass(frozen=True)
class NetworkService:
    """
    A service discovered on a target.

    Only the fields the detectors read are modeled. `application_root` is the
    path a web application is mounted under (``/`` unless discovery found a
    different root).
    """

    endpoint: NetworkEndpoint
    transport_protocol: str = "tcp"
    service_name: str = ""
    software: str | None = None
    version: str | None = None
    supported_ssl_versions: tuple[str, ...] = field(default_factory=tuple)
    application_root: str = "/"

    def to_dict(self) -> dict[str, Any]:
        return {
            "endpoint": self.endpoint.to_dict(),
            "transport_protocol": self.transport_protocol,
            "service_name": self.service_name,
            "software": self.software,
            "version": self.version,
            "supported_ssl_versions": list(self.supported_ssl_versions),
            "application_root": self.application_root,
        }


@dataclass(frozen=True)
class TargetInfo:
    endpoints: tuple[NetworkEndpoint, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict[str, Any]:
        return {"endpoints": [endpoint.to_dict() for endpoint in self.endpoints]}


__all__ = ["NetworkEndpoint", "NetworkService", "TargetInfo"]
