# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Helpers for classifying network services and building their web URLs."""

from __future__ import annotations

import ipaddress
from urllib.parse import urlsplit

from ..models.target import NetworkEndpoint, NetworkService, TargetInfo

# Known web service names mapped to whether they speak plain (non-TLS) HTTP.
WEB_SERVICE_NAMES: dict[str, bool] = {
    "http": True,
    "http-alt": True,
    "http-proxy": True,
    "radan-http": True,
    "sun-answerbook": True,
    "https": False,
    "ssl/http": False,
    "ssl/https": False,
    "ssl/http-alt": False,
}

_DEFAULT_PORTS = {"http": 80, "https": 443}


def _service_name(service: NetworkService) -> str:
    return (service.service_name or "").strip().lower()


def normalize_application_root(root: str | None) -> str:
    """Return `root` with exactly one leading and one trailing slash."""
    stripped = (root or "").strip().strip("/")
    return f"/{stripped}/" if stripped else "/"


def is_web_service(service: NetworkService) -> bool:
    """True when the service is known to serve HTTP(S)."""
    if _service_name(service) in WEB_SERVICE_NAMES:
        return True
    return normalize_application_root(service.application_root) != "/"


def is_plain_http(service: NetworkService) -> bool:
    """True for web services reachable without TLS."""
    if not is_web_service(service) or service.supported_ssl_versions:
        return False
    name = _service_name(service)
    return WEB_SERVICE_NAMES.get(name, not name.startswith("ssl/"))


def build_web_application_root_url(service: NetworkService) -> str:
    """
    Build the URL of the web application root served by `service`.

    Example:
      http service on 10.0.0.5:8080 with root /app -> http://10.0.0.5:8080/app/
    """
    scheme = "http" if is_plain_http(service) else "https"
    host = service.endpoint.host
    if ":" in host and not host.startswith("["):
        host = f"[{host}]"
    netloc = host
    port = service.endpoint.port
    if port is not None and port != _DEFAULT_PORTS[scheme]:
        netloc = f"{host}:{port}"
    return f"{scheme}://{netloc}{normalize_application_root(service.application_root)}"


def network_service_from_url(url: str) -> tuple[TargetInfo, NetworkService]:
    """
    Describe a user-supplied URL as a target with a single web service.

    Raises ValueError when the URL is not http(s) or has no host.
    """
    parts = urlsplit(str(url or "").strip())
    scheme = parts.scheme.lower()
    if scheme not in _DEFAULT_PORTS:
        raise ValueError(f"Unsupported URL scheme in {url!r}; expected http or https")
    if not parts.hostname:
        raise ValueError(f"Missing host in {url!r}")
    try:
        port = parts.port or _DEFAULT_PORTS[scheme]
    except ValueError as exc:
        raise ValueError(f"Invalid port in {url!r}") from exc

    try:
        ipaddress.ip_address(parts.hostname)
        endpoint = NetworkEndpoint(ip=parts.hostname, port=port)
    except ValueError:
        endpoint = NetworkEndpoint(hostname=parts.hostname, port=port)

    service = NetworkService(
        endpoint=endpoint,
        transport_protocol="tcp",
        service_name=scheme,
        application_root=normalize_application_root(parts.path),
    )
    return TargetInfo(endpoints=(endpoint,)), service


__all__ = [
    "WEB_SERVICE_NAMES",
    "build_web_application_root_url",
    "is_plain_http",
    "is_web_service",
    "network_service_from_url",
    "normalize_application_root",
]
