# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""HTTP request/response data models used across HttpdGuard."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

Headers = dict[str, str]


@dataclass
class HttpRequest:
    """
    Normalized request representation consumed by HttpClient implementations.

    When `path_as_is` is set the path and query of `url` are put on the wire
    byte for byte, without the client re-quoting or collapsing dot segments.
    """

    url: str
    method: str = "GET"
    headers: Headers | None = None
    body: bytes | str | None = None
    timeout: float | None = None
    allow_redirects: bool = True
    path_as_is: bool = False


@dataclass
class HttpResponse:
    """Normalized HTTP response with minimal metadata used by detectors."""

    ok: bool
    status_code: int | None = None
    headers: Headers = field(default_factory=dict)
    text: str = ""
    content: bytes = b""
    url: str | None = None
    error_category: str | None = None
    error_message: str | None = None
    error_type: str | None = None
    meta: dict[str, Any] = field(default_factory=dict)


__all__ = ["Headers", "HttpRequest", "HttpResponse"]
