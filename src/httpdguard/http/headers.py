# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Header lookup utilities.

HTTP header field names are case-insensitive (RFC 9110). Responses travel through
HttpdGuard as plain dicts, so lookups go through these helpers rather than `dict.get`.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any


def _header_items(headers: Any) -> Iterable[tuple[object, object]]:
    """Yield (name, value) pairs from a dict, httpx.Headers or iterable of pairs."""
    if not headers:
        return ()
    if isinstance(headers, Mapping):
        return headers.items()
    items = getattr(headers, "items", None)
    if callable(items):
        return items()
    return headers


def normalize_headers(headers: Mapping[object, object] | None) -> dict[str, str]:
    """Return a lowercase-keyed copy of a header mapping."""
    out: dict[str, str] = {}
    for key, value in _header_items(headers):
        if key is None:
            continue
        name = str(key).strip().lower()
        if not name:
            continue
        out[name] = "" if value is None else str(value)
    return out


def header_value(headers: Mapping[object, object] | None, name: str, default: str = "") -> str:
    """Return a header value using case-insensitive key matching."""
    if not headers or not name:
        return default

    lower = name.lower()
    for key, value in _header_items(headers):
        if key is not None and str(key).lower() == lower:
            return default if value is None else str(value).strip()
    return default


__all__ = ["header_value", "normalize_headers"]
