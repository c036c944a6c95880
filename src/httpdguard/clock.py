# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Clock abstraction used to timestamp findings."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Protocol

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


class Clock(Protocol):
    """Minimal protocol for reading the current time."""

    def now(self) -> datetime: ...


class UtcClock:
    """Wall clock in UTC."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)


class FixedClock:
    """Clock frozen at a given instant; naive datetimes are treated as UTC."""

    def __init__(self, instant: datetime):
        if instant.tzinfo is None:
            instant = instant.replace(tzinfo=timezone.utc)
        self.instant = instant

    @classmethod
    def from_epoch_millis(cls, millis: int) -> "FixedClock":
        return cls(_EPOCH + timedelta(milliseconds=millis))

    def now(self) -> datetime:
        return self.instant


def to_epoch_millis(instant: datetime) -> int:
    if instant.tzinfo is None:
        instant = instant.replace(tzinfo=timezone.utc)
    return (instant - _EPOCH) // timedelta(milliseconds=1)


__all__ = ["Clock", "FixedClock", "UtcClock", "to_epoch_millis"]
