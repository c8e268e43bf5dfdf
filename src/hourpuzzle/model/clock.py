"""
Clock Source
============
Dual-mode time provider feeding the puzzle.

Why is this file needed?
------------------------
1. LIVE mode: hour/minute/second follow the wall clock, so the puzzle runs
   unattended.
2. OVERRIDDEN mode: the three time fields become editable and are the source
   of truth, which allows scrubbing through the hour by hand.
3. The same three fields double as display (LIVE) and input (OVERRIDDEN);
   they are reached through the `TimeFieldPort` protocol so this module does
   not depend on Qt.

Invalid override input never raises: readers fall back to 0 and
`ClockSource.normalize` resets the offending field to "00".
"""
from __future__ import annotations

from datetime import datetime
from enum import StrEnum
import logging
import re
from typing import Callable, Optional, Protocol

logger = logging.getLogger(__name__)

MAX_HOUR = 23
# 60, not 59: minute/second fields accept "60" as valid input
MAX_MINUTE = 60
MAX_SECOND = 60
MAX_FIELD_LENGTH = 2
RESET_VALUE = "00"

# optional sign, ASCII digits, optional trailing dot ("+7", "7.")
_NUMBER = re.compile(r"([+-]?)([0-9]+)\.?")


class ClockMode(StrEnum):
    LIVE = "live"
    OVERRIDDEN = "overridden"


class TimeField(StrEnum):
    """Editable time fields, keyed by their widget names."""
    HOUR = "hora"
    MINUTE = "minuto"
    SECOND = "segundo"


FIELD_LIMITS: dict[TimeField, int] = {
    TimeField.HOUR: MAX_HOUR,
    TimeField.MINUTE: MAX_MINUTE,
    TimeField.SECOND: MAX_SECOND,
}


class TimeFieldPort(Protocol):
    """Access to the three editable time fields."""
    def get(self, field: TimeField) -> str: ...
    def set(self, field: TimeField, value: str) -> None: ...
    def set_enabled(self, enabled: bool) -> None: ...


class InMemoryTimeFields:
    """Plain `TimeFieldPort` used when no editor widget is attached."""

    def __init__(self) -> None:
        self.values: dict[TimeField, str] = {f: RESET_VALUE for f in TimeField}
        self.enabled: bool = False

    def get(self, field: TimeField) -> str:
        return self.values[field]

    def set(self, field: TimeField, value: str) -> None:
        self.values[field] = value

    def set_enabled(self, enabled: bool) -> None:
        self.enabled = enabled


def parse_field(raw: str, maximum: int) -> Optional[int]:
    """
    Validate a raw override string.

    A value is valid when it is at most two characters long and, once
    surrounding whitespace is stripped, reads as a non-negative integer not
    exceeding ``maximum``. A leading sign and a trailing dot are tolerated,
    so "+7" and "7." are 7 and "-0" is 0.

    Returns:
        The parsed value, or None when the input is invalid.
    """
    if len(raw) > MAX_FIELD_LENGTH:
        return None
    match = _NUMBER.fullmatch(raw.strip())
    if match is None:
        return None
    sign, digits = match.groups()
    value = int(digits)
    if sign == "-" and value != 0:
        return None
    if value > maximum:
        return None
    return value


def format_field(value: int) -> str:
    """Zero-padded 2-digit representation, e.g. 7 -> "07"."""
    return f"{value:02d}"


class ClockSource:
    """
    Provides hour, minute and second either from the wall clock or from the
    user-editable time fields.

    Starts in LIVE mode with the fields disabled.
    """

    def __init__(
        self,
        fields: Optional[TimeFieldPort] = None,
        now: Callable[[], datetime] = datetime.now,
    ) -> None:
        self.fields: TimeFieldPort = fields if fields is not None else InMemoryTimeFields()
        self._now = now
        self._mode = ClockMode.LIVE
        # wall-clock time last written to the fields by normalize()
        self._last_shown: Optional[datetime] = None
        self.fields.set_enabled(False)

    # --- PROPERTIES ---

    @property
    def mode(self) -> ClockMode:
        return self._mode

    @property
    def is_overridden(self) -> bool:
        return self._mode is ClockMode.OVERRIDDEN

    # --- MODE TRANSITIONS ---

    def pause(self) -> None:
        """Freeze the live clock and hand the time fields over to the user."""
        if self.is_overridden:
            return

        # freeze on the time the last frame displayed, if one has been drawn
        shown = self._last_shown if self._last_shown is not None else self._now()
        self.fields.set(TimeField.HOUR, format_field(shown.hour))
        self.fields.set(TimeField.MINUTE, format_field(shown.minute))
        self.fields.set(TimeField.SECOND, format_field(shown.second))

        self._mode = ClockMode.OVERRIDDEN
        self.fields.set_enabled(True)
        logger.info(f"Clock paused at {shown:%H:%M:%S}, time fields are editable.")

    def resume(self) -> None:
        """Return to the live clock and lock the time fields."""
        if not self.is_overridden:
            return
        self._mode = ClockMode.LIVE
        self._last_shown = None
        self.fields.set_enabled(False)
        logger.info("Clock resumed, following the system time.")

    # --- READERS ---

    def hour(self) -> int:
        if not self.is_overridden:
            return self._now().hour
        return self._read(TimeField.HOUR)

    def minute(self) -> int:
        if not self.is_overridden:
            return self._now().minute
        return self._read(TimeField.MINUTE)

    def second(self) -> int:
        if not self.is_overridden:
            return self._now().second
        return self._read(TimeField.SECOND)

    def _read(self, field: TimeField) -> int:
        value = parse_field(self.fields.get(field), FIELD_LIMITS[field])
        return 0 if value is None else value

    # --- SYNC ---

    def normalize(self) -> None:
        """
        Synchronise the time fields with the current mode.

        LIVE: the fields show the wall clock as 2-digit strings.
        OVERRIDDEN: invalid fields are reset to "00"; valid ones are left as
        typed so a single digit can be entered.
        """
        if not self.is_overridden:
            now = self._now()
            self.fields.set(TimeField.HOUR, format_field(now.hour))
            self.fields.set(TimeField.MINUTE, format_field(now.minute))
            self.fields.set(TimeField.SECOND, format_field(now.second))
            self._last_shown = now
            return

        for field, maximum in FIELD_LIMITS.items():
            raw = self.fields.get(field)
            if parse_field(raw, maximum) is None:
                logger.debug(f"Invalid value {raw!r} in field '{field}', resetting.")
                self.fields.set(field, RESET_VALUE)
