"""Navigation, selection and per-day events for the month view.

One ``CalendarStore`` is owned by the window and passed to whatever needs it.
Operations a user can get wrong return a ``Result`` instead of raising, so
the caller decides how (or whether) to show a notice.

Navigation only checks the 1st of the candidate month against the supported
range, so ``2200-01`` is reachable even though most of it lies past
``2200-01-01``.
"""

from __future__ import annotations

import calendar
import logging
import uuid
from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Callable, Generic, TypeVar

import date_keys
from calendar_logic import (
    MonthLayout,
    days_in_month,
    month_grid,
    month_layout,
    next_month,
    prev_month,
)

logger = logging.getLogger(__name__)

MAX_EVENTS_PER_DAY = 3

T = TypeVar("T")


class CalendarError(Enum):
    OUT_OF_RANGE = ("Calendar supports dates from 1970 to 2200", True)
    EMPTY_TITLE = ("", False)
    CAPACITY_EXCEEDED = (
        f"You can only add up to {MAX_EVENTS_PER_DAY} events per date", True)
    INVALID_KEY = ("Please enter a date as YYYY-MM-DD", True)

    def __init__(self, message: str, notify: bool) -> None:
        self.message = message
        self.notify = notify


class Direction(Enum):
    PREVIOUS = -1
    NEXT = 1


@dataclass(frozen=True)
class Result(Generic[T]):
    """Outcome of a store operation: a value or a ``CalendarError``."""

    value: T | None = None
    error: CalendarError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(frozen=True)
class CalendarEvent:
    id: str
    title: str
    day_key: str


def _new_event_id() -> str:
    return uuid.uuid4().hex[:12]


class CalendarStore:
    """In-memory month view state: displayed month, selected day, events."""

    def __init__(
        self,
        clock: Callable[[], date] = date.today,
        firstweekday: int = calendar.SUNDAY,
        id_factory: Callable[[], str] = _new_event_id,
    ) -> None:
        self._clock = clock
        self._id_factory = id_factory
        self.firstweekday = firstweekday

        today = clock()
        self.year: int = today.year
        self.month: int = today.month
        self.selected_key: str = date_keys.encode(today)

        self._events: dict[str, list[CalendarEvent]] = {}
        self._ids: set[str] = set()

    # ------------------------------------------------------------------
    # Derived views
    # ------------------------------------------------------------------
    @property
    def today_key(self) -> str:
        return date_keys.encode(self._clock())

    def layout(self) -> MonthLayout:
        return month_layout(self.year, self.month, self.firstweekday)

    def grid(self) -> list[list[int | None]]:
        """6×7 day numbers of the displayed month, None for blank cells."""
        return month_grid(self.year, self.month, self.firstweekday)

    def day_key(self, day: int) -> str:
        return date_keys.key_for(self.year, self.month, day)

    def events_for(self, day: int) -> tuple[CalendarEvent, ...]:
        return tuple(self._events.get(self.day_key(day), ()))

    def is_today(self, day: int) -> bool:
        return self.day_key(day) == self.today_key

    def is_selected(self, day: int) -> bool:
        return self.day_key(day) == self.selected_key

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------
    def navigate(self, direction: Direction) -> Result[None]:
        if direction is Direction.PREVIOUS:
            year, month = prev_month(self.year, self.month)
        elif direction is Direction.NEXT:
            year, month = next_month(self.year, self.month)
        else:
            raise ValueError(f"unknown direction: {direction!r}")

        # Years outside the range cannot hold an in-range 1st of month
        in_range = (date_keys.MIN_DATE.year <= year <= date_keys.MAX_DATE.year
                    and date_keys.is_in_range(date(year, month, 1)))
        if not in_range:
            logger.info("Refused navigation to %04d-%02d: out of range", year, month)
            return Result(error=CalendarError.OUT_OF_RANGE)

        self.year, self.month = year, month
        logger.debug("Navigated to %04d-%02d", year, month)
        return Result()

    def go_today(self) -> None:
        today = self._clock()
        self.year, self.month = today.year, today.month

    # ------------------------------------------------------------------
    # Selection
    # ------------------------------------------------------------------
    def select_day(self, day: int) -> None:
        """Select *day* of the displayed month.

        Raises ValueError if the month has no such day.
        """
        if not 1 <= day <= days_in_month(self.year, self.month):
            raise ValueError(
                f"day {day} is not in {self.year:04d}-{self.month:02d}")
        self.selected_key = self.day_key(day)
        logger.debug("Selected %s", self.selected_key)

    def set_selection_key(self, key: str) -> Result[None]:
        # Range bounds are enforced by the date field, not here
        try:
            parsed = date_keys.decode(key)
        except date_keys.InvalidKeyError as exc:
            logger.info("Rejected selection key: %s", exc)
            return Result(error=CalendarError.INVALID_KEY)
        self.selected_key = date_keys.encode(parsed)
        logger.debug("Selected %s", self.selected_key)
        return Result()

    # ------------------------------------------------------------------
    # Events
    # ------------------------------------------------------------------
    def add_event(self, title: str) -> Result[CalendarEvent]:
        title = title.strip()
        if not title:
            return Result(error=CalendarError.EMPTY_TITLE)

        key = self.selected_key
        bucket = self._events.get(key, [])
        if len(bucket) >= MAX_EVENTS_PER_DAY:
            logger.info("Refused event on %s: day is full", key)
            return Result(error=CalendarError.CAPACITY_EXCEEDED)

        event = CalendarEvent(id=self._unique_id(), title=title, day_key=key)
        self._events[key] = bucket + [event]
        logger.debug("Added event %s on %s", event.id, key)
        return Result(value=event)

    def _unique_id(self) -> str:
        event_id = self._id_factory()
        while event_id in self._ids:
            event_id = self._id_factory()
        self._ids.add(event_id)
        return event_id
