"""Partial date accumulator shared by the rules of one parse.

Rules never build datetimes themselves. They write the fields they recognise
into a :class:`Context` under their :class:`~chronal.rules.base.Strategy`,
and the parser resolves the accumulated fields against the reference instant
once every clustered match has been applied.

Resolution order:
1. relative offset (``duration``) is added to the reference
2. ``week`` moves to Monday of that week relative to the shifted moment,
   then ``weekday`` picks a day inside it; without a week the weekday is
   found relative to the shifted moment using ``weekday_modifier``
3. year and month replace the shifted values
4. day replaces the shifted day (an inherited day is clamped to the month)
5. hour, minute and second replace the time of day
6. an explicit ``location`` replaces the zone, wall clock unchanged
"""

from __future__ import annotations

import logging
from datetime import datetime, tzinfo
from typing import Any, Dict, Optional

from dateutil.relativedelta import MO, relativedelta
from pydantic import BaseModel, Field, ValidationError

from chronal.arithmetic import days_in_month, weekday_delta
from chronal.errors import MalformedFieldError
from chronal.rules.base import Strategy

logger = logging.getLogger(__name__)

CALENDAR_FIELDS = ("year", "month", "day", "hour", "minute", "second")
WEEK_FIELDS = ("week", "weekday", "weekday_modifier")

# Units of ``duration`` a shift can own
OFFSET_UNITS = ("years", "months", "days", "hours", "minutes", "seconds", "microseconds")


def offset_units(delta: relativedelta) -> Dict[str, int]:
    """Return the non-zero units of ``delta``."""
    return {unit: getattr(delta, unit) for unit in OFFSET_UNITS if getattr(delta, unit)}


class Context(BaseModel):
    """Mutable set of partially known date/time fields for one parse."""

    text: str = Field("", description="Clustered expression text")
    duration: relativedelta = Field(default_factory=relativedelta)

    week: Optional[int] = Field(None, description="Calendar week relative to the reference's week")
    weekday: Optional[int] = Field(None, ge=0, le=6)
    weekday_modifier: Optional[str] = Field(None, pattern="^(this|last|past|next)$")

    year: Optional[int] = Field(None, ge=1, le=9999)
    month: Optional[int] = Field(None, ge=1, le=12)
    day: Optional[int] = Field(None, ge=1, le=31)
    hour: Optional[int] = Field(None, ge=0, le=23)
    minute: Optional[int] = Field(None, ge=0, le=59)
    second: Optional[int] = Field(None, ge=0, le=59)

    location: Optional[tzinfo] = None

    model_config = {
        "validate_assignment": True,
        "arbitrary_types_allowed": True,
    }

    # -----------------------------------------------------------------------
    # Field writes
    # -----------------------------------------------------------------------

    def is_set(self, *names: str) -> bool:
        """True if any of the named fields holds a value."""
        return any(self._has_value(name) for name in names)

    def assign(self, strategy: Strategy, **fields: Any) -> bool:
        """Write ``fields`` according to ``strategy``.

        OVERRIDE writes every field, SKIP writes nothing when any target is
        already set, MERGE only fills the unset ones. A scalar field holds a
        single value, so MERGE never combines two of them; relative offsets
        combine through :meth:`shift` instead.
        """
        fields = {name: value for name, value in fields.items() if value is not None}
        if not fields:
            return False

        if strategy is Strategy.SKIP and self.is_set(*fields):
            return False
        if strategy is Strategy.MERGE:
            fields = {name: value for name, value in fields.items() if not self._has_value(name)}

        for name, value in fields.items():
            self._write(name, value)
        return bool(fields)

    def default(self, **fields: Any) -> bool:
        """Fill fields that no rule has set yet."""
        return self.assign(Strategy.MERGE, **fields)

    def shift(self, strategy: Strategy, delta: relativedelta) -> bool:
        """Record a relative offset.

        The offset is kept per unit, and a shift owns the units its ``delta``
        carries: "yesterday" owns days and "2 hours ago" owns hours. OVERRIDE
        replaces the owned units and keeps the rest, MERGE adds to them, SKIP
        only writes when none of the owned units has been recorded.
        """
        units = offset_units(delta)
        if not units:
            return False

        current = offset_units(self.duration)
        if strategy is Strategy.SKIP and any(unit in current for unit in units):
            return False
        if strategy is Strategy.MERGE:
            units = {unit: current.get(unit, 0) + value for unit, value in units.items()}

        self.duration = relativedelta(**{**current, **units})
        return True

    def set_fields(self) -> Dict[str, Any]:
        """Return the fields that hold a value."""
        names = CALENDAR_FIELDS + WEEK_FIELDS
        values = {name: getattr(self, name) for name in names if getattr(self, name) is not None}
        if self.duration:
            values["duration"] = self.duration
        if self.location is not None:
            values["location"] = self.location
        return values

    def _has_value(self, name: str) -> bool:
        value = getattr(self, name)
        if name == "duration":
            return bool(value)
        return value is not None

    def _write(self, name: str, value: Any) -> None:
        try:
            setattr(self, name, value)
        except ValidationError as exc:
            raise MalformedFieldError(
                f"Invalid value for {name}: {value!r}",
                details={"field": name, "value": value, "text": self.text},
            ) from exc

    # -----------------------------------------------------------------------
    # Resolution
    # -----------------------------------------------------------------------

    def time(self, reference: datetime) -> datetime:
        """Resolve the accumulated fields against ``reference``."""
        try:
            moment = reference + self.duration if self.duration else reference
            moment = self._week_moment(moment)

            year = self.year if self.year is not None else moment.year
            month = self.month if self.month is not None else moment.month
            last_day = days_in_month(year, month)

            if self.day is None:
                day = min(moment.day, last_day)
            elif self.day > last_day:
                raise MalformedFieldError(
                    f"Day {self.day} does not exist in {year:04d}-{month:02d}",
                    details={"year": year, "month": month, "day": self.day, "text": self.text},
                )
            else:
                day = self.day

            replacements: Dict[str, Any] = {"year": year, "month": month, "day": day}
            if self.hour is not None:
                replacements["hour"] = self.hour
            if self.minute is not None:
                replacements["minute"] = self.minute
            if self.second is not None:
                replacements["second"] = self.second
                replacements["microsecond"] = 0
            if self.location is not None:
                replacements["tzinfo"] = self.location

            resolved = moment.replace(**replacements)
        except (ValueError, OverflowError) as exc:
            raise MalformedFieldError(
                f"Cannot resolve '{self.text}': {exc}",
                details={"text": self.text},
            ) from exc

        logger.debug(f"Resolved '{self.text}' with {self.set_fields()} to {resolved.isoformat()}")
        return resolved

    def _week_moment(self, moment: datetime) -> datetime:
        if self.week is not None:
            monday = moment + relativedelta(weeks=self.week, weekday=MO(-1))
            return monday + relativedelta(days=self.weekday or 0)
        if self.weekday is not None:
            days = weekday_delta(moment.weekday(), self.weekday, self.weekday_modifier or "next")
            return moment + relativedelta(days=days)
        return moment
