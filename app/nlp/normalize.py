from __future__ import annotations

import logging
import re
from datetime import date, datetime, time, timedelta

import dateparser

from ..models import Priority
from .extractors import WEEKDAYS

logger = logging.getLogger(__name__)

DEFAULT_TIME = "12:00"

NEXT_PREFIX_PAT = re.compile(r"^next\s+(\w+)", re.IGNORECASE)
NUMERIC_DATE_PAT = re.compile(r"^(\d{1,2})[/-](\d{1,2})(?:[/-](\d{2,4}))?$")
CLOCK_PAT = re.compile(r"^(\d{1,2})(?::(\d{2}))?\s*(am|pm)?$", re.IGNORECASE)

# Anchor for generic time parsing; a result on another day was a date phrase
TIME_ANCHOR = datetime(2000, 1, 1)


def _date_settings(today: date) -> dict:
    return {
        "PREFER_DATES_FROM": "future",
        "RELATIVE_BASE": datetime.combine(today, time()),
        "DATE_ORDER": "MDY",
        "RETURN_AS_TIMEZONE_AWARE": False,
    }


def _dateparser_parse(phrase: str, settings: dict) -> datetime | None:
    try:
        return dateparser.parse(phrase, languages=["en"], settings=settings)
    except (ValueError, OverflowError, TypeError) as exc:
        logger.debug("dateparser rejected %r: %s", phrase, exc)
        return None


def _next_weekday(today: date, target: int) -> date:
    diff = target - today.weekday()
    if diff <= 0:
        diff += 7
    return today + timedelta(days=diff)


def _numeric_date(m: re.Match[str], today: date) -> date | None:
    month, day, year = int(m.group(1)), int(m.group(2)), m.group(3)
    try:
        if year:
            y = int(year)
            if len(year) == 2:
                y += 2000
            return date(y, month, day)
        candidate = date(today.year, month, day)
    except ValueError:
        return None
    if candidate < today:
        try:
            return candidate.replace(year=today.year + 1)
        except ValueError:
            # Feb 29 with no leap day next year
            return None
    return candidate


def format_date(phrase: str | None, today: date) -> str:
    """
    Resolve a date phrase to YYYY-MM-DD relative to `today`.
    Never raises: anything unrecognised resolves to `today`.
    """
    if not phrase or not phrase.strip():
        return today.isoformat()

    raw = phrase.strip()
    lowered = raw.lower()

    if lowered == "tomorrow":
        return (today + timedelta(days=1)).isoformat()

    if lowered.startswith("next"):
        m = NEXT_PREFIX_PAT.match(lowered)
        if m and m.group(1) in WEEKDAYS:
            return _next_weekday(today, WEEKDAYS[m.group(1)]).isoformat()
        logger.debug("Unknown weekday in %r, using today", raw)
        return today.isoformat()

    m = NUMERIC_DATE_PAT.match(raw)
    if m:
        resolved = _numeric_date(m, today)
        if resolved is not None:
            return resolved.isoformat()
        logger.debug("Numeric date %r is not a calendar date", raw)

    parsed = _dateparser_parse(raw, _date_settings(today))
    if parsed is not None:
        return parsed.date().isoformat()

    logger.debug("Could not parse date %r, using today", raw)
    return today.isoformat()


def _clock(hours: int, minutes: int) -> str | None:
    if 0 <= hours <= 23 and 0 <= minutes <= 59:
        return f"{hours:02d}:{minutes:02d}"
    return None


def format_time(phrase: str | None) -> str:
    """Resolve a time phrase to 24-hour HH:MM, defaulting to 12:00."""
    if not phrase or not phrase.strip():
        return DEFAULT_TIME

    raw = phrase.strip()
    m = CLOCK_PAT.match(raw)
    if m:
        hours = int(m.group(1))
        minutes = int(m.group(2) or "00")
        meridiem = (m.group(3) or "").lower()
        if meridiem == "pm" and hours < 12:
            hours += 12
        elif meridiem == "am" and hours == 12:
            hours = 0
        clock = _clock(hours, minutes)
        if clock:
            return clock

    try:
        t = time.fromisoformat(raw)
        return f"{t.hour:02d}:{t.minute:02d}"
    except ValueError:
        pass

    parsed = _dateparser_parse(raw, {"RELATIVE_BASE": TIME_ANCHOR, "RETURN_AS_TIMEZONE_AWARE": False})
    if parsed is not None and parsed.date() == TIME_ANCHOR.date():
        return f"{parsed.hour:02d}:{parsed.minute:02d}"

    logger.debug("Could not parse time %r, defaulting to %s", raw, DEFAULT_TIME)
    return DEFAULT_TIME


def normalize_priority(token: str | None) -> Priority:
    if not token:
        return Priority.medium
    p = token.strip().lower()
    if p.startswith("h"):
        return Priority.high
    if p.startswith("m"):
        return Priority.medium
    if p.startswith("l"):
        return Priority.low
    return Priority.medium
