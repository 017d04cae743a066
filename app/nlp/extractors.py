"""
Phrase matchers for the quick-add parser.

Each category (date, time, priority) is an ordered tuple of matcher
functions. The first matcher that finds something wins; within a matcher the
leftmost occurrence wins. Matchers only locate phrases, the input text is
never modified.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass
from typing import Literal

Category = Literal["date", "time", "priority"]

WEEKDAYS = {
    "monday": 0, "mon": 0,
    "tuesday": 1, "tues": 1, "tue": 1,
    "wednesday": 2, "weds": 2, "wed": 2,
    "thursday": 3, "thurs": 3, "thur": 3, "thu": 3,
    "friday": 4, "fri": 4,
    "saturday": 5, "sat": 5,
    "sunday": 6, "sun": 6,
}

# Longest names first so "next monday" is not cut down to "next mon"
WEEKDAY_ALT = "|".join(sorted(WEEKDAYS, key=len, reverse=True))
LEVEL_WORD_ALT = "high|medium|low"
LEVEL_ABBR_ALT = "med|hi|lo|h|m|l"
LEVEL_ALT = f"{LEVEL_WORD_ALT}|{LEVEL_ABBR_ALT}"

NEXT_WEEKDAY_PAT = re.compile(rf"\bnext\s+({WEEKDAY_ALT})\b", re.IGNORECASE)
TOMORROW_PAT = re.compile(r"\btomorrow\b", re.IGNORECASE)
NUMERIC_DATE_PAT = re.compile(r"(?<![\w/-])(\d{1,2})[/-](\d{1,2})(?:[/-](\d{2,4}))?(?![\w/-])")

# A time must not touch a date separator or other digits: "3/15" is not 3 o'clock
CLOCK_TIME_PAT = re.compile(r"(?<![\w/:-])(\d{1,2}):(\d{2})(?:\s*(am|pm))?(?![\w/:-])", re.IGNORECASE)
MERIDIEM_TIME_PAT = re.compile(r"(?<![\w/:-])(\d{1,2})\s*(am|pm)\b", re.IGNORECASE)
BARE_HOUR_PAT = re.compile(r"(?<![\w/:.-])(\d{1,2})(?![\w/:.-])")

LEVEL_PRIORITY_PAT = re.compile(rf"\b({LEVEL_ALT})\s*priority\b", re.IGNORECASE)
LEVEL_WORD_PAT = re.compile(rf"\b({LEVEL_WORD_ALT})\b", re.IGNORECASE)
LEVEL_ABBR_PAT = re.compile(rf"\b({LEVEL_ABBR_ALT})\b", re.IGNORECASE)


@dataclass(frozen=True)
class ExtractedPhrase:
    category: Category
    text: str
    start: int
    end: int
    token: str


Matcher = Callable[[str], "ExtractedPhrase | None"]


def _pattern_matcher(category: Category, pat: re.Pattern[str], token_group: int = 0) -> Matcher:
    def match(text: str) -> ExtractedPhrase | None:
        m = pat.search(text)
        if not m:
            return None
        return ExtractedPhrase(
            category=category,
            text=m.group(0),
            start=m.start(),
            end=m.end(),
            token=m.group(token_group),
        )

    return match


DATE_MATCHERS: tuple[Matcher, ...] = (
    _pattern_matcher("date", NEXT_WEEKDAY_PAT),
    _pattern_matcher("date", TOMORROW_PAT),
    _pattern_matcher("date", NUMERIC_DATE_PAT),
)

TIME_MATCHERS: tuple[Matcher, ...] = (
    _pattern_matcher("time", CLOCK_TIME_PAT),
    _pattern_matcher("time", MERIDIEM_TIME_PAT),
    _pattern_matcher("time", BARE_HOUR_PAT),
)

PRIORITY_MATCHERS: tuple[Matcher, ...] = (
    _pattern_matcher("priority", LEVEL_PRIORITY_PAT, token_group=1),
    _pattern_matcher("priority", LEVEL_WORD_PAT, token_group=1),
    _pattern_matcher("priority", LEVEL_ABBR_PAT, token_group=1),
)


def first_match(text: str, matchers: tuple[Matcher, ...]) -> ExtractedPhrase | None:
    """Run matchers in precedence order and return the first hit."""
    for matcher in matchers:
        found = matcher(text)
        if found is not None:
            return found
    return None


def extract_date(text: str) -> ExtractedPhrase | None:
    return first_match(text, DATE_MATCHERS)


def extract_time(text: str) -> ExtractedPhrase | None:
    return first_match(text, TIME_MATCHERS)


def extract_priority(text: str) -> ExtractedPhrase | None:
    return first_match(text, PRIORITY_MATCHERS)
