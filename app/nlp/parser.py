from __future__ import annotations

import logging
import re
from datetime import date

from ..schemas import NormalizedTask
from ..utils.text import collapse_whitespace
from .extractors import LEVEL_ALT, WEEKDAY_ALT, extract_date, extract_priority, extract_time
from .normalize import format_date, format_time, normalize_priority

logger = logging.getLogger(__name__)

UNTITLED = "Untitled Task"

# Trailing-only patterns used to clean the title. Order matters: time, date, priority.
TRAILING_TIME_PAT = re.compile(r"\s*(?:\bat\s*)?(?<![\w/:-])\d{1,2}(?::\d{2})?\s*(?:am|pm)?\s*$", re.IGNORECASE)
TRAILING_DATE_PAT = re.compile(
    rf"\s*(?:\bon\s+)?(?:\bnext\s+(?:{WEEKDAY_ALT})|\btomorrow|(?<![\w/-])\d{{1,2}}[/-]\d{{1,2}}(?:[/-]\d{{2,4}})?)\s*$",
    re.IGNORECASE,
)
TRAILING_PRIORITY_PAT = re.compile(rf"\s*\b(?:{LEVEL_ALT})\s*priority\s*$", re.IGNORECASE)

TRAILING_PATTERNS = (TRAILING_TIME_PAT, TRAILING_DATE_PAT, TRAILING_PRIORITY_PAT)


def _strip_trailing(text: str) -> str:
    """
    Remove time/date/priority phrases from the end of the text, repeating
    until none is left. Phrases in the middle of the text are kept.
    """
    work = text
    while True:
        before = work
        for pat in TRAILING_PATTERNS:
            work = pat.sub("", work, count=1)
        if work == before:
            return work


def derive_title(text: str) -> str:
    title = collapse_whitespace(_strip_trailing(text))
    if title:
        return title
    # Stripping ate everything; keep what the user typed
    return text if text.strip() else UNTITLED


def parse_quick_task(text: str, today: date) -> NormalizedTask:
    """
    Local quick-add parser:
    - date: 'next fri', 'tomorrow', '3/15', '3-15-2025'
    - time: '5pm', '9:30', '10 am'
    - priority: 'high priority', 'low', 'med priority'
    - title is the text with trailing date/time/priority phrases removed
    """
    date_phrase = extract_date(text)
    time_phrase = extract_time(text)
    priority_phrase = extract_priority(text)
    logger.debug(
        "Extracted phrases from %r: date=%r time=%r priority=%r",
        text,
        date_phrase and date_phrase.text,
        time_phrase and time_phrase.text,
        priority_phrase and priority_phrase.text,
    )

    task = NormalizedTask(
        text=derive_title(text),
        date=format_date(date_phrase.token if date_phrase else None, today),
        time=format_time(time_phrase.token if time_phrase else None),
        priority=normalize_priority(priority_phrase.token if priority_phrase else None),
    )
    logger.info("Fallback parse result: %s", task.model_dump())
    return task
