from __future__ import annotations

import logging
from datetime import date

from ..schemas import ExternalExtraction, NormalizedTask
from .llm import ExtractionError, TaskExtractor
from .parser import UNTITLED, parse_quick_task

logger = logging.getLogger(__name__)


def merge_extraction(raw: str, external: ExternalExtraction | None, fallback: NormalizedTask) -> NormalizedTask:
    """
    Combine the remote reading with the local parse.

    Only the title may come from the remote extractor. Date, time and priority
    always come from the local parse, whatever the remote payload says.
    """
    if external is None:
        return fallback

    external_title = (external.text or "").strip()
    title = external_title or fallback.text or UNTITLED
    if external_title:
        logger.debug("Using remote title %r for %r", external_title, raw)
    return fallback.model_copy(update={"text": title})


def quick_add(text: str, extractor: TaskExtractor | None = None, today: date | None = None) -> NormalizedTask:
    """
    Turn free text into a fully resolved task.

    `today` anchors relative dates; production callers leave it None.
    Remote extraction failures are logged and the local parse is returned.
    """
    if today is None:
        today = date.today()

    fallback = parse_quick_task(text, today)
    if extractor is None:
        return fallback

    try:
        external = extractor.extract(text)
    except ExtractionError as exc:
        logger.warning("Remote extraction failed, using local parser: %s", exc)
        return fallback
    except Exception:
        # any extractor failure means no remote result
        logger.exception("Remote extractor raised unexpectedly, using local parser")
        return fallback

    return merge_extraction(text, external, fallback)
