import logging

from fastapi import APIRouter, Depends, HTTPException
from starlette.concurrency import run_in_threadpool

from ..nlp.llm import TaskExtractor, get_extractor
from ..nlp.quick_add import quick_add
from ..schemas import QuickAddIn, QuickAddOut

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/ai-task", response_model=QuickAddOut)
async def ai_task(payload: QuickAddIn, extractor: TaskExtractor | None = Depends(get_extractor)):
    """Parse a quick-add phrase without saving it."""
    if not payload.prompt or not payload.prompt.strip():
        raise HTTPException(400, "No prompt provided")
    task = await run_in_threadpool(quick_add, payload.prompt, extractor)
    logger.info("Quick-add %r -> %s", payload.prompt, task.model_dump())
    return {"task": task}
