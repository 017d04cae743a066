from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.concurrency import run_in_threadpool

from ..crud import create_task
from ..db import get_session
from ..nlp.llm import TaskExtractor, get_extractor
from ..nlp.quick_add import quick_add
from ..schemas import TaskCreate, TaskOut

router = APIRouter()


class IngestIn(BaseModel):
    text: str = Field(..., min_length=1)


@router.post("", response_model=TaskOut, status_code=201)
async def ingest(
    payload: IngestIn,
    db: AsyncSession = Depends(get_session),
    extractor: TaskExtractor | None = Depends(get_extractor),
):
    if not payload.text.strip():
        raise HTTPException(400, "No text provided")
    parsed = await run_in_threadpool(quick_add, payload.text, extractor)
    task = TaskCreate(
        text=parsed.text[:280],
        date=parsed.date,
        time=parsed.time,
        priority=parsed.priority,
    )
    return await create_task(db, task)
