from fastapi import APIRouter, Depends, HTTPException, Query, Response
from sqlalchemy.ext.asyncio import AsyncSession

from .. import crud
from ..crud import TaskFilter
from ..db import get_session
from ..schemas import TaskCreate, TaskOut, TaskUpdate

router = APIRouter()


@router.post("", response_model=TaskOut, status_code=201)
async def create_task(payload: TaskCreate, db: AsyncSession = Depends(get_session)):
    return await crud.create_task(db, payload)


@router.get("", response_model=list[TaskOut])
async def list_tasks(
    q: str | None = Query(None, description="Case-insensitive text search"),
    filter: TaskFilter = Query("all", description="all, active or archived"),
    db: AsyncSession = Depends(get_session),
):
    return await crud.list_tasks(db, q=q, filter=filter)


@router.get("/{task_id}", response_model=TaskOut)
async def get_task(task_id: int, db: AsyncSession = Depends(get_session)):
    task = await crud.get_task(db, task_id)
    if not task:
        raise HTTPException(404, "Task not found")
    return task


@router.patch("/{task_id}", response_model=TaskOut)
async def update_task(task_id: int, payload: TaskUpdate, db: AsyncSession = Depends(get_session)):
    task = await crud.update_task(db, task_id, payload)
    if not task:
        raise HTTPException(404, "Task not found")
    return task


@router.delete("/{task_id}", status_code=204)
async def delete_task(task_id: int, db: AsyncSession = Depends(get_session)):
    ok = await crud.delete_task(db, task_id)
    if not ok:
        raise HTTPException(404, "Task not found")
    return Response(status_code=204)


@router.delete("", status_code=204)
async def delete_all_tasks(db: AsyncSession = Depends(get_session)):
    await crud.delete_all_tasks(db)
    return Response(status_code=204)
