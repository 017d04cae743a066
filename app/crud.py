from typing import Literal

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from .models import Task
from .schemas import TaskCreate, TaskUpdate

TaskFilter = Literal["all", "active", "archived"]


async def create_task(db: AsyncSession, payload: TaskCreate) -> Task:
    task = Task(**payload.model_dump())
    db.add(task)
    await db.commit()
    await db.refresh(task)
    return task


async def get_task(db: AsyncSession, task_id: int) -> Task | None:
    res = await db.execute(select(Task).where(Task.id == task_id))
    return res.scalar_one_or_none()


async def list_tasks(db: AsyncSession, q: str | None = None, filter: TaskFilter = "all") -> list[Task]:
    stmt = select(Task).order_by(Task.date.asc(), Task.time.asc(), Task.id.asc())
    if filter == "active":
        stmt = stmt.where(Task.archived.is_(False))
    elif filter == "archived":
        stmt = stmt.where(Task.archived.is_(True))
    if q:
        stmt = stmt.where(Task.text.ilike(f"%{q}%"))
    res = await db.execute(stmt)
    return list(res.scalars().all())


async def update_task(db: AsyncSession, task_id: int, payload: TaskUpdate):
    task = await get_task(db, task_id)
    if not task:
        return None
    updates = payload.model_dump(exclude_unset=True)
    for k, v in updates.items():
        setattr(task, k, v)
    await db.commit()
    await db.refresh(task)
    return task


async def delete_task(db: AsyncSession, task_id: int) -> bool:
    task = await get_task(db, task_id)
    if not task:
        return False
    await db.delete(task)
    await db.commit()
    return True


async def delete_all_tasks(db: AsyncSession) -> int:
    res = await db.execute(delete(Task))
    await db.commit()
    return res.rowcount or 0
