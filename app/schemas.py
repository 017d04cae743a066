from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from .models import Priority

DATE_PATTERN = r"^\d{4}-\d{2}-\d{2}$"
TIME_PATTERN = r"^([01]\d|2[0-3]):[0-5]\d$"


class NormalizedTask(BaseModel):
    """Fully resolved quick-add result; every field is always set."""

    model_config = ConfigDict(use_enum_values=True)

    text: str = Field(..., min_length=1)
    date: str = Field(..., pattern=DATE_PATTERN)
    time: str = Field(..., pattern=TIME_PATTERN)
    priority: Priority = Priority.medium


class ExternalExtraction(BaseModel):
    """Untrusted reply from the remote extractor. Any field may be missing."""

    model_config = ConfigDict(extra="ignore")

    text: str | None = None
    date: str | None = None
    time: str | None = None
    priority: str | None = None


class TaskBase(BaseModel):
    # Serialize enums as their values (e.g., "High")
    model_config = ConfigDict(use_enum_values=True)

    text: str = Field(..., min_length=1, max_length=280)
    date: str = Field(..., pattern=DATE_PATTERN)
    time: str = Field(..., pattern=TIME_PATTERN)
    priority: Priority = Priority.medium


class TaskCreate(TaskBase):
    pass


class TaskUpdate(BaseModel):
    text: str | None = Field(None, min_length=1, max_length=280)
    date: str | None = Field(None, pattern=DATE_PATTERN)
    time: str | None = Field(None, pattern=TIME_PATTERN)
    priority: Priority | None = None
    completed: bool | None = None
    archived: bool | None = None


class TaskOut(TaskBase):
    model_config = ConfigDict(from_attributes=True, use_enum_values=True)
    id: int
    completed: bool
    archived: bool
    created_at: datetime
    updated_at: datetime


class QuickAddIn(BaseModel):
    prompt: str | None = None


class QuickAddOut(BaseModel):
    task: NormalizedTask
