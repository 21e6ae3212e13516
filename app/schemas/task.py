# app/schemas/task.py
import re
from pydantic import BaseModel, EmailStr, Field, field_validator
from pydantic.alias_generators import to_camel
from datetime import date, datetime
from typing import Optional

from app.models.task import TaskCategory, TaskPriority, TaskStatus

TASK_CODE_PATTERN = r"^[A-Z]+-\d+$"
TAGS_PATTERN = re.compile(r"^[a-zA-Z0-9\s]+(,\s*[a-zA-Z0-9\s]+)*$")

CAMEL_CASE = {
    "alias_generator": to_camel,
    "populate_by_name": True,
}


def check_deadline(v: Optional[date]) -> Optional[date]:
    if v is not None and v < date.today():
        raise ValueError("Deadline must be today or a future date")
    return v


def check_tags(v: Optional[str]) -> Optional[str]:
    if not v:
        return v
    # tag1, tag2, tag3 - letters, digits and spaces only
    if not TAGS_PATTERN.match(v.strip()):
        raise ValueError("Tags must be comma-separated alphanumeric words")
    return v.strip()


class TaskBase(BaseModel):
    title: str = Field(min_length=3, max_length=100)
    description: str = Field(default="", max_length=500)
    status: TaskStatus = TaskStatus.OPEN
    priority: TaskPriority = TaskPriority.MEDIUM
    category: Optional[TaskCategory] = None
    assigned_to: Optional[EmailStr] = None
    estimated_hours: Optional[float] = Field(default=None, ge=0.5, le=1000)
    deadline: Optional[date] = None
    tags: Optional[str] = Field(default=None, max_length=255)
    notify_on_completion: bool = False

    model_config = CAMEL_CASE

    @field_validator("deadline")
    @classmethod
    def deadline_in_future(cls, v):
        return check_deadline(v)

    @field_validator("tags")
    @classmethod
    def tags_format(cls, v):
        return check_tags(v)


class TaskCreate(TaskBase):
    task_code: Optional[str] = Field(default=None, min_length=4, max_length=32, pattern=TASK_CODE_PATTERN)


class TaskUpdate(BaseModel):
    """Partial update: only the fields sent by the client are applied"""
    title: Optional[str] = Field(default=None, min_length=3, max_length=100)
    description: Optional[str] = Field(default=None, max_length=500)
    status: Optional[TaskStatus] = None
    priority: Optional[TaskPriority] = None
    category: Optional[TaskCategory] = None
    assigned_to: Optional[EmailStr] = None
    estimated_hours: Optional[float] = Field(default=None, ge=0.5, le=1000)
    deadline: Optional[date] = None
    tags: Optional[str] = Field(default=None, max_length=255)
    notify_on_completion: Optional[bool] = None

    model_config = CAMEL_CASE

    @field_validator("title", "description", "status", "priority", "notify_on_completion")
    @classmethod
    def not_null(cls, v, info):
        if v is None:
            raise ValueError(f"{info.field_name} cannot be null")
        return v

    @field_validator("deadline")
    @classmethod
    def deadline_in_future(cls, v):
        return check_deadline(v)

    @field_validator("tags")
    @classmethod
    def tags_format(cls, v):
        return check_tags(v)


class TaskStatusUpdate(BaseModel):
    status: TaskStatus


class TaskFilter(BaseModel):
    status: Optional[TaskStatus] = None
    search: Optional[str] = Field(default=None, min_length=1)


class TaskOut(BaseModel):
    id: str
    task_code: Optional[str] = None
    title: str
    description: str
    status: TaskStatus
    priority: Optional[TaskPriority] = None
    category: Optional[TaskCategory] = None
    assigned_to: Optional[str] = None
    estimated_hours: Optional[float] = None
    deadline: Optional[date] = None
    tags: Optional[str] = None
    notify_on_completion: bool
    user_id: str
    created_at: datetime
    updated_at: Optional[datetime] = None
    version: int

    model_config = {
        **CAMEL_CASE,
        "from_attributes": True,
    }
