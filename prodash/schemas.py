from __future__ import annotations

from datetime import date as dt_date
from decimal import Decimal
from typing import Optional, List, Literal

from pydantic import BaseModel, Field, field_validator

from prodash.dates import is_iso_date

TaskPriority = Literal["low", "medium", "high"]
TaskStatus = Literal["todo", "in-progress", "done"]
JobStatus = Literal["applied", "interview", "rejected", "offer"]
ProjectStatus = Literal["planning", "active", "on-hold", "completed"]
BudgetType = Literal["income", "expense"]
ChatRole = Literal["user", "assistant"]


class RegisterPayload(BaseModel):
    name: str = Field(..., min_length=2)
    email: str = Field(..., pattern=r"^[^@\s]+@[^@\s]+$")
    password: str = Field(..., min_length=8)


class LoginPayload(BaseModel):
    email: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class TaskCreate(BaseModel):
    title: str = Field(..., min_length=1)
    description: Optional[str] = None
    priority: TaskPriority = "medium"
    status: TaskStatus = "todo"
    due_date: Optional[dt_date] = None
    project_id: Optional[str] = None


class TaskPatch(BaseModel):
    title: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    priority: Optional[TaskPriority] = None
    status: Optional[TaskStatus] = None
    due_date: Optional[dt_date] = None
    project_id: Optional[str] = None


class JobCreate(BaseModel):
    company: str = Field(..., min_length=1)
    role: str = Field(..., min_length=1)
    status: JobStatus = "applied"
    notes: Optional[str] = None
    date_applied: Optional[dt_date] = None


class JobPatch(BaseModel):
    company: Optional[str] = Field(None, min_length=1)
    role: Optional[str] = Field(None, min_length=1)
    status: Optional[JobStatus] = None
    notes: Optional[str] = None
    date_applied: Optional[dt_date] = None


class ProjectCreate(BaseModel):
    name: str = Field(..., min_length=1)
    description: Optional[str] = None
    status: ProjectStatus = "planning"
    progress: int = Field(0, ge=0, le=100)


class ProjectPatch(BaseModel):
    name: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    status: Optional[ProjectStatus] = None
    progress: Optional[int] = Field(None, ge=0, le=100)


class HabitCreate(BaseModel):
    name: str = Field(..., min_length=1)
    description: Optional[str] = None


class HabitPatch(BaseModel):
    name: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    completed_dates: Optional[List[str]] = None

    @field_validator("completed_dates")
    @classmethod
    def _check_dates(cls, value):
        if value is None:
            return value
        bad = [item for item in value if not is_iso_date(item)]
        if bad:
            raise ValueError(f"Invalid yyyy-MM-dd dates: {', '.join(map(str, bad))}")
        return value


class BudgetEntryCreate(BaseModel):
    amount: Decimal = Field(..., gt=0)
    category: str = Field(..., min_length=1)
    type: BudgetType
    date: dt_date
    description: Optional[str] = None


class BudgetEntryPatch(BaseModel):
    amount: Optional[Decimal] = Field(None, gt=0)
    category: Optional[str] = Field(None, min_length=1)
    type: Optional[BudgetType] = None
    date: Optional[dt_date] = None
    description: Optional[str] = None


class ChatMessageCreate(BaseModel):
    role: ChatRole
    content: str = Field(..., min_length=1)


class ChatTurn(BaseModel):
    role: str
    content: str


class ChatRequest(BaseModel):
    messages: List[ChatTurn] = Field(default_factory=list)
