from datetime import datetime

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from core.domain.models.task import TaskStatus


class TaskIn(BaseModel):
    """
    Request body for create and update.

    Every field is optional here; title/status rules are enforced by the use
    cases so that both endpoints report errors the same way.
    """

    title: str | None = None
    description: str | None = None
    status: str | None = None


class TaskOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    description: str | None = None
    status: TaskStatus
    created_at: datetime = Field(
        validation_alias=AliasChoices("created_at", "createdAt"),
        serialization_alias="createdAt",
    )
    updated_at: datetime = Field(
        validation_alias=AliasChoices("updated_at", "updatedAt"),
        serialization_alias="updatedAt",
    )


class Pagination(BaseModel):
    page: int
    record_per_page: int
    total_tasks: int


class WelcomeResponse(BaseModel):
    message: str


class TaskResponse(BaseModel):
    success: bool = True
    data: TaskOut


class TaskMessageResponse(TaskResponse):
    message: str


class TaskListResponse(BaseModel):
    success: bool = True
    data: list[TaskOut]
    pagination: Pagination


class MessageResponse(BaseModel):
    success: bool = True
    message: str


class ErrorResponse(BaseModel):
    success: bool = False
    error: str


class ValidationErrorResponse(BaseModel):
    success: bool = False
    errors: dict[str, list[str]]
