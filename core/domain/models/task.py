from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum


class TaskStatus(Enum):
    CREATED = "created"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"

    @classmethod
    def values(cls) -> list[str]:
        return [member.value for member in cls]


def utcnow() -> datetime:
    # Naive UTC, so both SQL backends round-trip it unchanged.
    return datetime.now(timezone.utc).replace(tzinfo=None)


@dataclass(slots=True)
class Task:
    title: str
    description: str | None = None
    status: TaskStatus = TaskStatus.CREATED
    created_at: datetime | None = None
    updated_at: datetime | None = None
    id: int | None = None


@dataclass(slots=True)
class TaskPage:
    items: list[Task] = field(default_factory=list)
    page: int = 1
    limit: int = 10
    total: int = 0
