import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Callable

from core.domain.errors import TaskValidationError
from core.domain.models.task import Task, TaskStatus, utcnow
from core.domain.ports.task_repository import TaskRepository
from core.domain.validation import validate_task_fields

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class CreateTaskCommand:
    title: str | None = None
    description: str | None = None
    status: str | None = None


class CreateTaskUseCase:
    def __init__(
        self,
        repository: TaskRepository,
        clock: Callable[[], datetime] = utcnow,
    ) -> None:
        self._repository = repository
        self._clock = clock

    def execute(self, cmd: CreateTaskCommand) -> Task:
        errors = validate_task_fields(cmd.title, cmd.status)
        if errors:
            raise TaskValidationError(errors)

        now = self._clock()
        task = Task(
            title=cmd.title,
            description=cmd.description,
            status=TaskStatus(cmd.status) if cmd.status else TaskStatus.CREATED,
            created_at=now,
            updated_at=now,
        )
        task = self._repository.add(task)
        logger.info(f"Task {task.id} created")
        return task
