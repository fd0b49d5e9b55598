import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Callable

from core.domain.errors import TaskNotFoundError, TaskValidationError
from core.domain.models.task import Task, TaskStatus, utcnow
from core.domain.ports.task_repository import TaskRepository
from core.domain.validation import validate_task_fields

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class UpdateTaskCommand:
    """Partial update. A field left as None keeps the stored value."""

    title: str | None = None
    description: str | None = None
    status: str | None = None


class UpdateTaskUseCase:
    def __init__(
        self,
        repository: TaskRepository,
        clock: Callable[[], datetime] = utcnow,
    ) -> None:
        self._repository = repository
        self._clock = clock

    def execute(self, task_id: int, cmd: UpdateTaskCommand) -> Task:
        task = self._repository.get(task_id)
        if task is None:
            raise TaskNotFoundError(task_id)

        title = cmd.title if cmd.title is not None else task.title
        status = cmd.status if cmd.status is not None else task.status.value

        errors = validate_task_fields(title, status)
        if errors:
            raise TaskValidationError(errors)

        task.title = title
        task.status = TaskStatus(status)
        if cmd.description is not None:
            task.description = cmd.description
        task.updated_at = self._clock()

        task = self._repository.save(task)
        logger.info(f"Task {task.id} updated")
        return task
