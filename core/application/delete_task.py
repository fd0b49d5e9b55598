import logging
from dataclasses import dataclass

from core.domain.errors import TaskNotFoundError
from core.domain.ports.task_repository import TaskRepository

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class DeleteTaskCommand:
    id: int


class DeleteTaskUseCase:
    def __init__(self, repository: TaskRepository) -> None:
        self._repository = repository

    def execute(self, cmd: DeleteTaskCommand) -> None:
        task = self._repository.get(cmd.id)
        if task is None:
            raise TaskNotFoundError(cmd.id)
        self._repository.delete(cmd.id)
        logger.info(f"Task {cmd.id} deleted")
