from abc import ABC, abstractmethod

from core.domain.models.task import Task


class TaskRepository(ABC):
    @abstractmethod
    def list(
        self, status: str | None = None, page: int = 1, limit: int = 10
    ) -> tuple[list[Task], int]:
        """
        Return one page of tasks, newest first, plus the count of all tasks
        matching `status` (all tasks when it is empty).
        """
        raise NotImplementedError

    @abstractmethod
    def get(self, task_id: int) -> Task | None:
        raise NotImplementedError

    @abstractmethod
    def add(self, task: Task) -> Task:
        raise NotImplementedError

    @abstractmethod
    def save(self, task: Task) -> Task:
        """Persist changes to an existing task. Raises TaskNotFoundError if it is gone."""
        raise NotImplementedError

    @abstractmethod
    def delete(self, task_id: int) -> None:
        raise NotImplementedError
