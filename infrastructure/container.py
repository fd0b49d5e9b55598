import os

from core.application.create_task import CreateTaskUseCase
from core.application.delete_task import DeleteTaskUseCase
from core.application.get_task import GetTaskUseCase
from core.application.list_tasks import ListTasksUseCase
from core.application.update_task import UpdateTaskUseCase
from core.domain.ports.task_repository import TaskRepository


def get_task_repository() -> TaskRepository:
    orm = os.getenv("ORM", "peewee").lower()

    if orm == "sqlalchemy":
        from infrastructure.sqlalchemy.repository.task_repository import (
            SqlAlchemyTaskRepository,
        )

        return SqlAlchemyTaskRepository()
    if orm != "peewee":
        raise ValueError(f"Unsupported ORM '{orm}' (expected 'peewee' or 'sqlalchemy')")

    from infrastructure.peewee.repository.task_repository import PeeweeTaskRepository

    return PeeweeTaskRepository()


def get_create_task_use_case(repository: TaskRepository) -> CreateTaskUseCase:
    return CreateTaskUseCase(repository=repository)


def get_get_task_use_case(repository: TaskRepository) -> GetTaskUseCase:
    return GetTaskUseCase(repository=repository)


def get_list_tasks_use_case(repository: TaskRepository) -> ListTasksUseCase:
    return ListTasksUseCase(repository=repository)


def get_update_task_use_case(repository: TaskRepository) -> UpdateTaskUseCase:
    return UpdateTaskUseCase(repository=repository)


def get_delete_task_use_case(repository: TaskRepository) -> DeleteTaskUseCase:
    return DeleteTaskUseCase(repository=repository)
