from typing import List, Tuple
from core.domain.errors import TaskNotFoundError
from core.domain.models.task import Task, TaskStatus
from core.domain.ports.task_repository import TaskRepository
from infrastructure.peewee.model.models import TaskModel
from infrastructure.peewee.session.db import db


def _to_domain(model: TaskModel) -> Task:
    return Task(
        id=model.id,
        title=model.title,
        description=model.description,
        status=TaskStatus(model.status),
        created_at=model.created_at,
        updated_at=model.updated_at,
    )


class PeeweeTaskRepository(TaskRepository):
    def __init__(self):
        # No migrations yet; the table is created on first use.
        db.connect(reuse_if_open=True)
        db.create_tables([TaskModel], safe=True)

    def list(self, status: str | None = None, page: int = 1, limit: int = 10) -> Tuple[List[Task], int]:
        query = TaskModel.select()
        if status:
            query = query.where(TaskModel.status == status)

        # Page and count read the same snapshot.
        with db.atomic():
            total = query.count()
            rows = (
                query.order_by(TaskModel.created_at.desc(), TaskModel.id.desc())
                .paginate(page, limit)
            )
            tasks = [_to_domain(row) for row in rows]
        return tasks, total

    def get(self, task_id: int) -> Task | None:
        try:
            return _to_domain(TaskModel.get_by_id(task_id))
        except TaskModel.DoesNotExist:
            return None

    def add(self, task: Task) -> Task:
        with db.atomic():
            model = TaskModel.create(
                title=task.title,
                description=task.description,
                status=task.status.value,
                created_at=task.created_at,
                updated_at=task.updated_at,
            )
        task.id = model.id
        return task

    def save(self, task: Task) -> Task:
        with db.atomic():
            updated = (
                TaskModel.update(
                    title=task.title,
                    description=task.description,
                    status=task.status.value,
                    updated_at=task.updated_at,
                )
                .where(TaskModel.id == task.id)
                .execute()
            )
        if not updated:
            raise TaskNotFoundError(task.id)
        return task

    def delete(self, task_id: int) -> None:
        deleted = TaskModel.delete().where(TaskModel.id == task_id).execute()
        if not deleted:
            raise TaskNotFoundError(task_id)
