from sqlalchemy import func, select

from core.domain.errors import TaskNotFoundError
from core.domain.models.task import Task, TaskStatus
from core.domain.ports.task_repository import TaskRepository
from infrastructure.sqlalchemy.session.db import get_session, init_db
from infrastructure.sqlalchemy.model.models import TaskModel


def _to_domain(task_model: TaskModel) -> Task:
    return Task(
        id=task_model.id,
        title=task_model.title,
        description=task_model.description,
        status=TaskStatus(task_model.status),
        created_at=task_model.created_at,
        updated_at=task_model.updated_at,
    )


class SqlAlchemyTaskRepository(TaskRepository):
    def __init__(self) -> None:
        init_db()

    def list(
        self, status: str | None = None, page: int = 1, limit: int = 10
    ) -> tuple[list[Task], int]:
        session = get_session()
        try:
            query = select(TaskModel)
            if status:
                query = query.where(TaskModel.status == status)

            # One transaction for both statements, so the count matches the page.
            with session.begin():
                total = session.scalar(
                    select(func.count()).select_from(query.subquery())
                )
                task_models = session.scalars(
                    query.order_by(TaskModel.created_at.desc(), TaskModel.id.desc())
                    .offset((page - 1) * limit)
                    .limit(limit)
                ).all()
                return [_to_domain(m) for m in task_models], total or 0
        finally:
            session.close()

    def get(self, task_id: int) -> Task | None:
        session = get_session()
        try:
            task_model = session.get(TaskModel, task_id)
            if task_model is None:
                return None
            return _to_domain(task_model)
        finally:
            session.close()

    def add(self, task: Task) -> Task:
        session = get_session()
        try:
            task_model = TaskModel(
                title=task.title,
                description=task.description,
                status=task.status.value,
                created_at=task.created_at,
                updated_at=task.updated_at,
            )
            session.add(task_model)
            session.commit()
            task.id = task_model.id
            return task
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def save(self, task: Task) -> Task:
        session = get_session()
        try:
            task_model = session.get(TaskModel, task.id)
            if task_model is None:
                raise TaskNotFoundError(task.id)
            task_model.title = task.title
            task_model.description = task.description
            task_model.status = task.status.value
            task_model.updated_at = task.updated_at
            session.commit()
            return task
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def delete(self, task_id: int) -> None:
        session = get_session()
        try:
            task_model = session.get(TaskModel, task_id)
            if task_model is None:
                raise TaskNotFoundError(task_id)
            session.delete(task_model)
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()
