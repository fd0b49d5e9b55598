import logging

from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import JSONResponse

from backend_fastapi.api.deps import (
    create_task_use_case,
    delete_task_use_case,
    get_task_use_case,
    list_tasks_use_case,
    update_task_use_case,
)
from backend_fastapi.api.schemas import (
    ErrorResponse,
    MessageResponse,
    Pagination,
    TaskIn,
    TaskListResponse,
    TaskMessageResponse,
    TaskOut,
    TaskResponse,
    ValidationErrorResponse,
    WelcomeResponse,
)
from core.application.create_task import CreateTaskCommand, CreateTaskUseCase
from core.application.delete_task import DeleteTaskCommand, DeleteTaskUseCase
from core.application.get_task import GetTaskUseCase
from core.application.list_tasks import (
    DEFAULT_LIMIT,
    DEFAULT_PAGE,
    ListTasksCommand,
    ListTasksUseCase,
)
from core.application.update_task import UpdateTaskCommand, UpdateTaskUseCase
from core.domain.errors import TaskNotFoundError, TaskValidationError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["tasks"])

_ERROR_RESPONSES = {
    status.HTTP_400_BAD_REQUEST: {"model": ValidationErrorResponse},
    status.HTTP_404_NOT_FOUND: {"model": ErrorResponse},
    status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
}


def validation_failed(errors: dict[str, list[str]]) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=ValidationErrorResponse(errors=errors).model_dump(),
    )


def unexpected_failure(message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=ErrorResponse(error=message).model_dump(),
    )


@router.get("", response_model=WelcomeResponse, summary="Welcome message")
def welcome() -> WelcomeResponse:
    return WelcomeResponse(message="Welcome to task manager api!")


@router.get(
    "/tasks",
    response_model=TaskListResponse,
    summary="List tasks",
)
def list_tasks(
    status_filter: str | None = Query(None, alias="status"),
    page: int = DEFAULT_PAGE,
    limit: int = DEFAULT_LIMIT,
    use_case: ListTasksUseCase = Depends(list_tasks_use_case),
) -> TaskListResponse:
    """
    Lists tasks newest first.

    - **status**: only return tasks with this status.
    - **page**: page number, values below 1 are treated as 1.
    - **limit**: tasks per page (1-100), anything else falls back to 10.
    """
    result = use_case.execute(ListTasksCommand(status=status_filter, page=page, limit=limit))
    return TaskListResponse(
        data=[TaskOut.model_validate(task) for task in result.items],
        pagination=Pagination(
            page=result.page,
            record_per_page=result.limit,
            total_tasks=result.total,
        ),
    )


@router.get(
    "/tasks/{task_id}",
    response_model=TaskResponse,
    responses=_ERROR_RESPONSES,
    summary="Show a task",
)
def show_task(
    task_id: int,
    use_case: GetTaskUseCase = Depends(get_task_use_case),
) -> TaskResponse:
    return TaskResponse(data=TaskOut.model_validate(use_case.execute(task_id)))


@router.post(
    "/tasks",
    response_model=TaskMessageResponse,
    status_code=status.HTTP_201_CREATED,
    responses=_ERROR_RESPONSES,
    summary="Create a task",
)
def create_task(
    body: TaskIn,
    use_case: CreateTaskUseCase = Depends(create_task_use_case),
):
    """
    Creates a new task.

    - **title**: 6 to 255 characters, required.
    - **description**: optional free text.
    - **status**: created, in_progress or completed (defaults to created).
    """
    payload = body.model_dump()
    try:
        task = use_case.execute(CreateTaskCommand(**payload))
    except TaskValidationError as e:
        logger.warning(f"Task creation failed validation: input={payload} errors={e.errors}")
        return validation_failed(e.errors)
    except Exception as e:
        logger.error(f"Task creation failed: input={payload}", exc_info=True)
        return unexpected_failure(f"Failed to create task: {e}")

    return TaskMessageResponse(
        data=TaskOut.model_validate(task),
        message="Task created successfully",
    )


@router.put(
    "/tasks/{task_id}",
    response_model=TaskMessageResponse,
    responses=_ERROR_RESPONSES,
    summary="Update a task",
)
def update_task(
    task_id: int,
    body: TaskIn,
    use_case: UpdateTaskUseCase = Depends(update_task_use_case),
):
    """
    Replaces only the fields present in the body.

    - **task_id**: id of the task to modify.
    - **title**, **description**, **status**: each optional.
    """
    payload = body.model_dump(exclude_none=True)
    try:
        task = use_case.execute(task_id, UpdateTaskCommand(**payload))
    except TaskNotFoundError:
        raise
    except TaskValidationError as e:
        logger.warning(
            f"Task {task_id} update failed validation: input={payload} errors={e.errors}"
        )
        return validation_failed(e.errors)
    except Exception as e:
        logger.error(f"Task {task_id} update failed: input={payload}", exc_info=True)
        return unexpected_failure(f"Failed to update task: {e}")

    return TaskMessageResponse(
        data=TaskOut.model_validate(task),
        message="Task updated successfully",
    )


@router.delete(
    "/tasks/{task_id}",
    response_model=MessageResponse,
    responses=_ERROR_RESPONSES,
    summary="Delete a task",
)
def delete_task(
    task_id: int,
    use_case: DeleteTaskUseCase = Depends(delete_task_use_case),
    get_use_case: GetTaskUseCase = Depends(get_task_use_case),
):
    record = TaskOut.model_validate(get_use_case.execute(task_id)).model_dump(mode="json")
    try:
        use_case.execute(DeleteTaskCommand(id=task_id))
    except TaskNotFoundError:
        raise
    except Exception as e:
        logger.error(f"Task {task_id} deletion failed: task={record}", exc_info=True)
        return unexpected_failure(f"Failed to delete task: {e}")

    return MessageResponse(message="Task deleted successfully")
