from dataclasses import dataclass

from core.domain.models.task import TaskPage
from core.domain.ports.task_repository import TaskRepository

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
MAX_LIMIT = 100
# Largest OFFSET a signed 64-bit SQL integer can hold.
MAX_OFFSET = 2**63 - 1


@dataclass(slots=True)
class ListTasksCommand:
    status: str | None = None
    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT


def clamp_pagination(page: int, limit: int) -> tuple[int, int]:
    """
    Correct out-of-range pagination input instead of rejecting it.

    A page below 1 becomes 1; a limit outside [1, MAX_LIMIT] falls back to
    DEFAULT_LIMIT rather than the nearest bound.
    """
    if page < 1:
        page = DEFAULT_PAGE
    if limit < 1 or limit > MAX_LIMIT:
        limit = DEFAULT_LIMIT
    return page, limit


class ListTasksUseCase:
    def __init__(self, repository: TaskRepository) -> None:
        self._repository = repository

    def execute(self, cmd: ListTasksCommand | None = None) -> TaskPage:
        cmd = cmd or ListTasksCommand()
        page, limit = clamp_pagination(cmd.page, cmd.limit)
        status = cmd.status or None

        if (page - 1) * limit > MAX_OFFSET:
            # No backend can seek that far, so the page is necessarily empty.
            _, total = self._repository.list(status=status, page=DEFAULT_PAGE, limit=1)
            return TaskPage(items=[], page=page, limit=limit, total=total)

        items, total = self._repository.list(status=status, page=page, limit=limit)
        return TaskPage(items=items, page=page, limit=limit, total=total)
