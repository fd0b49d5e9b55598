from core.domain.models.task import TaskStatus

TITLE_MIN_LENGTH = 6
TITLE_MAX_LENGTH = 255

TITLE_BLANK = "Title cannot be blank"
TITLE_TOO_SHORT = (
    f"This value is too short. It should have {TITLE_MIN_LENGTH} characters or more."
)
TITLE_TOO_LONG = (
    f"This value is too long. It should have {TITLE_MAX_LENGTH} characters or less."
)
STATUS_INVALID = f"Status must be one of: {', '.join(TaskStatus.values())}"


def validate_task_fields(title: str | None, status: str | None) -> dict[str, list[str]]:
    """
    Check a candidate task's title and status.

    Returns a mapping of field name to messages; empty when the fields are valid.
    A `None` status is accepted (callers apply the default).
    """
    errors: dict[str, list[str]] = {}

    if title is None or not title.strip():
        errors.setdefault("title", []).append(TITLE_BLANK)
    elif len(title) < TITLE_MIN_LENGTH:
        errors.setdefault("title", []).append(TITLE_TOO_SHORT)
    elif len(title) > TITLE_MAX_LENGTH:
        errors.setdefault("title", []).append(TITLE_TOO_LONG)

    if status is not None and status not in TaskStatus.values():
        errors.setdefault("status", []).append(STATUS_INVALID)

    return errors
