class TaskNotFoundError(LookupError):
    def __init__(self, task_id: int) -> None:
        super().__init__(f"Task with id {task_id} not found")
        self.task_id = task_id


class TaskValidationError(ValueError):
    """
    Raised when a task's fields violate its constraints.

    `errors` maps each offending field to its list of messages.
    """

    def __init__(self, errors: dict[str, list[str]]) -> None:
        super().__init__(
            "; ".join(
                f"{name}: {message}"
                for name, messages in errors.items()
                for message in messages
            )
        )
        self.errors = errors
